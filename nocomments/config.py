"""Rule configuration: resolve flat key/value settings into a RuleSet."""

from collections.abc import Mapping
from dataclasses import dataclass

from nocomments.utils.logging import logger

DEFAULT_MARKERS = ("HUMAN:", "NOTE:", "INTENT:", "OK:", "[!]")
DEFAULT_SUPPRESSIONS = ("TODO:", "HACK:", "FIXME:")
DEFAULT_LICENSE_PATTERNS = ("Copyright", "Licensed", "SPDX-License-Identifier")

FALLBACK_MARKER = "NOTE:"

KEY_PREFIX = "nocomments."

LIST_KEYS = {
    "intentional_markers": "marker_patterns",
    "suppression_patterns": "suppression_patterns",
    "license_patterns": "license_patterns",
}

TOGGLE_KEYS = {
    "enable_intentional_markers_check": "enable_markers",
    "enable_suppression_patterns_check": "enable_suppression",
    "enable_license_banner_check": "enable_license_banner",
    "enable_doc_comment_check": "enable_doc_exclusion",
}

DISABLE_KEY = "disable_for_file"

RECOGNIZED_KEYS = frozenset(LIST_KEYS) | frozenset(TOGGLE_KEYS) | {DISABLE_KEY}

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


@dataclass(frozen=True)
class RuleSet:
    """Resolved, immutable rule configuration for one file analysis."""

    marker_patterns: tuple[str, ...] = DEFAULT_MARKERS
    suppression_patterns: tuple[str, ...] = DEFAULT_SUPPRESSIONS
    license_patterns: tuple[str, ...] = DEFAULT_LICENSE_PATTERNS
    enable_markers: bool = True
    enable_suppression: bool = True
    enable_license_banner: bool = True
    enable_doc_exclusion: bool = True
    disabled_for_file: bool = False

    def __post_init__(self):
        # Accept any iterable of strings from programmatic callers
        for name in ("marker_patterns", "suppression_patterns", "license_patterns"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def default_marker(self) -> str:
        """Marker inserted by the annotate fix."""
        for marker in self.marker_patterns:
            if marker.endswith(":"):
                return marker
        return FALLBACK_MARKER

    @property
    def suppression_keywords(self) -> tuple[str, ...]:
        """Bare suppression keywords, trailing colon removed, empties dropped."""
        keywords = []
        for pattern in self.suppression_patterns:
            keyword = pattern.strip().removesuffix(":").strip()
            if keyword:
                keywords.append(keyword)
        return tuple(keywords)

    def to_dict(self) -> dict:
        return {
            "intentional_markers": list(self.marker_patterns),
            "suppression_patterns": list(self.suppression_patterns),
            "license_patterns": list(self.license_patterns),
            "enable_intentional_markers_check": self.enable_markers,
            "enable_suppression_patterns_check": self.enable_suppression,
            "enable_license_banner_check": self.enable_license_banner,
            "enable_doc_comment_check": self.enable_doc_exclusion,
            "disable_for_file": self.disabled_for_file,
        }


DEFAULT_RULES = RuleSet()


def normalize_key(key: str) -> str:
    """Lower-case a settings key and strip the optional `nocomments.` prefix."""
    key = key.strip().lower()
    if key.startswith(KEY_PREFIX):
        key = key[len(KEY_PREFIX) :]
    return key


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse a boolean setting, returning `default` when it does not parse."""
    if value is None:
        return default
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return default


def parse_list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    """Split a comma-separated list; an empty result keeps `default`."""
    if value is None:
        return default
    items = tuple(item.strip() for item in str(value).split(","))
    items = tuple(item for item in items if item)
    return items or default


def resolve(raw_settings: Mapping[str, str] | None) -> RuleSet:
    """Resolve raw settings into a RuleSet. Never raises.

    Unknown keys are ignored. Malformed toggles fall back to True, a
    malformed `disable_for_file` falls back to False, and list keys that
    yield no entries keep their defaults.
    """
    settings: dict[str, str] = {}
    for key, value in (raw_settings or {}).items():
        if not isinstance(key, str):
            continue
        name = normalize_key(key)
        if name in RECOGNIZED_KEYS:
            settings[name] = value
        else:
            logger.debug("Ignoring unknown setting {key}", key=key)

    values: dict[str, object] = {}
    for key, attr in LIST_KEYS.items():
        default = getattr(DEFAULT_RULES, attr)
        values[attr] = parse_list(settings.get(key), default)

    for key, attr in TOGGLE_KEYS.items():
        raw = settings.get(key)
        values[attr] = parse_bool(raw, True)
        if raw is not None and str(raw).strip().lower() not in _TRUE | _FALSE:
            logger.debug("Setting {key}={raw!r} is not a boolean, using true", key=key, raw=raw)

    raw = settings.get(DISABLE_KEY)
    values["disabled_for_file"] = parse_bool(raw, False)

    return RuleSet(**values)
