"""Runtime settings loading: YAML config file, per-glob overrides, environment.

Produces the flat key -> string mapping that `nocomments.config.resolve`
accepts. Priority (highest to lowest):

1. Environment variables (NOCOMMENTS_<KEY>)
2. `files:` glob sections of the config file matching the file, later wins
3. Top-level keys of the config file
4. Built-in defaults (applied by `resolve`)
"""

import fnmatch
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from nocomments.config import RECOGNIZED_KEYS, RuleSet, normalize_key, resolve
from nocomments.rules.base import DESCRIPTORS
from nocomments.utils.constants import CONFIG_FILE_NAMES, ENV_PREFIX
from nocomments.utils.helpers import normalize_relpath
from nocomments.utils.logging import logger


@dataclass
class ProjectConfig:
    """Parsed project configuration file."""

    root: Path
    source: Path | None = None
    settings: dict[str, str] = field(default_factory=dict)
    overrides: list[tuple[str, dict[str, str]]] = field(default_factory=list)
    severities: dict[str, str] = field(default_factory=dict)

    def settings_for(self, file_path: Path | str, environ: dict[str, str] | None = None) -> dict[str, str]:
        """Merged raw settings for one file."""
        merged = dict(self.settings)
        path = Path(file_path)
        root = self.root.resolve() if path.is_absolute() else self.root
        rel = normalize_relpath(path.as_posix(), root.as_posix())
        for pattern, values in self.overrides:
            if fnmatch.fnmatch(rel, pattern) or fnmatch.fnmatch(Path(rel).name, pattern):
                merged.update(values)
        merged.update(env_settings(environ))
        return merged

    def rules_for(self, file_path: Path | str, environ: dict[str, str] | None = None) -> RuleSet:
        return resolve(self.settings_for(file_path, environ))


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    if value is None:
        return ""
    return str(value)


def _flatten(section: Any, where: str) -> dict[str, str]:
    if not isinstance(section, dict):
        logger.warning("Ignoring non-mapping section {where}", where=where)
        return {}
    flat = {}
    for key, value in section.items():
        if isinstance(value, dict):
            continue
        flat[str(key)] = _stringify(value)
    return flat


def env_settings(environ: dict[str, str] | None = None) -> dict[str, str]:
    """Recognized settings from NOCOMMENTS_* environment variables."""
    environ = os.environ if environ is None else environ
    found = {}
    for key in RECOGNIZED_KEYS:
        env_var = f"{ENV_PREFIX}{key.upper()}"
        if env_var in environ:
            found[key] = environ[env_var]
    return found


def find_config_file(root: Path | str) -> Path | None:
    """First config file name that exists in `root`."""
    for name in CONFIG_FILE_NAMES:
        candidate = Path(root) / name
        if candidate.is_file():
            return candidate
    return None


def load_project_config(root: Path | str = ".", config_file: Path | str | None = None) -> ProjectConfig:
    """Load the project config file. Never raises on a bad file.

    Args:
        root: Project root; globs in `files:` are relative to it.
        config_file: Explicit config path, overriding discovery in `root`.
    """
    root = Path(root)
    path = Path(config_file) if config_file else find_config_file(root)
    config = ProjectConfig(root=root, source=path)

    if path is None:
        return config

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Could not load config file from {path}: {err}", path=path, err=e)
        logger.info("Continuing with default configuration")
        return config

    if data is None:
        return config
    if not isinstance(data, dict):
        logger.warning("Config file {path} is not a mapping, using defaults", path=path)
        return config

    config.settings = _flatten(data, str(path))

    files = data.get("files") or {}
    if isinstance(files, dict):
        for pattern, values in files.items():
            config.overrides.append((str(pattern), _flatten(values, f"files.{pattern}")))
    else:
        logger.warning("Ignoring 'files' in {path}: expected a mapping", path=path)

    severity = data.get("severity") or {}
    if isinstance(severity, dict):
        config.severities = {str(k).upper(): _stringify(v) for k, v in severity.items()}
        for rule_id in sorted(set(config.severities) - set(DESCRIPTORS)):
            logger.warning("Unknown diagnostic id {rule_id} in {path}", rule_id=rule_id, path=path)
    else:
        logger.warning("Ignoring 'severity' in {path}: expected a mapping", path=path)

    unknown = sorted(
        key for key in config.settings if normalize_key(key) not in RECOGNIZED_KEYS
    )
    if unknown:
        logger.debug("Unrecognized settings in {path}: {keys}", path=path, keys=", ".join(unknown))

    return config


def load_settings(
    file_path: Path | str,
    root: Path | str = ".",
    config_file: Path | str | None = None,
    environ: dict[str, str] | None = None,
) -> dict[str, str]:
    """Merged raw settings for one file."""
    return load_project_config(root, config_file).settings_for(file_path, environ)
