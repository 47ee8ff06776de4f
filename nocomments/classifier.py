"""Comment classifier.

Rules are evaluated in a fixed order and the first match wins:

1. doc comments (when doc exclusion is enabled)
2. file-level disable
3. inline `nocomments:disable` directive (cannot itself be disabled)
4. intentional markers (case-sensitive substring)
5. suppression keywords (case-insensitive prefix, word boundary enforced)
6. license banner (block-level, before the declaration anchor)

Anything left over is flagged. Classification is a pure function of the
span, the file context and the rule set.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from nocomments.config import RuleSet
from nocomments.models import (
    FLAGGED,
    CommentBlock,
    CommentKind,
    CommentSpan,
    FileContext,
    Verdict,
    VerdictCategory,
)

INLINE_DISABLE = "nocomments:disable"

_OPEN_STRIP = "/* \t\r\n"
_CLOSE_STRIP = "*/ \t\r\n"


@dataclass(frozen=True)
class SuppressionMatch:
    """Where a suppression keyword was found in a comment's raw text."""

    keyword: str
    start: int
    end: int
    follower: str

    @property
    def needs_normalization(self) -> bool:
        """True when the keyword is followed by punctuation other than a colon."""
        return bool(self.follower) and self.follower != ":" and not (
            self.follower.isalnum() or self.follower.isspace()
        )


def body_offset(text: str) -> int:
    """Offset of the comment body, past delimiters, `*` gutters and line breaks."""
    return len(text) - len(text.lstrip(_OPEN_STRIP))


def normalize_text(text: str) -> str:
    """Strip comment delimiters and surrounding whitespace."""
    body = text[body_offset(text) :]
    if text.startswith("/*"):
        body = body.rstrip(_CLOSE_STRIP)
    return body.strip()


def is_inline_disabled(text: str) -> bool:
    """True for comments starting with the inline disable directive."""
    return normalize_text(text).lower().startswith(INLINE_DISABLE)


def contains_marker(text: str, rules: RuleSet) -> bool:
    """Case-sensitive substring test against every configured marker."""
    return any(marker and marker in text for marker in rules.marker_patterns)


def match_suppression(text: str, rules: RuleSet) -> SuppressionMatch | None:
    """Find a suppression keyword at the start of the comment body.

    The character after the keyword may be any punctuation, whitespace or
    the end of the comment, but never an alphanumeric continuation, so
    `TODO;` matches while `TODOLIST` does not.
    """
    start = body_offset(text)
    body = text[start:]
    if text.startswith("/*") and body.endswith("*/"):
        body = body[:-2]
    lowered = body.lower()

    for keyword in rules.suppression_keywords:
        if not lowered.startswith(keyword.lower()):
            continue
        follower = body[len(keyword) : len(keyword) + 1]
        if follower and (follower.isalnum() or follower == "_"):
            continue
        return SuppressionMatch(keyword, start, start + len(keyword), follower)
    return None


def contains_license_text(text: str, rules: RuleSet) -> bool:
    """Case-insensitive substring test against every license pattern."""
    lowered = text.lower()
    return any(pattern and pattern.lower() in lowered for pattern in rules.license_patterns)


def _before_anchor(offset: int, anchor: int | None) -> bool:
    return anchor is None or offset < anchor


def is_license_banner(span: CommentSpan, context: FileContext, rules: RuleSet) -> bool:
    """True when the span's whole block precedes the anchor and mentions a license."""
    if not _before_anchor(span.start, context.anchor):
        return False
    block: CommentBlock = context.block_of(span)
    if context.anchor is not None and block.end > context.anchor:
        return False
    return any(contains_license_text(member.text, rules) for member in block.spans)


def classify(span: CommentSpan, context: FileContext, rules: RuleSet) -> Verdict:
    """Classify one comment."""
    if span.kind is CommentKind.DOC and rules.enable_doc_exclusion:
        return Verdict.allowed(VerdictCategory.DOC)

    if rules.disabled_for_file:
        return Verdict.allowed(VerdictCategory.FILE_DISABLED)

    return _classify_enabled(span, context, rules)


def _classify_enabled(span: CommentSpan, context: FileContext, rules: RuleSet) -> Verdict:
    if is_inline_disabled(span.text):
        return Verdict.allowed(VerdictCategory.INLINE_DISABLED)

    if rules.enable_markers and contains_marker(span.text, rules):
        return Verdict.allowed(VerdictCategory.MARKER)

    if rules.enable_suppression and match_suppression(span.text, rules) is not None:
        return Verdict.allowed(VerdictCategory.SUPPRESSION)

    if rules.enable_license_banner and is_license_banner(span, context, rules):
        return Verdict.allowed(VerdictCategory.LICENSE_BANNER)

    return FLAGGED


def classify_file(
    comments: Iterable[CommentSpan], context: FileContext, rules: RuleSet
) -> list[tuple[CommentSpan, Verdict]]:
    """Classify every comment of a file in source order.

    The file-level disable is evaluated once for the whole file; doc
    comments keep their own verdict either way.
    """
    results = []
    file_disabled = Verdict.allowed(VerdictCategory.FILE_DISABLED)
    doc = Verdict.allowed(VerdictCategory.DOC)

    for span in comments:
        if span.kind is CommentKind.DOC and rules.enable_doc_exclusion:
            results.append((span, doc))
        elif rules.disabled_for_file:
            results.append((span, file_disabled))
        else:
            results.append((span, _classify_enabled(span, context, rules)))
    return results
