"""Rewrites that bring a flagged comment into compliance.

Every rewrite is a pure text transform described as a TextEdit against the
original source. Applying an edit returns a new string; nothing is mutated
in place.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from nocomments.classifier import match_suppression
from nocomments.config import DEFAULT_RULES, RuleSet
from nocomments.models import CommentSpan, Verdict, VerdictCategory

REMOVE_TITLE = "Remove unauthorized comment"
ANNOTATE_TITLE = "Keep comment with intentional marker"
NORMALIZE_TITLE = "Normalize suppression punctuation"

_SPACE = " \t"
_OPERATOR_CHARS = "+-*/%&|^<>=!.?:"


class FixKind(Enum):
    """Available rewrite strategies."""

    REMOVE = "remove"
    ANNOTATE = "annotate"
    NORMALIZE = "normalize"


@dataclass(frozen=True)
class TextEdit:
    """Replace source[start:end] with `new_text`."""

    start: int
    end: int
    new_text: str

    def apply(self, source: str) -> str:
        return source[: self.start] + self.new_text + source[self.end :]

    def overlaps(self, other: "TextEdit") -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class Fix:
    """A named edit proposal with a stable identifier."""

    kind: FixKind
    label: str
    key: str
    edit: TextEdit

    def apply(self, source: str) -> str:
        return self.edit.apply(source)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "label": self.label,
            "key": self.key,
            "start": self.edit.start,
            "end": self.edit.end,
            "new_text": self.edit.new_text,
        }


def apply_edit(source: str, edit: TextEdit) -> str:
    return edit.apply(source)


def apply_edits(source: str, edits: Iterable[TextEdit]) -> str:
    """Apply non-overlapping edits to one document.

    Raises:
        ValueError: if two edits overlap.
    """
    ordered = sorted(edits, key=lambda e: (e.start, e.end))
    for previous, current in zip(ordered, ordered[1:]):
        if previous.overlaps(current):
            raise ValueError(
                f"Overlapping edits at {previous.start}-{previous.end} and {current.start}-{current.end}"
            )
    for edit in reversed(ordered):
        source = apply_edit(source, edit)
    return source


def annotate(text: str, marker: str) -> str:
    """Insert `marker` after the opening delimiter, trimming the body.

    Text that already contains `marker` is returned unchanged.

    >>> annotate("//   spaced comment  ", "HUMAN:")
    '// HUMAN: spaced comment'
    """
    if marker in text:
        return text
    if text.startswith("//"):
        body = text[2:].strip()
        return f"// {marker} {body}".rstrip()
    if text.startswith("/*") and text.endswith("*/") and len(text) >= 4:
        body = text[2:-2].strip()
        return f"/* {marker} {body} */" if body else f"/* {marker} */"
    return f"{marker} {text}"


def is_normalizable(text: str, rules: RuleSet = DEFAULT_RULES) -> bool:
    """True when a suppression keyword is followed by non-colon punctuation."""
    found = match_suppression(text, rules)
    return found is not None and found.needs_normalization


def normalize(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    """Rewrite `TODO;`-style punctuation to `TODO:` and upper-case the keyword.

    Returns `text` unchanged when there is nothing to normalize.
    """
    found = match_suppression(text, rules)
    if found is None or not found.needs_normalization:
        return text
    return text[: found.start] + found.keyword.upper() + ":" + text[found.end + 1 :]


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$@"


def _fuses(left: str, right: str) -> bool:
    """True when `left` and `right` would read as one token if adjacent."""
    if _is_word_char(left) and _is_word_char(right):
        return True
    return left in _OPERATOR_CHARS and right in _OPERATOR_CHARS


def removal_edit(span: CommentSpan, source: str | None = None) -> TextEdit:
    """Edit deleting `span`, plus the layout around it that would be left dangling.

    A comment alone on its line is removed with its indentation and line
    terminator. A trailing comment takes the whitespace before it but keeps
    the line break. A comment followed by code on the same line takes the
    whitespace after it, or is replaced by a single space when the code on
    both sides would otherwise run together.
    """
    if source is None or source[span.start : span.end] != span.text:
        return TextEdit(span.start, span.end, "")
    return deletion_edit(source, span.start, span.end)


def deletion_edit(source: str, start: int, end: int) -> TextEdit:
    """Edit deleting source[start:end] and the layout left dangling around it."""
    line_start = max(source.rfind("\n", 0, start), source.rfind("\r", 0, start)) + 1
    starts_line = source[line_start:start].strip(_SPACE) == ""

    tail = end
    while tail < len(source) and source[tail] in _SPACE:
        tail += 1
    ends_line = tail == len(source) or source[tail] in "\r\n"

    if starts_line and ends_line:
        if source.startswith("\r\n", tail):
            tail += 2
        elif tail < len(source):
            tail += 1
        return TextEdit(line_start, tail, "")

    if ends_line:
        head = start
        while head > line_start and source[head - 1] in _SPACE:
            head -= 1
        return TextEdit(head, tail, "")

    if tail == end and _fuses(source[start - 1], source[tail]):
        return TextEdit(start, tail, " ")
    return TextEdit(start, tail, "")


def propose_fixes(
    span: CommentSpan,
    verdict: Verdict,
    rules: RuleSet,
    source: str | None = None,
) -> list[Fix]:
    """Edit proposals for one comment, in display order.

    Flagged comments get Remove, and Annotate unless the default marker is
    already present. Comments whose suppression keyword is followed by
    near-miss punctuation get Normalize.
    """
    fixes: list[Fix] = []

    if verdict.is_flagged:
        fixes.append(
            Fix(FixKind.REMOVE, REMOVE_TITLE, "NC0001.remove", removal_edit(span, source))
        )
        annotated = annotate(span.text, rules.default_marker)
        if annotated != span.text:
            fixes.append(
                Fix(
                    FixKind.ANNOTATE,
                    ANNOTATE_TITLE,
                    "NC0001.annotate",
                    TextEdit(span.start, span.end, annotated),
                )
            )

    normalizable = verdict.is_flagged or verdict.category is VerdictCategory.SUPPRESSION
    if normalizable and rules.enable_suppression and is_normalizable(span.text, rules):
        fixes.append(
            Fix(
                FixKind.NORMALIZE,
                NORMALIZE_TITLE,
                "NC0002.normalize",
                TextEdit(span.start, span.end, normalize(span.text, rules)),
            )
        )

    return fixes
