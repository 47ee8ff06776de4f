"""Base contracts for comment rules: descriptors, findings and rule context."""

import bisect
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from nocomments.config import DEFAULT_RULES, RuleSet


class Severity(Enum):
    """Reporting severity; hosts may override it per diagnostic id."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HIDDEN = "hidden"

    @classmethod
    def parse(cls, value: "Severity | str | None", default: "Severity") -> "Severity":
        """Parse a severity name, falling back to `default`."""
        if isinstance(value, Severity):
            return value
        if value is None:
            return default
        text = str(value).strip().lower()
        aliases = {"warn": "warning", "suggestion": "info", "none": "hidden", "silent": "hidden"}
        text = aliases.get(text, text)
        try:
            return cls(text)
        except ValueError:
            return default


@dataclass(frozen=True)
class DiagnosticDescriptor:
    """Fixed identity of one diagnostic."""

    id: str
    title: str
    message_format: str
    category: str
    default_severity: Severity
    help_uri: str = ""


UNAUTHORIZED_COMMENT = DiagnosticDescriptor(
    id="NC0001",
    title="Unauthorized comment detected",
    message_format=(
        "Comments must use intentional markers ({markers}) or be {suppressions} patterns, "
        "or file-level license banners"
    ),
    category="Formatting",
    default_severity=Severity.WARNING,
)

SUPPRESSION_PUNCTUATION = DiagnosticDescriptor(
    id="NC0002",
    title="Suppression comment punctuation",
    message_format="Suppression keyword '{keyword}' should be followed by ':'",
    category="Formatting",
    default_severity=Severity.INFO,
)

DESCRIPTORS = {d.id: d for d in (UNAUTHORIZED_COMMENT, SUPPRESSION_PUNCTUATION)}


@dataclass
class RuleContext:
    """Everything a comment rule needs to analyze one file."""

    file_path: Path
    content: str
    rules: RuleSet = DEFAULT_RULES
    severities: dict[str, str] = field(default_factory=dict)
    _line_starts: list[int] | None = field(default=None, init=False, repr=False)

    def severity_for(self, descriptor: DiagnosticDescriptor) -> Severity:
        return Severity.parse(self.severities.get(descriptor.id), descriptor.default_severity)

    def position(self, offset: int) -> tuple[int, int]:
        """1-based (line, column) of a character offset."""
        if self._line_starts is None:
            starts = [0]
            text = self.content
            i = 0
            while i < len(text):
                ch = text[i]
                if ch == "\r" and text.startswith("\r\n", i):
                    starts.append(i + 2)
                    i += 2
                    continue
                if ch in "\r\n":
                    starts.append(i + 1)
                i += 1
            self._line_starts = starts
        offset = max(0, min(offset, len(self.content)))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return line + 1, offset - self._line_starts[line] + 1


@dataclass
class Finding:
    """Standardized output of a comment rule."""

    rule_id: str
    message: str
    file_path: str
    line: int
    column: int
    end_line: int
    end_column: int
    severity: Severity = Severity.WARNING
    category: str = "Formatting"
    snippet: str = ""
    verdict: str = "Flagged"
    fixes: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "rule": self.rule_id,
            "message": self.message,
            "file": self.file_path,
            "line": self.line,
            "column": self.column,
            "end_line": self.end_line,
            "end_column": self.end_column,
            "severity": self.severity.value,
            "category": self.category,
            "verdict": self.verdict,
            "code_snippet": self.snippet,
            "fixes": [fix.to_dict() for fix in self.fixes],
        }
