"""Comment rules and their shared contracts."""

from .base import (
    DESCRIPTORS,
    SUPPRESSION_PUNCTUATION,
    UNAUTHORIZED_COMMENT,
    DiagnosticDescriptor,
    Finding,
    RuleContext,
    Severity,
)
from .comment_analyze import FileAnalysis, analyze, analyze_file

__all__ = [
    "DESCRIPTORS",
    "SUPPRESSION_PUNCTUATION",
    "UNAUTHORIZED_COMMENT",
    "DiagnosticDescriptor",
    "FileAnalysis",
    "Finding",
    "RuleContext",
    "Severity",
    "analyze",
    "analyze_file",
]
