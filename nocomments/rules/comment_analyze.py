"""Unauthorized comment detection for one source file.

Runs the full pass: tokenize, resolve blocks, classify every comment and
attach fix proposals to each reportable verdict.
"""

from dataclasses import dataclass, field
from pathlib import Path

from nocomments.blocks import resolve_blocks
from nocomments.classifier import classify_file, match_suppression
from nocomments.models import CommentSpan, FileContext, Verdict, VerdictCategory
from nocomments.rewriter import propose_fixes
from nocomments.rules.base import (
    SUPPRESSION_PUNCTUATION,
    UNAUTHORIZED_COMMENT,
    Finding,
    RuleContext,
    Severity,
)
from nocomments.tokenizer import LIFETIME_SUFFIXES, TokenizedSource, tokenize
from nocomments.utils.logging import logger


@dataclass
class FileAnalysis:
    """Result of analyzing one file."""

    file_path: str
    tokens: TokenizedSource
    context: FileContext
    verdicts: list[tuple[CommentSpan, Verdict]] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)
    rule_context: RuleContext | None = None

    @property
    def flagged(self) -> list[Finding]:
        return [f for f in self.findings if f.rule_id == UNAUTHORIZED_COMMENT.id]

    def line_of(self, offset: int) -> int:
        if self.rule_context is None:
            return 0
        return self.rule_context.position(offset)[0]


def _finding(
    context: RuleContext, span: CommentSpan, verdict: Verdict, rule_id: str, message: str, severity
) -> Finding:
    line, column = context.position(span.start)
    end_line, end_column = context.position(span.end)
    fixes = propose_fixes(span, verdict, context.rules, source=context.content)
    return Finding(
        rule_id=rule_id,
        message=message,
        file_path=str(context.file_path),
        line=line,
        column=column,
        end_line=end_line,
        end_column=end_column,
        severity=severity,
        category=UNAUTHORIZED_COMMENT.category,
        snippet=span.text,
        verdict=str(verdict),
        fixes=fixes,
    )


def analyze_file(context: RuleContext) -> FileAnalysis:
    """Classify every comment in the file and build findings."""
    rules = context.rules
    lifetimes = Path(context.file_path).suffix.lower() in LIFETIME_SUFFIXES
    tokens = tokenize(context.content, lifetimes=lifetimes)
    blocks = resolve_blocks(tokens.comments, tokens.trivia)
    file_context = FileContext(blocks=blocks, anchor=tokens.anchor)
    verdicts = classify_file(tokens.comments, file_context, rules)

    logger.debug(
        "{path}: {comments} comments, {blocks} blocks, anchor={anchor}",
        path=context.file_path,
        comments=len(tokens.comments),
        blocks=len(blocks),
        anchor=tokens.anchor,
    )

    analysis = FileAnalysis(str(context.file_path), tokens, file_context, verdicts, rule_context=context)

    flagged_severity = context.severity_for(UNAUTHORIZED_COMMENT)
    punctuation_severity = context.severity_for(SUPPRESSION_PUNCTUATION)
    flagged_message = UNAUTHORIZED_COMMENT.message_format.format(
        markers=", ".join(rules.marker_patterns),
        suppressions="/".join(rules.suppression_keywords),
    )

    for span, verdict in verdicts:
        if verdict.is_flagged:
            if flagged_severity is Severity.HIDDEN:
                continue
            analysis.findings.append(
                _finding(context, span, verdict, UNAUTHORIZED_COMMENT.id, flagged_message, flagged_severity)
            )
        elif verdict.category is VerdictCategory.SUPPRESSION:
            if punctuation_severity is Severity.HIDDEN:
                continue
            found = match_suppression(span.text, rules)
            if found is None or not found.needs_normalization:
                continue
            message = SUPPRESSION_PUNCTUATION.message_format.format(keyword=found.keyword.upper())
            analysis.findings.append(
                _finding(context, span, verdict, SUPPRESSION_PUNCTUATION.id, message, punctuation_severity)
            )

    return analysis


def analyze(context: RuleContext) -> list[Finding]:
    """Rule entry point: findings for one file."""
    return analyze_file(context).findings
