"""Multi-file driver: discover sources, analyze each file, apply fixes.

Files are independent; each one is read, resolved against its own rule set
and analyzed in isolation. Fixes for one file are applied in a single
serialized pass.
"""

import difflib
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from nocomments.config_runtime import ProjectConfig
from nocomments.rewriter import FixKind, TextEdit, apply_edits, deletion_edit
from nocomments.rules.base import RuleContext
from nocomments.rules.comment_analyze import FileAnalysis, analyze_file
from nocomments.utils.constants import DEFAULT_EXTENSIONS, DEFAULT_MAX_FILE_SIZE
from nocomments.utils.helpers import discover_source_files
from nocomments.utils.logging import logger


@dataclass
class RunSummary:
    """Aggregated outcome of one run over many files."""

    analyses: list[FileAnalysis] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)

    @property
    def findings(self):
        return [f for analysis in self.analyses for f in analysis.findings]

    @property
    def flagged_count(self) -> int:
        return sum(len(analysis.flagged) for analysis in self.analyses)

    def to_dict(self) -> dict:
        return {
            "files": len(self.analyses),
            "skipped": [{"file": path, "reason": reason} for path, reason in self.skipped],
            "flagged": self.flagged_count,
            "findings": [f.to_dict() for f in self.findings],
        }


@dataclass
class FixResult:
    """Outcome of fixing one file."""

    file_path: Path
    original: str
    updated: str
    applied: int

    @property
    def changed(self) -> bool:
        return self.original != self.updated

    def diff(self) -> str:
        return "".join(
            difflib.unified_diff(
                self.original.splitlines(keepends=True),
                self.updated.splitlines(keepends=True),
                fromfile=f"a/{self.file_path.as_posix()}",
                tofile=f"b/{self.file_path.as_posix()}",
            )
        )


def read_source(path: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a source file as text.

    Raises:
        OSError: unreadable file.
        ValueError: file larger than `max_size`, or not valid UTF-8
            (`UnicodeDecodeError`).
    """
    size = path.stat().st_size
    if size > max_size:
        raise ValueError(f"file is {size} bytes, limit is {max_size}")
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def analyze_path(path: Path, config: ProjectConfig, content: str | None = None) -> FileAnalysis:
    """Analyze one file with its resolved rule set."""
    if content is None:
        content = read_source(path)
    context = RuleContext(
        file_path=path,
        content=content,
        rules=config.rules_for(path),
        severities=config.severities,
    )
    return analyze_file(context)


def run_check(
    paths: Iterable[Path | str],
    config: ProjectConfig,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> RunSummary:
    """Analyze every source file under `paths`."""
    summary = RunSummary()
    for path in discover_source_files(paths, extensions):
        try:
            analysis = analyze_path(path, config)
        except (OSError, ValueError) as e:
            logger.warning("Skipping {path}: {err}", path=path, err=e)
            summary.skipped.append((str(path), str(e)))
            continue
        summary.analyses.append(analysis)
    logger.info(
        "Analyzed {files} files, {flagged} unauthorized comments",
        files=len(summary.analyses),
        flagged=summary.flagged_count,
    )
    return summary


def collect_edits(analysis: FileAnalysis, kind: FixKind) -> list[TextEdit]:
    """One edit of the requested kind per finding.

    Overlapping deletions (two removed comments sharing the whitespace
    between them) are merged into one deletion, widened again over the
    layout the merged range leaves behind. Any other overlapping edit is
    dropped.
    """
    source = analysis.rule_context.content if analysis.rule_context else None
    edits: list[TextEdit] = []
    for finding in analysis.findings:
        for fix in finding.fixes:
            if fix.kind is not kind:
                continue
            edit = fix.edit
            while edit is not None:
                clashing = [existing for existing in edits if edit.overlaps(existing)]
                if not clashing:
                    edits.append(edit)
                    break
                if edit.new_text or any(existing.new_text for existing in clashing):
                    logger.debug("Dropping overlapping {key} edit in {path}", key=fix.key, path=analysis.file_path)
                    edit = None
                    break
                for existing in clashing:
                    edits.remove(existing)
                start = min(e.start for e in (edit, *clashing))
                end = max(e.end for e in (edit, *clashing))
                edit = deletion_edit(source, start, end) if source is not None else TextEdit(start, end, "")
            break
    return edits


def fix_path(path: Path, config: ProjectConfig, kind: FixKind, write: bool = True) -> FixResult:
    """Apply every `kind` fix proposed for one file."""
    original = read_source(path)
    analysis = analyze_path(path, config, original)
    edits = collect_edits(analysis, kind)
    updated = apply_edits(original, edits)
    if write and updated != original:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(updated)
    return FixResult(path, original, updated, len(edits))


def run_fix(
    paths: Iterable[Path | str],
    config: ProjectConfig,
    kind: FixKind,
    write: bool = True,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[FixResult]:
    """Apply fixes file by file."""
    results = []
    for path in discover_source_files(paths, extensions):
        try:
            results.append(fix_path(path, config, kind, write=write))
        except (OSError, ValueError) as e:
            logger.warning("Skipping {path}: {err}", path=path, err=e)
    return results
