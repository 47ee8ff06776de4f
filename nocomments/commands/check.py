"""Report unauthorized comments."""

import json
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from nocomments.config_runtime import load_project_config
from nocomments.pipeline.runner import run_check
from nocomments.pipeline.ui import console, print_header, print_success, severity_markup, verdict_markup
from nocomments.utils.constants import DEFAULT_EXTENSIONS
from nocomments.utils.error_handler import handle_exceptions
from nocomments.utils.exit_codes import ExitCodes
from nocomments.utils.helpers import save_json_file


@click.command("check")
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option("--root", default=".", type=click.Path(file_okay=False, path_type=Path), help="Project root")
@click.option("--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), help="Config file")
@click.option("--ext", "extensions", multiple=True, help="File extensions to scan (repeatable)")
@click.option("--json", "as_json", is_flag=True, help="Print findings as JSON")
@click.option("--output", "output_json", type=click.Path(dir_okay=False), help="Write findings JSON here")
@click.option("--show-verdicts", is_flag=True, help="List every comment with its verdict")
@click.option("--max-rows", default=50, type=int, show_default=True, help="Maximum rows in the table")
@handle_exceptions
def check(paths, root, config_file, extensions, as_json, output_json, show_verdicts, max_rows):
    """Report comments that are not authorized.

    A comment is authorized when it is a documentation comment, carries an
    intentional marker (HUMAN:, NOTE:, INTENT:, OK:, [!]), starts with a
    TODO/HACK/FIXME keyword, belongs to a license banner before the first
    declaration, or starts with `nocomments:disable`.

    Examples:
      nocomments check src/
      nocomments check Program.cs --json
      nocomments check . --ext .cs --output findings.json

    Exit codes:
      0 - no unauthorized comments
      1 - unauthorized comments found
      3 - nothing could be analyzed
    """
    config = load_project_config(root, config_file)
    summary = run_check(paths or (root,), config, extensions or DEFAULT_EXTENSIONS)

    if output_json:
        save_json_file(summary.to_dict(), output_json)

    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
    else:
        _render(summary, show_verdicts, max_rows)

    exit_code = ExitCodes.SUCCESS
    if not summary.analyses and summary.skipped:
        exit_code = ExitCodes.TASK_INCOMPLETE
    elif summary.flagged_count:
        exit_code = ExitCodes.FLAGGED_COMMENTS

    if not as_json:
        console.print(f"[dim]exit {exit_code}: {ExitCodes.get_description(exit_code)}[/dim]")
    if exit_code != ExitCodes.SUCCESS:
        raise SystemExit(exit_code)


def _render(summary, show_verdicts: bool, max_rows: int) -> None:
    print_header("COMMENT AUDIT")

    if show_verdicts:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Location", style="path")
        table.add_column("Verdict")
        table.add_column("Comment", overflow="fold")
        for analysis in summary.analyses:
            for span, verdict in analysis.verdicts:
                line = analysis.line_of(span.start)
                table.add_row(f"{analysis.file_path}:{line}", verdict_markup(verdict), escape(span.text))
        console.print(table)

    findings = summary.findings
    if findings:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Location", style="path")
        table.add_column("Rule")
        table.add_column("Severity")
        table.add_column("Comment", overflow="fold")
        for finding in findings[:max_rows]:
            table.add_row(
                f"{finding.file_path}:{finding.line}:{finding.column}",
                finding.rule_id,
                severity_markup(finding.severity.value),
                escape(finding.snippet),
            )
        console.print(table)
        if len(findings) > max_rows:
            console.print(f"[dim]... {len(findings) - max_rows} more not shown[/dim]")

    for path, reason in summary.skipped:
        console.print(f"[warning]Skipped[/warning] [path]{path}[/path]: {reason}")

    if summary.flagged_count:
        console.print(
            f"[error]{summary.flagged_count} unauthorized comment(s)[/error] "
            f"in {len(summary.analyses)} file(s)"
        )
    else:
        print_success(f"No unauthorized comments in {len(summary.analyses)} file(s)")
