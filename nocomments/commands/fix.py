"""Apply comment rewrites in place."""

from pathlib import Path

import click

from nocomments.config_runtime import load_project_config
from nocomments.pipeline.runner import run_fix
from nocomments.pipeline.ui import console, print_success
from nocomments.rewriter import FixKind
from nocomments.utils.constants import DEFAULT_EXTENSIONS
from nocomments.utils.error_handler import handle_exceptions


@click.command("fix")
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option(
    "--strategy",
    type=click.Choice([kind.value for kind in FixKind]),
    default=FixKind.ANNOTATE.value,
    show_default=True,
    help="Rewrite to apply to every applicable comment",
)
@click.option("--root", default=".", type=click.Path(file_okay=False, path_type=Path), help="Project root")
@click.option("--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), help="Config file")
@click.option("--ext", "extensions", multiple=True, help="File extensions to scan (repeatable)")
@click.option("--dry-run", is_flag=True, help="Print a unified diff instead of writing files")
@handle_exceptions
def fix(paths, strategy, root, config_file, extensions, dry_run):
    """Rewrite flagged comments.

    \b
    Strategies:
      remove     delete the comment (and its line when it stands alone)
      annotate   insert the default intentional marker, e.g. // HUMAN: text
      normalize  turn `TODO;` / `FIXME,` style punctuation into `TODO:`

    Examples:
      nocomments fix src/ --strategy annotate
      nocomments fix Program.cs --strategy remove --dry-run
    """
    config = load_project_config(root, config_file)
    kind = FixKind(strategy)
    results = run_fix(
        paths or (root,), config, kind, write=not dry_run, extensions=extensions or DEFAULT_EXTENSIONS
    )

    changed = [r for r in results if r.changed]
    if dry_run:
        for result in changed:
            click.echo(result.diff(), nl=False)
        return

    for result in changed:
        console.print(f"[path]{result.file_path}[/path]: {result.applied} {kind.value} edit(s)")
    total = sum(r.applied for r in changed)
    print_success(f"Applied {total} {kind.value} edit(s) in {len(changed)} file(s)")
