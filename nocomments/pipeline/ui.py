"""Central UI handler for nocomments.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from nocomments.pipeline.ui import console, print_header, print_success

    console.print("[success]No unauthorized comments[/success]")
    print_header("COMMENT AUDIT")
"""

import sys

from rich.console import Console
from rich.theme import Theme

NOCOMMENTS_THEME = Theme(
    {
        "info": "bold cyan",
        "warning": "bold yellow",
        "error": "bold red",
        "success": "bold green",
        "cmd": "bold magenta",
        "path": "bold cyan",
        "dim": "dim white",
    }
)

# Single console instance - import this, don't create your own
console = Console(theme=NOCOMMENTS_THEME, force_terminal=sys.stdout.isatty())

SEVERITY_STYLES = {
    "error": "error",
    "warning": "warning",
    "info": "info",
    "hidden": "dim",
}


def print_header(title: str) -> None:
    """Print a styled section header with horizontal rules."""
    console.rule(f"[bold]{title}[/bold]")


def print_success(msg: str) -> None:
    console.print(f"[success]OK:[/success] {msg}")


def severity_markup(severity: str) -> str:
    """Severity name wrapped in its theme style."""
    style = SEVERITY_STYLES.get(severity, "info")
    return f"[{style}]{severity}[/{style}]"


def verdict_markup(verdict) -> str:
    """`Flagged` in the warning style, allowed verdicts dimmed."""
    style = "warning" if verdict.is_flagged else "dim"
    return f"[{style}]{verdict}[/{style}]"
