"""nocomments CLI - main entry point and command registration hub."""
# ruff: noqa: E402 - commands imported after cli group definition

import click
from rich.table import Table

from nocomments import __version__
from nocomments.pipeline.ui import console
from nocomments.utils.logging import LEVELS, configure


class VerboseGroup(click.Group):
    """Help output grouped by category."""

    COMMAND_CATEGORIES = {
        "ANALYSIS": {
            "title": "ANALYSIS",
            "description": "Find comments that are not authorized",
            "commands": ["check", "config"],
        },
        "REWRITES": {
            "title": "REWRITES",
            "description": "Bring flagged comments into compliance",
            "commands": ["fix"],
        },
    }

    def format_commands(self, ctx, formatter):
        """Suppress the default listing; format_help prints categories."""
        pass

    def format_help(self, ctx, formatter):
        super().format_help(ctx, formatter)

        registered = {
            name: cmd for name, cmd in self.commands.items() if not getattr(cmd, "hidden", False)
        }

        console.print()
        console.rule("[bold]COMMANDS[/bold]")
        for category in self.COMMAND_CATEGORIES.values():
            console.print(f"\n[bold cyan]{category['title']}[/bold cyan]")
            console.print(f"[dim]{category['description']}[/dim]")

            table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
            table.add_column("Command", style="cmd", width=12)
            table.add_column("Description", style="white")
            for name in category["commands"]:
                cmd = registered.get(name)
                if cmd is None:
                    continue
                first_line = (cmd.help or "").split("\n")[0].strip()
                table.add_row(name, first_line)
            console.print(table)

        console.print()
        console.rule()
        console.print("For detailed options: [cmd]nocomments <command> --help[/cmd]")


@click.group(cls=VerboseGroup)
@click.version_option(version=__version__, prog_name="nocomments")
@click.help_option("-h", "--help")
@click.option(
    "--log-level",
    type=click.Choice(LEVELS, case_sensitive=False),
    help="Log level for this run (overrides NOCOMMENTS_LOG_LEVEL)",
)
def cli(log_level):
    """nocomments - keep source comments intentional

    \b
    QUICK START:
      nocomments check src/                    # Report unauthorized comments
      nocomments fix src/ --strategy annotate  # Mark them as intentional
      nocomments config src/Program.cs         # Show the effective rules"""
    if log_level:
        configure(level=log_level)


from nocomments.commands.check import check
from nocomments.commands.config import config_command
from nocomments.commands.fix import fix

cli.add_command(check)
cli.add_command(fix)
cli.add_command(config_command, name="config")


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
