"""Show the resolved rule set for a file."""

import json
from pathlib import Path

import click

from nocomments.config_runtime import load_project_config
from nocomments.rules.base import DESCRIPTORS, Severity
from nocomments.utils.error_handler import handle_exceptions


@click.command("config")
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option("--root", default=".", type=click.Path(file_okay=False, path_type=Path), help="Project root")
@click.option("--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), help="Config file")
@handle_exceptions
def config_command(path, root, config_file):
    """Print the rule set that applies to PATH as JSON.

    Shows the effective markers, suppression patterns, license patterns and
    toggles after merging the config file, glob overrides and NOCOMMENTS_*
    environment variables, plus the reporting severity of each diagnostic.
    """
    config = load_project_config(root, config_file)
    target = path or Path(root) / "__any__"
    payload = {
        "config_file": str(config.source) if config.source else None,
        "file": str(target),
        "rules": config.rules_for(target).to_dict(),
        "severity": {
            rule_id: Severity.parse(config.severities.get(rule_id), descriptor.default_severity).value
            for rule_id, descriptor in DESCRIPTORS.items()
        },
    }
    click.echo(json.dumps(payload, indent=2))
