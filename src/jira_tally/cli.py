"""CLI for jira-tally.

Convention-based: discovers .jira-tally/ by walking up from cwd, falling back
to ~/.jira-tally/. Credentials come from JIRA_URL, JIRA_USERNAME and JIRA_TOKEN.

Usage:
    jira-tally init --story-point-field customfield_10004   # Create .jira-tally/
    jira-tally search -q "project = X AND status = Open"     # Ad-hoc JQL
    jira-tally search -t sprint-1 --format table             # Named template
    jira-tally templates                                     # List templates
"""

from __future__ import annotations

from pathlib import Path

import click

from jira_tally import __version__
from jira_tally.cli_commands.admin import init, templates
from jira_tally.cli_commands.search import search


@click.group()
@click.version_option(version=__version__, prog_name="jira-tally")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="JIRA_TALLY_CONFIG_DIR",
    help="Directory holding config.json (default: discover .jira-tally/)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    envvar="JIRA_TALLY_LOG_LEVEL",
    help="Level for .jira-tally/jira-tally.log (default: INFO)",
)
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, log_level: str) -> None:
    """jira-tally — search Jira and tally story points."""
    ctx.ensure_object(dict)
    ctx.obj["config_dir"] = config_dir
    ctx.obj["log_level"] = log_level.upper()


cli.add_command(init)
cli.add_command(search)
cli.add_command(templates)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
