"""CLI command for searching: search."""

from __future__ import annotations

import sys

import click

from jira_tally.cli_common import get_client, get_config
from jira_tally.client import TrackerError
from jira_tally.fields import StoryPointError
from jira_tally.search import SearchError, resolve_query, run_search
from jira_tally.types import DEFAULT_MAX_RESULTS, SearchOptions


@click.command()
@click.argument("args", nargs=-1)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["list", "table"]),
    default="list",
    help="The format of the output: list, table",
)
@click.option(
    "--max-results",
    default=DEFAULT_MAX_RESULTS,
    type=int,
    help=f"The amount of records to display (default {DEFAULT_MAX_RESULTS})",
)
@click.option("--query", "-q", default="", help="The JQL you want to run")
@click.option("--template", "-t", default="", help="The name of the template that has the JQL you want to run")
@click.pass_context
def search(
    ctx: click.Context,
    args: tuple[str, ...],
    fmt: str,
    max_results: int,
    query: str,
    template: str,
) -> None:
    """Search for issues."""
    opts = SearchOptions(args=args, format=fmt, max_results=max_results, query=query, template=template)  # type: ignore[arg-type]
    config = get_config(ctx)
    try:
        resolved = resolve_query(opts, config)
        run_search(get_client(ctx), config, resolved, opts, sys.stdout)
    except (SearchError, TrackerError, StoryPointError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
