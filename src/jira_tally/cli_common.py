"""Shared CLI helpers for ``cli.py`` and the ``cli_commands/*.py`` modules.

Provides ``get_config()`` and ``get_client()`` so commands can reach the
configuration store and the tracker client without circular imports.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from jira_tally.client import JiraClient, TrackerError
from jira_tally.config import Config, find_config_dir
from jira_tally.logging import setup_logging
from jira_tally.types import IssueSearcher


def resolve_config_dir(ctx: click.Context) -> Path | None:
    """Return the configured or discovered .jira-tally/ directory, if any."""
    explicit: Path | None = ctx.obj.get("config_dir")
    if explicit is not None:
        return explicit
    try:
        return find_config_dir()
    except FileNotFoundError:
        return None


def get_config(ctx: click.Context) -> Config:
    """Load config.json and start file logging; an empty Config when none exists."""
    config_dir = resolve_config_dir(ctx)
    if config_dir is None or not config_dir.is_dir():
        return Config()
    setup_logging(config_dir, ctx.obj.get("log_level", "INFO"))
    return Config.load(config_dir)


def get_client(ctx: click.Context) -> IssueSearcher:
    """Return the injected client (``obj["client"]``) or one built from the environment."""
    client: IssueSearcher | None = ctx.obj.get("client")
    if client is not None:
        return client
    try:
        jira = JiraClient.from_env()
    except TrackerError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    ctx.call_on_close(jira.close)
    return jira
