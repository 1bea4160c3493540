"""CLI commands for configuration: init, templates."""

from __future__ import annotations

import json as json_mod
from pathlib import Path

import click

from jira_tally.cli_common import get_config
from jira_tally.config import CONFIG_DIR_NAME, CONFIG_FILENAME, read_config, write_config


@click.command()
@click.option("--story-point-field", default=None, help="Custom field holding story points (e.g. customfield_10004)")
def init(story_point_field: str | None) -> None:
    """Initialize .jira-tally/ in the current directory."""
    cwd = Path.cwd()
    config_dir = cwd / CONFIG_DIR_NAME

    if config_dir.exists():
        click.echo(f"{CONFIG_DIR_NAME}/ already exists in {cwd}")
        if story_point_field is not None:
            config = read_config(config_dir)
            config["fields"] = {**config.get("fields", {}), "story_point_field": story_point_field}
            write_config(config_dir, config)
            click.echo(f"  Story point field: {story_point_field}")
        return

    config_dir.mkdir()
    config: dict[str, object] = {"templates": {}}
    if story_point_field:
        config["fields"] = {"story_point_field": story_point_field}
    write_config(config_dir, config)

    click.echo(f"Initialized {CONFIG_DIR_NAME}/ in {cwd}")
    click.echo(f"  Config: {config_dir / CONFIG_FILENAME}")
    if story_point_field:
        click.echo(f"  Story point field: {story_point_field}")
    click.echo("\nNext: add templates to config.json, then run jira-tally search --template <name>")


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def templates(ctx: click.Context, as_json: bool) -> None:
    """List the JQL templates in config.json."""
    config = get_config(ctx)
    names = config.template_names()

    if as_json:
        payload = {}
        for name in names:
            tpl = config.templates[name]
            payload[name] = {"query": tpl.query, "count": tpl.count}
        click.echo(json_mod.dumps(payload, indent=2))
        return

    if not names:
        click.echo("No templates configured.")
        return

    width = max(len(n) for n in names)
    for name in names:
        tpl = config.templates[name]
        click.echo(f"{name:<{width}}  {tpl.count:>4}  {tpl.query}")
    click.echo(f"\n{len(names)} templates")
