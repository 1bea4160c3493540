"""Configuration discovery and typed access.

Convention-based discovery: each project (or the user's home directory) has a
``.jira-tally/`` directory containing ``config.json`` with named JQL templates
and field mappings.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jira_tally.types import ConfigFile, TemplateDefinition

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".jira-tally"
CONFIG_FILENAME = "config.json"


# ---------------------------------------------------------------------------
# Convention-based discovery
# ---------------------------------------------------------------------------


def find_config_dir(start: Path | None = None) -> Path:
    """Walk up from start (default cwd) looking for .jira-tally/, then try ~.

    Returns the .jira-tally/ directory path (not the project root).
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        candidate = parent / CONFIG_DIR_NAME
        if candidate.is_dir():
            return candidate
    home_candidate = Path.home() / CONFIG_DIR_NAME
    if home_candidate.is_dir():
        return home_candidate
    msg = f"No {CONFIG_DIR_NAME}/ directory found in {current}, any parent, or the home directory"
    raise FileNotFoundError(msg)


def read_config(config_dir: Path) -> ConfigFile:
    """Read .jira-tally/config.json. Returns an empty config if missing or corrupt."""
    config_path = config_dir / CONFIG_FILENAME
    if not config_path.exists():
        return ConfigFile()
    try:
        result: ConfigFile = json.loads(config_path.read_text())
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to read %s, using defaults: %s", config_path, exc)
        return ConfigFile()
    if not isinstance(result, dict):
        logger.warning("Ignoring %s: top level is not an object", config_path)
        return ConfigFile()
    return result


def write_config(config_dir: Path, config: dict[str, Any] | ConfigFile) -> None:
    """Write .jira-tally/config.json."""
    config_path = config_dir / CONFIG_FILENAME
    config_path.write_text(json.dumps(config, indent=2) + "\n")


# ---------------------------------------------------------------------------
# Typed accessors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Config:
    """Read-only view over config.json, passed to the resolver and renderers."""

    templates: dict[str, TemplateDefinition] = field(default_factory=dict)
    story_point_field: str | None = None
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: ConfigFile | dict[str, Any], *, source: Path | None = None) -> Config:
        templates: dict[str, TemplateDefinition] = {}
        raw_templates = data.get("templates") or {}
        if not isinstance(raw_templates, dict):
            logger.warning("Ignoring 'templates': expected an object, got %s", type(raw_templates).__name__)
            raw_templates = {}
        for name, entry in raw_templates.items():
            if not isinstance(entry, dict):
                logger.warning("Ignoring template %r: expected an object", name)
                continue
            try:
                count = int(entry.get("count", 0))
            except (TypeError, ValueError):
                logger.warning("Template %r has a non-integer count %r, using 0", name, entry.get("count"))
                count = 0
            templates[name] = TemplateDefinition(query=str(entry.get("query", "")), count=count)

        raw_fields = data.get("fields") or {}
        story_point_field = raw_fields.get("story_point_field") if isinstance(raw_fields, dict) else None
        return cls(
            templates=templates,
            story_point_field=str(story_point_field) if story_point_field else None,
            source=source,
        )

    @classmethod
    def load(cls, config_dir: Path) -> Config:
        return cls.from_dict(read_config(config_dir), source=config_dir / CONFIG_FILENAME)

    def template_for(self, name: str) -> TemplateDefinition | None:
        return self.templates.get(name)

    def template_names(self) -> list[str]:
        return sorted(self.templates)

    def story_point_field_name(self) -> str | None:
        """Name of the custom field holding story points, or None if not configured."""
        return self.story_point_field
