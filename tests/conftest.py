"""Shared pytest fixtures for jira-tally tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from jira_tally.config import CONFIG_DIR_NAME, Config, write_config
from tests._helpers import STORY_POINT_FIELD


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    return {
        "templates": {
            "sprint-1": {"query": "project = X", "count": 50},
            "bugs": {"query": "type = Bug", "count": 10},
        },
        "fields": {"story_point_field": STORY_POINT_FIELD},
    }


@pytest.fixture
def config(sample_config_data: dict[str, Any]) -> Config:
    """Config with two templates and the story point field set."""
    return Config.from_dict(sample_config_data)


@pytest.fixture
def plain_config() -> Config:
    """Config with templates but no story point field."""
    return Config.from_dict({"templates": {"sprint-1": {"query": "project = X", "count": 50}}})


@pytest.fixture
def config_project(tmp_path: Path, sample_config_data: dict[str, Any]) -> Path:
    """A tmp directory with .jira-tally/config.json. Returns the project root."""
    config_dir = tmp_path / CONFIG_DIR_NAME
    config_dir.mkdir()
    write_config(config_dir, sample_config_data)
    return tmp_path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()
