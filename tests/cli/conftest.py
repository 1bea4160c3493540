"""Fixtures for CLI interface tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_in_project(
    config_project: Path, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> Generator[tuple[CliRunner, Path], None, None]:
    """chdir into a project with .jira-tally/config.json and return (runner, project_root)."""
    monkeypatch.setenv("HOME", str(config_project / "home"))
    monkeypatch.delenv("JIRA_TALLY_CONFIG_DIR", raising=False)
    monkeypatch.delenv("JIRA_TALLY_LOG_LEVEL", raising=False)
    original_cwd = os.getcwd()
    os.chdir(str(config_project))
    yield cli_runner, config_project
    os.chdir(original_cwd)


@pytest.fixture
def cli_outside_project(
    tmp_path: Path, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> Generator[tuple[CliRunner, Path], None, None]:
    """chdir into an empty directory with no .jira-tally/ anywhere reachable."""
    workdir = tmp_path / "empty"
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("JIRA_TALLY_CONFIG_DIR", raising=False)
    monkeypatch.delenv("JIRA_TALLY_LOG_LEVEL", raising=False)
    original_cwd = os.getcwd()
    os.chdir(str(workdir))
    yield cli_runner, workdir
    os.chdir(original_cwd)
