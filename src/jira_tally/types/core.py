"""Foundational value types and TypedDicts for the config file shape."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, TypedDict

OutputFormat = Literal["list", "table"]

# --max-results only overrides a template's count when it differs from this.
DEFAULT_MAX_RESULTS = 100


class TemplateSection(TypedDict, total=False):
    """Shape of one entry under ``templates`` in config.json."""

    query: str
    count: int


class FieldsSection(TypedDict, total=False):
    """Shape of the ``fields`` section in config.json."""

    story_point_field: str


class ConfigFile(TypedDict, total=False):
    """Shape of .jira-tally/config.json."""

    templates: dict[str, TemplateSection]
    fields: FieldsSection


@dataclass(frozen=True)
class TemplateDefinition:
    query: str
    count: int = 0


@dataclass
class Issue:
    key: str
    summary: str = ""
    fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "summary": self.summary,
            "fields": self.fields,
        }


@dataclass
class SearchOptions:
    """Options collected from the ``search`` command line."""

    args: tuple[str, ...] = ()
    format: OutputFormat = "list"
    max_results: int = DEFAULT_MAX_RESULTS
    query: str = ""
    template: str = ""


@dataclass(frozen=True)
class ResolvedQuery:
    query: str
    max_results: int


@dataclass(frozen=True)
class RenderSummary:
    issue_count: int = 0
    total_points: int = 0
    unestimated_count: int = 0


class IssueSearcher(Protocol):
    """Anything that can run a JQL search and return a single page of issues."""

    def issue_search(self, jql: str, *, max_results: int) -> list[Issue]: ...
