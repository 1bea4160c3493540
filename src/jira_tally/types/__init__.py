"""Value types shared by the resolver, renderer, client and CLI."""

from jira_tally.types.core import (
    DEFAULT_MAX_RESULTS,
    ConfigFile,
    FieldsSection,
    Issue,
    IssueSearcher,
    OutputFormat,
    RenderSummary,
    ResolvedQuery,
    SearchOptions,
    TemplateDefinition,
    TemplateSection,
)

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "ConfigFile",
    "FieldsSection",
    "Issue",
    "IssueSearcher",
    "OutputFormat",
    "RenderSummary",
    "ResolvedQuery",
    "SearchOptions",
    "TemplateDefinition",
    "TemplateSection",
]
