"""Query resolution, search invocation and rendering for ``jira-tally search``.

The pipeline is: SearchOptions -> resolve_query() -> search_issues() ->
render_list()/render_table(). Resolution is pure apart from reading the
Config; errors from the tracker client propagate unchanged.
"""

from __future__ import annotations

import logging
import time
from typing import TextIO

from jira_tally.config import Config
from jira_tally.render import render_list, render_table
from jira_tally.types import DEFAULT_MAX_RESULTS, Issue, IssueSearcher, ResolvedQuery, SearchOptions

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """Base class for errors raised while resolving what to search for."""


class MissingQuerySpecifierError(SearchError):
    def __init__(self) -> None:
        super().__init__("please use --query or --template to search")


class UndefinedTemplateError(SearchError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is not defined")


def resolve_query(opts: SearchOptions, config: Config) -> ResolvedQuery:
    """Work out the JQL and page size for a search.

    A template wins over an inline query. ``opts.max_results`` overrides the
    template's count only when it differs from DEFAULT_MAX_RESULTS, so an
    explicit ``--max-results 100`` cannot be told apart from the default.
    """
    if opts.template:
        template = config.template_for(opts.template)
        if template is None:
            raise UndefinedTemplateError(opts.template)
        query = template.query
        max_results = template.count
    elif opts.query:
        query = opts.query
        max_results = DEFAULT_MAX_RESULTS
    else:
        raise MissingQuerySpecifierError()

    if opts.max_results != DEFAULT_MAX_RESULTS:
        max_results = opts.max_results

    return ResolvedQuery(query=query, max_results=max_results)


def search_issues(client: IssueSearcher, resolved: ResolvedQuery) -> list[Issue]:
    return client.issue_search(resolved.query, max_results=resolved.max_results)


def render(issues: list[Issue], fmt: str, config: Config) -> str:
    field_name = config.story_point_field_name()
    if fmt == "table":
        return render_table(issues, field_name)
    return render_list(issues, field_name)


def query_issues(client: IssueSearcher, config: Config, opts: SearchOptions, out: TextIO) -> None:
    """Resolve, search and write rendered output to ``out``."""
    run_search(client, config, resolve_query(opts, config), opts, out)


def run_search(
    client: IssueSearcher,
    config: Config,
    resolved: ResolvedQuery,
    opts: SearchOptions,
    out: TextIO,
) -> None:
    """Search for an already resolved query. Nothing is written unless the search succeeds."""
    search_fields = {"query": resolved.query, "template": opts.template or None, "max_results": resolved.max_results}
    t0 = time.monotonic()
    try:
        issues = search_issues(client, resolved)
    except Exception as exc:
        logger.error(
            "search_error",
            extra={"command": "search", "search": search_fields, "error": str(exc)},
            exc_info=True,
        )
        raise
    duration_ms = round((time.monotonic() - t0) * 1000, 1)
    logger.info(
        "search_call",
        extra={
            "command": "search",
            "search": {**search_fields, "returned": len(issues)},
            "duration_ms": duration_ms,
        },
    )
    out.write(render(issues, opts.format, config))
