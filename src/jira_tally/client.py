"""Thin synchronous client for the Jira REST search endpoint.

Only what ``jira-tally search`` needs: one bounded page of issues for a JQL
query, with HTTP failures normalized into TrackerError.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx

from jira_tally.types import Issue

logger = logging.getLogger(__name__)

ENV_URL = "JIRA_URL"
ENV_USERNAME = "JIRA_USERNAME"
ENV_TOKEN = "JIRA_TOKEN"

_SNIPPET_LEN = 300


class TrackerError(Exception):
    """The tracker rejected the request or could not be reached."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TrackerAuthError(TrackerError):
    """Credentials were missing, refused or lack permission."""


class JiraClient:
    def __init__(
        self,
        base_url: str,
        username: str = "",
        token: str = "",
        *,
        timeout: float = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        auth = httpx.BasicAuth(username, token) if username or token else None
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            auth=auth,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> JiraClient:
        """Build a client from JIRA_URL / JIRA_USERNAME / JIRA_TOKEN."""
        env = os.environ if environ is None else environ
        base_url = env.get(ENV_URL, "")
        if not base_url:
            msg = f"{ENV_URL} is not set"
            raise TrackerError(msg)
        return cls(base_url, env.get(ENV_USERNAME, ""), env.get(ENV_TOKEN, ""))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> JiraClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _request(self, method: str, path: str, *, params: dict[str, Any] | None = None) -> Any:
        """Perform a request and return parsed JSON, raising TrackerError on failure."""
        try:
            r = self._client.request(method, path, params=params)
        except httpx.HTTPError as exc:
            msg = f"Jira request failed: {exc}"
            raise TrackerError(msg) from exc

        if r.status_code in (401, 403):
            msg = f"Jira refused the credentials ({r.status_code})"
            raise TrackerAuthError(msg, status_code=r.status_code)
        if r.status_code >= 400:
            snippet = (r.text or "")[:_SNIPPET_LEN].replace("\n", " ")
            msg = f"Jira error {r.status_code}: {snippet}"
            raise TrackerError(msg, status_code=r.status_code)

        try:
            return r.json()
        except ValueError as exc:
            msg = f"Jira returned a non-JSON response ({r.status_code})"
            raise TrackerError(msg, status_code=r.status_code) from exc

    def issue_search(self, jql: str, *, max_results: int) -> list[Issue]:
        """Run ``jql`` and return the first page of at most ``max_results`` issues."""
        params = {"jql": jql, "maxResults": max_results, "fields": "*all"}
        logger.debug("Searching Jira: %s (maxResults=%d)", jql, max_results)
        data = self._request("GET", "/rest/api/2/search", params=params)
        raw_issues = (data.get("issues") or []) if isinstance(data, dict) else None
        if not isinstance(raw_issues, list) or not all(isinstance(raw, dict) for raw in raw_issues):
            msg = "Jira returned an unexpected search payload"
            raise TrackerError(msg)
        return [_to_issue(raw) for raw in raw_issues]


def _to_issue(raw: dict[str, Any]) -> Issue:
    fields = raw.get("fields") or {}
    return Issue(key=raw.get("key", ""), summary=fields.get("summary") or "", fields=fields)
