"""Story point extraction from an issue's custom field map."""

from __future__ import annotations

import math

from jira_tally.types import Issue


class StoryPointError(ValueError):
    """A configured story point field holds a value that is not a number."""

    def __init__(self, issue_key: str, field_name: str, value: object) -> None:
        self.issue_key = issue_key
        self.field_name = field_name
        self.value = value
        super().__init__(f"{issue_key}: story point field '{field_name}' is not numeric: {value!r}")


def story_points(issue: Issue, field_name: str | None) -> int | None:
    """Return the issue's story points truncated to an int, or None.

    None when no field is configured, the key is missing, or the value is
    null. Raises StoryPointError for any other value, including NaN and
    infinities, which have no integer truncation.
    """
    if field_name is None:
        return None
    value = issue.fields.get(field_name)
    if value is None:
        return None
    # bool is an int subclass; a checkbox field is not an estimate.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StoryPointError(issue.key, field_name, value)
    if isinstance(value, float) and not math.isfinite(value):
        raise StoryPointError(issue.key, field_name, value)
    return int(value)
