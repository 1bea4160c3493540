"""Output renderers for search results: a bullet list and a metrics table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from jira_tally.fields import story_points
from jira_tally.types import Issue, RenderSummary

_SEPARATOR = ("------", "-----")


def render_list(issues: Iterable[Issue], story_point_field: str | None) -> str:
    """One ``* KEY - (points) Summary`` line per issue, in tracker order."""
    lines = []
    for issue in issues:
        points = story_points(issue, story_point_field)
        prefix = f"({points}) " if points is not None else ""
        lines.append(f"* {issue.key} - {prefix}{issue.summary}\n")
    return "".join(lines)


def summarize(issues: Sequence[Issue], story_point_field: str | None) -> RenderSummary:
    """Fold the issues into totals for the table view."""
    total_points = 0
    unestimated = 0
    if story_point_field is not None:
        for issue in issues:
            points = story_points(issue, story_point_field)
            if points is None:
                unestimated += 1
            else:
                total_points += points
    return RenderSummary(issue_count=len(issues), total_points=total_points, unestimated_count=unestimated)


def render_table(issues: Sequence[Issue], story_point_field: str | None) -> str:
    summary = summarize(issues, story_point_field)
    rows: list[tuple[str, str]] = [("Metric", "Count"), _SEPARATOR, ("Issues", str(summary.issue_count))]
    if story_point_field is not None:
        rows.append(("Points", str(summary.total_points)))
        rows.append(("Not pointed", str(summary.unestimated_count)))
    rows.append(_SEPARATOR)
    return align_columns(rows)


def align_columns(rows: Sequence[Sequence[str]], padding: int = 1) -> str:
    """Lay out cells like elastic tabstops.

    Every column but the last is padded to its widest cell plus ``padding``
    spaces; the last cell of each row is written as-is.
    """
    if not rows:
        return ""
    ncols = max(len(row) for row in rows)
    widths = [0] * ncols
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            widths[i] = max(widths[i], len(cell))

    out = []
    for row in rows:
        cells = [cell.ljust(widths[i] + padding) for i, cell in enumerate(row[:-1])]
        cells.append(row[-1] if row else "")
        out.append("".join(cells) + "\n")
    return "".join(out)
