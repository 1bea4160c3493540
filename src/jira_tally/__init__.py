"""jira-tally — query Jira with ad-hoc or templated JQL and tally story points."""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jira-tally")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

# Library use stays quiet until setup_logging() attaches the file handler.
logging.getLogger("jira_tally").addHandler(logging.NullHandler())

from jira_tally.config import Config  # noqa: E402
from jira_tally.types import Issue, SearchOptions  # noqa: E402

__all__ = ["Config", "Issue", "SearchOptions", "__version__"]
