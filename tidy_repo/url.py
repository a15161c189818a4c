"""
Repository URL parsing.

Turns a free-form GitHub repository URL such as
``https://github.com/owner/repo`` into owner/name coordinates.
"""

import re

from tidy_repo.exceptions import RepositoryUrlParseError
from tidy_repo.types.repos import RepositoryCoordinates, RepositoryUrl

GITHUB_HOST = "github.com"

_REPOSITORY_URL_PATTERN = re.compile(
    r"(?:https?://)?"
    + re.escape(GITHUB_HOST)
    + r"/(?P<owner>[^/\s]+)/(?P<name>[^/\s]+)"
)


def parse_repository_url(url: RepositoryUrl | str) -> RepositoryCoordinates:
    """
    Parse a GitHub repository URL into its owner and name.

    The scheme is optional and the whole string must match: no ``www.``
    prefix, other hosts or trailing path segments.

    Args:
        url: Repository URL, as a RepositoryUrl or plain string

    Returns:
        RepositoryCoordinates with the captured owner and name

    Raises:
        RepositoryUrlParseError: If the URL does not match, echoing the
            original string
    """
    raw = url.value if isinstance(url, RepositoryUrl) else url
    if not isinstance(raw, str):
        raise RepositoryUrlParseError(str(raw))

    match = _REPOSITORY_URL_PATTERN.fullmatch(raw)
    if match is None:
        raise RepositoryUrlParseError(raw)

    return RepositoryCoordinates(owner=match.group("owner"), name=match.group("name"))
