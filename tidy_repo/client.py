"""
GitHub repository hosting client.

Lists branches of a repository and checks access tokens against the GitHub
REST API.
"""

import json
from typing import Any
from urllib.parse import quote

from tidy_repo.config import DEFAULT_API_BASE_URL, TidyRepoConfig
from tidy_repo.exceptions import (
    ClientTransportError,
    InvalidRepositoryUrlError,
    RepositoryNotFoundError,
    RepositoryUrlParseError,
    ResponseDecodeError,
    TransportError,
    UnexpectedResponseError,
)
from tidy_repo.transport import HTTPRequest, HTTPResponse, HTTPTransport
from tidy_repo.types.auth import AuthToken, Validity
from tidy_repo.types.repos import BranchName, RepositoryUrl
from tidy_repo.url import parse_repository_url

GITHUB_V3_MEDIA_TYPE = "application/vnd.github.v3+json"


def _segment(value: str) -> str:
    return quote(value, safe="")


def _parse_branches(body: str) -> list[BranchName]:
    """Decode a branch listing: a JSON array of objects with a string ``name``."""
    try:
        data: Any = json.loads(body)
    except ValueError as e:
        raise ResponseDecodeError(str(e)) from e

    if not isinstance(data, list):
        raise ResponseDecodeError(f"expected a JSON array, got {type(data).__name__}")

    branches = []
    for item in data:
        name = item.get("name") if isinstance(item, dict) else None
        if not isinstance(name, str) or not name:
            raise ResponseDecodeError(f"branch entry without a name: {item!r}")
        branches.append(BranchName(name))
    return branches


class GitHubClient:
    """
    Client for the GitHub REST API.

    The client is immutable: attaching a token returns a new client that
    shares the same transport.

    Example:
        ```python
        async with HTTPTransport() as transport:
            client = GitHubClient(transport).with_credential(AuthToken("ghp_..."))
            branches = await client.list_branches(RepositoryUrl("https://github.com/o/r"))
        ```
    """

    def __init__(
        self,
        transport: HTTPTransport,
        api_base_url: str = DEFAULT_API_BASE_URL,
        credential: AuthToken | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            transport: HTTP transport for making requests
            api_base_url: GitHub API root (default: https://api.github.com)
            credential: Token sent with every request, if any
        """
        self._transport = transport
        self._api_base_url = api_base_url.rstrip("/")
        self._credential = credential

    @classmethod
    def from_config(
        cls, transport: HTTPTransport, config: TidyRepoConfig
    ) -> "GitHubClient":
        return cls(transport, api_base_url=config.api_base_url)

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    @property
    def credential(self) -> AuthToken | None:
        return self._credential

    def with_credential(self, token: AuthToken) -> "GitHubClient":
        """Return a copy of this client that authenticates with ``token``."""
        return GitHubClient(self._transport, self._api_base_url, credential=token)

    async def list_branches(self, url: RepositoryUrl) -> list[BranchName]:
        """
        List all branches of a repository.

        Args:
            url: Repository URL such as https://github.com/owner/repo

        Returns:
            Every branch in the (single page) listing

        Raises:
            InvalidRepositoryUrlError: If the URL cannot be parsed
            ClientTransportError: If the request could not be completed
            ResponseDecodeError: If the listing has an unexpected shape
            RepositoryNotFoundError: For any non-200 response
        """
        try:
            coordinates = parse_repository_url(url)
        except RepositoryUrlParseError as e:
            raise InvalidRepositoryUrlError(e.url) from e

        headers = {"Accept": GITHUB_V3_MEDIA_TYPE}
        if self._credential is not None:
            headers["Authorization"] = self._authorization(self._credential)

        # Owner and name are sent as percent-encoded path segments
        path = f"/repos/{_segment(coordinates.owner)}/{_segment(coordinates.name)}/branches"
        response = await self._send(
            HTTPRequest(
                method="GET",
                url=f"{self._api_base_url}{path}",
                headers=headers,
            )
        )

        # Every non-200 status is reported as a missing repository
        if response.status_code != 200:
            raise RepositoryNotFoundError(str(url))

        return _parse_branches(response.body)

    async def validate_credential(self, token: AuthToken) -> Validity:
        """
        Check a token against the API root.

        Returns:
            Validity.VALID on 200, Validity.INVALID on 401

        Raises:
            UnexpectedResponseError: For any other status
            ClientTransportError: If the request could not be completed
        """
        response = await self._send(
            HTTPRequest(
                method="GET",
                url=f"{self._api_base_url}/",
                headers={"Authorization": self._authorization(token)},
            )
        )

        if response.status_code == 200:
            return Validity.VALID
        if response.status_code == 401:
            return Validity.INVALID
        raise UnexpectedResponseError(response.status_code)

    async def _send(self, request: HTTPRequest) -> HTTPResponse:
        try:
            return await self._transport.send(request)
        except TransportError as e:
            raise ClientTransportError(e.message, e.status_code) from e

    @staticmethod
    def _authorization(token: AuthToken) -> str:
        return f"token {token.value}"
