"""
Tidy Repo application service.

Counts branches across repositories and authenticates with GitHub, composing
the GitHub client with the credential store.
"""

import asyncio
from collections.abc import Iterable

from tidy_repo.client import GitHubClient
from tidy_repo.exceptions import (
    BranchCountError,
    ClientError,
    CredentialPersistenceError,
    CredentialValidationError,
    InvalidCredentialsError,
    InvalidRepositoryUrlError,
    PersistenceError,
)
from tidy_repo.logging import get_logger
from tidy_repo.persistence import CredentialStore
from tidy_repo.types.auth import AuthToken, Validity
from tidy_repo.types.repos import RepositoryUrl

logger = get_logger("app")


def _repository_url(url: RepositoryUrl | str) -> RepositoryUrl:
    if isinstance(url, RepositoryUrl):
        return url
    try:
        return RepositoryUrl(url)
    except ValueError as e:
        cause = InvalidRepositoryUrlError(url)
        raise BranchCountError(cause) from e


class TidyRepoApp:
    """
    Entry point for the branch counting and authentication workflows.

    Example:
        ```python
        app = TidyRepoApp(GitHubClient(transport), FileCredentialStore(path))
        counts = await app.count_branches_in_repositories(
            [RepositoryUrl("https://github.com/owner/repo")]
        )
        ```
    """

    def __init__(self, client: GitHubClient, credential_store: CredentialStore) -> None:
        """
        Initialize the application service.

        Args:
            client: Unauthenticated GitHub client
            credential_store: Where tokens are loaded from and stored to
        """
        self.client = client
        self.credential_store = credential_store

    async def count_branches_in_repositories(
        self, urls: Iterable[RepositoryUrl | str]
    ) -> dict[RepositoryUrl, int]:
        """
        Count branches in every given repository.

        A stored token, when there is one, is used for all requests. Listings
        run concurrently; the first failure cancels the rest and no partial
        result is returned.

        Args:
            urls: Repository URLs; duplicates are counted once

        Returns:
            Mapping of repository URL to number of branches

        Raises:
            BranchCountError: Wrapping the first ClientError encountered
        """
        repository_urls = list(dict.fromkeys(_repository_url(url) for url in urls))
        if not repository_urls:
            return {}

        client = self._authenticated_client()
        tasks = [
            asyncio.ensure_future(self._count_branches(client, url))
            for url in repository_urls
        ]

        try:
            counts = await asyncio.gather(*tasks)
        except ClientError as e:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise BranchCountError(e) from e

        return dict(zip(repository_urls, counts))

    async def count_branches(self, url: RepositoryUrl | str) -> int:
        """Count branches in a single repository."""
        counts = await self.count_branches_in_repositories([url])
        return counts[_repository_url(url)]

    async def authenticate(self, token: AuthToken) -> None:
        """
        Validate a token with GitHub and store it.

        Raises:
            InvalidCredentialsError: If GitHub rejects the token
            CredentialValidationError: If the token could not be checked
            CredentialPersistenceError: If the token could not be stored
        """
        try:
            validity = await self.client.validate_credential(token)
        except ClientError as e:
            raise CredentialValidationError(e) from e

        if validity is Validity.INVALID:
            raise InvalidCredentialsError()

        try:
            self.credential_store.store(token)
        except PersistenceError as e:
            raise CredentialPersistenceError(e) from e

        logger.info("Stored GitHub credential")

    def _authenticated_client(self) -> GitHubClient:
        try:
            token = self.credential_store.load()
        except PersistenceError as e:
            logger.debug("Continuing unauthenticated: %s", e.message)
            return self.client
        return self.client.with_credential(token)

    @staticmethod
    async def _count_branches(client: GitHubClient, url: RepositoryUrl) -> int:
        branches = await client.list_branches(url)
        return len(branches)
