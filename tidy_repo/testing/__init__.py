"""Tidy Repo testing utilities.

Provides a fake GitHub API, an in-memory credential store and fixtures for
testing code built on Tidy Repo.
"""

from tidy_repo.testing.fixtures import create_github_client
from tidy_repo.testing.mock import (
    FakeGitHubAPI,
    InMemoryCredentialStore,
    MockResponse,
    RecordedRequest,
)

__all__ = [
    # Test doubles
    "FakeGitHubAPI",
    "InMemoryCredentialStore",
    "MockResponse",
    "RecordedRequest",
    # Helper functions
    "create_github_client",
]
