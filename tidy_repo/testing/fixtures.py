"""
Pytest fixtures for Tidy Repo testing.

Provides a fake GitHub API, credential stores and an isolated application
home directory.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from tidy_repo.client import GitHubClient
from tidy_repo.config import API_BASE_URL_ENV, HOME_ENV, TidyRepoConfig
from tidy_repo.persistence import FileCredentialStore
from tidy_repo.testing.mock import FakeGitHubAPI, InMemoryCredentialStore
from tidy_repo.transport import HTTPTransport
from tidy_repo.types.auth import AuthToken

SAMPLE_TOKEN = "ghp_sampletoken0123456789"


# ============================================================================
# Fake host fixtures
# ============================================================================


@pytest.fixture
def fake_github_api() -> Generator[FakeGitHubAPI, None, None]:
    """
    Provide an empty FakeGitHubAPI.

    Example:
        ```python
        def test_counts(fake_github_api):
            fake_github_api.add_repository("owner", "repo", ["main"])
        ```
    """
    api = FakeGitHubAPI()
    yield api
    api.reset()


@pytest.fixture
def fake_github_api_with_repo(fake_github_api: FakeGitHubAPI) -> FakeGitHubAPI:
    """Provide a FakeGitHubAPI serving owner/repo with a single branch."""
    fake_github_api.add_repository("owner", "repo", ["branch"])
    return fake_github_api


# ============================================================================
# Credential fixtures
# ============================================================================


@pytest.fixture
def sample_token() -> AuthToken:
    """Provide a sample AuthToken."""
    return AuthToken(SAMPLE_TOKEN)


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    """Provide an empty InMemoryCredentialStore."""
    return InMemoryCredentialStore()


@pytest.fixture
def file_credential_store(tmp_path: Path) -> FileCredentialStore:
    """Provide a FileCredentialStore inside a temporary directory."""
    return FileCredentialStore(tmp_path / "credentials.yml")


# ============================================================================
# Environment fixtures
# ============================================================================


@pytest.fixture
def tidy_repo_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, fake_github_api: FakeGitHubAPI
) -> Path:
    """
    Point TIDY_REPO_HOME at a temporary directory and the API base URL at
    the fake host.
    """
    home = tmp_path / "tidy-repo-home"
    home.mkdir()
    monkeypatch.setenv(HOME_ENV, str(home))
    monkeypatch.setenv(API_BASE_URL_ENV, fake_github_api.base_url)
    return home


@pytest.fixture
def tidy_repo_config(tidy_repo_home: Path) -> TidyRepoConfig:
    """Provide the configuration matching ``tidy_repo_home``."""
    return TidyRepoConfig.from_env()


# ============================================================================
# Helper functions
# ============================================================================


def create_github_client(
    api: FakeGitHubAPI, credential: AuthToken | None = None
) -> tuple[GitHubClient, HTTPTransport]:
    """
    Create a GitHubClient wired to a FakeGitHubAPI.

    The caller owns the returned transport and should close it.
    """
    transport = HTTPTransport(transport=api.transport)
    client = GitHubClient(transport, api_base_url=api.base_url, credential=credential)
    return client, transport


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "fake_github_api",
    "fake_github_api_with_repo",
    "sample_token",
    "credential_store",
    "file_credential_store",
    "tidy_repo_home",
    "tidy_repo_config",
    # Helper functions
    "create_github_client",
    "SAMPLE_TOKEN",
]
