"""Shared fixtures for the Tidy Repo test suite."""

from tidy_repo.testing.conftest import (  # noqa: F401
    credential_store,
    fake_github_api,
    fake_github_api_with_repo,
    file_credential_store,
    sample_token,
    tidy_repo_config,
    tidy_repo_home,
)
