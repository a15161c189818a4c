"""
Pytest plugin for Tidy Repo testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["tidy_repo.testing.conftest"]

Or import the fixtures directly:

    from tidy_repo.testing.fixtures import fake_github_api, credential_store
"""

# Re-export all fixtures for pytest auto-discovery
from tidy_repo.testing.fixtures import (
    credential_store,
    fake_github_api,
    fake_github_api_with_repo,
    file_credential_store,
    sample_token,
    tidy_repo_config,
    tidy_repo_home,
)

__all__ = [
    "fake_github_api",
    "fake_github_api_with_repo",
    "sample_token",
    "credential_store",
    "file_credential_store",
    "tidy_repo_home",
    "tidy_repo_config",
]
