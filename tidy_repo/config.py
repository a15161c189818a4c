"""Runtime configuration for Tidy Repo."""

import os
from dataclasses import dataclass
from pathlib import Path

from tidy_repo.exceptions import ConfigurationError

DEFAULT_API_BASE_URL = "https://api.github.com"

API_BASE_URL_ENV = "TIDY_REPO_GITHUB_API_BASE_URL"
HOME_ENV = "TIDY_REPO_HOME"

CREDENTIALS_FILE_NAME = "credentials.yml"


@dataclass(frozen=True)
class TidyRepoConfig:
    """
    Settings resolved once at start-up and passed to the client and store.

    Example:
        ```python
        config = TidyRepoConfig.from_env()
        store = FileCredentialStore(config.credentials_path)
        ```
    """

    home_directory: Path
    api_base_url: str = DEFAULT_API_BASE_URL

    @property
    def credentials_path(self) -> Path:
        return self.home_directory / CREDENTIALS_FILE_NAME

    @classmethod
    def from_env(cls) -> "TidyRepoConfig":
        """
        Create configuration from environment variables.

        Environment variables:
            TIDY_REPO_HOME: Application home directory (required, ``~`` expanded)
            TIDY_REPO_GITHUB_API_BASE_URL: GitHub API root
                (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If TIDY_REPO_HOME is missing or empty
        """
        home = os.environ.get(HOME_ENV)
        if not home:
            raise ConfigurationError(f"{HOME_ENV} environment variable is not set")

        api_base_url = os.environ.get(API_BASE_URL_ENV) or DEFAULT_API_BASE_URL

        return cls(
            home_directory=Path(os.path.expanduser(home)),
            api_base_url=api_base_url,
        )
