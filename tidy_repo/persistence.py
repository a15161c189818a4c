"""
Credential persistence for Tidy Repo.

A single token is kept in ``<home>/credentials.yml`` as
``github_token: <token>``. Storage failures are reported through the
PersistenceError taxonomy so callers can tell "never authenticated" apart
from "storage is broken".
"""

import errno
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

import yaml

from tidy_repo.exceptions import (
    CorruptCredentialDataError,
    CredentialDoesNotExistError,
    FailedToGetCredentialError,
    FailedToStoreCredentialError,
)
from tidy_repo.logging import log_credential_operation
from tidy_repo.types.auth import AuthToken, Credentials


class CredentialStore(ABC):
    """Abstract base class for credential stores."""

    @abstractmethod
    def load(self) -> AuthToken:
        """
        Return the stored token.

        Raises:
            PersistenceError: One of its subclasses, describing why no
                token could be returned
        """
        pass

    @abstractmethod
    def store(self, token: AuthToken) -> None:
        """
        Store a token, replacing any previous one.

        Raises:
            FailedToStoreCredentialError: If the token could not be written
        """
        pass


class FileCredentialStore(CredentialStore):
    """Credential store backed by a YAML file."""

    def __init__(self, path: str | Path) -> None:
        """
        Initialize the store.

        Args:
            path: Location of the credentials file. Its directory must exist.
        """
        self.path = Path(path)

    def load(self) -> AuthToken:
        location = str(self.path)
        log_credential_operation("Loading", location)

        try:
            contents = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CredentialDoesNotExistError(location) from e
        except OSError as e:
            raise FailedToGetCredentialError(location) from e
        except UnicodeDecodeError as e:
            raise CorruptCredentialDataError(location) from e

        return self._deserialize(contents)

    def store(self, token: AuthToken) -> None:
        location = str(self.path)
        log_credential_operation("Storing", location)

        try:
            contents = yaml.safe_dump(
                Credentials.from_token(token).to_dict(), default_flow_style=False
            )
        except yaml.YAMLError as e:
            raise FailedToStoreCredentialError(location) from e

        try:
            self._write(contents)
        except OSError as e:
            raise FailedToStoreCredentialError(location) from e

    def _deserialize(self, contents: str) -> AuthToken:
        location = str(self.path)

        try:
            data = yaml.safe_load(contents)
        except yaml.YAMLError as e:
            raise CorruptCredentialDataError(location) from e

        if not isinstance(data, dict):
            raise CorruptCredentialDataError(location)

        github_token = data.get("github_token")
        if not isinstance(github_token, str) or not github_token:
            raise CorruptCredentialDataError(location)

        return Credentials(github_token=github_token).to_token()

    def _write(self, contents: str) -> None:
        # Written to a sibling temp file, then renamed over the target.
        directory = self.path.parent
        if not directory.is_dir():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(directory))

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(contents)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
