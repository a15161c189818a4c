"""Tidy Repo - count branches in GitHub repositories."""

from tidy_repo.application import TidyRepoApp
from tidy_repo.client import GitHubClient
from tidy_repo.config import TidyRepoConfig
from tidy_repo.exceptions import (
    AuthenticationError,
    BranchCountError,
    ClientError,
    ClientTransportError,
    ConfigurationError,
    CorruptCredentialDataError,
    CredentialDoesNotExistError,
    CredentialPersistenceError,
    CredentialValidationError,
    FailedToGetCredentialError,
    FailedToStoreCredentialError,
    InvalidCredentialsError,
    InvalidRepositoryUrlError,
    PersistenceError,
    RepositoryNotFoundError,
    RepositoryUrlParseError,
    ResponseDecodeError,
    TidyRepoError,
    TransportError,
    UnexpectedResponseError,
)
from tidy_repo.logging import configure_logging, get_logger
from tidy_repo.persistence import CredentialStore, FileCredentialStore
from tidy_repo.transport import HTTPRequest, HTTPResponse, HTTPTransport
from tidy_repo.types import (
    AuthToken,
    BranchName,
    CountBranchesResult,
    Credentials,
    RepositoryCoordinates,
    RepositoryUrl,
    Validity,
)
from tidy_repo.url import parse_repository_url

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Application
    "TidyRepoApp",
    "TidyRepoConfig",
    # Client
    "GitHubClient",
    "parse_repository_url",
    # Persistence
    "CredentialStore",
    "FileCredentialStore",
    # Transport
    "HTTPTransport",
    "HTTPRequest",
    "HTTPResponse",
    # Types
    "RepositoryUrl",
    "RepositoryCoordinates",
    "BranchName",
    "CountBranchesResult",
    "AuthToken",
    "Credentials",
    "Validity",
    # Exceptions
    "TidyRepoError",
    "ConfigurationError",
    "RepositoryUrlParseError",
    "TransportError",
    "ClientError",
    "InvalidRepositoryUrlError",
    "ClientTransportError",
    "ResponseDecodeError",
    "RepositoryNotFoundError",
    "UnexpectedResponseError",
    "PersistenceError",
    "CredentialDoesNotExistError",
    "FailedToGetCredentialError",
    "CorruptCredentialDataError",
    "FailedToStoreCredentialError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "CredentialValidationError",
    "CredentialPersistenceError",
    "BranchCountError",
    # Logging
    "configure_logging",
    "get_logger",
]
