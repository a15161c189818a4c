"""Tidy Repo exception classes.

Errors are grouped per layer. Each boundary translates the error of the layer
below into one of its own kinds, keeping the original on ``cause``.
"""


class TidyRepoError(Exception):
    """Base exception for all Tidy Repo errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(TidyRepoError):
    """Raised when required configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class RepositoryUrlParseError(TidyRepoError):
    """Raised when a repository URL does not match the host's URL shape."""

    def __init__(self, url: str) -> None:
        super().__init__(
            "INVALID_REPOSITORY_URL", f"failed to parse repository from {url}"
        )
        self.url = url


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


class TransportError(TidyRepoError):
    """Raised when an HTTP exchange fails below the protocol level."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("TRANSPORT_ERROR", message)
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Repository hosting client
# ---------------------------------------------------------------------------


class ClientError(TidyRepoError):
    """Base exception for repository hosting client failures."""

    pass


class InvalidRepositoryUrlError(ClientError):
    """Raised when the client is given a URL it cannot parse."""

    def __init__(self, url: str) -> None:
        super().__init__(
            "INVALID_REPOSITORY_URL", f"failed to parse repository from {url}"
        )
        self.url = url


class ClientTransportError(ClientError):
    """Raised when the transport fails while talking to the host."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("TRANSPORT_ERROR", message)
        self.status_code = status_code


class ResponseDecodeError(ClientError):
    """Raised when a successful response body has an unexpected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__("DECODE_ERROR", f"JSON deserialization error: {detail}")
        self.detail = detail


class RepositoryNotFoundError(ClientError):
    """Raised for any non-200 answer to a branch listing."""

    def __init__(self, url: str) -> None:
        super().__init__("REPOSITORY_NOT_FOUND", f"repository '{url}' not found")
        self.url = url


class UnexpectedResponseError(ClientError):
    """Raised when credential validation gets neither 200 nor 401."""

    def __init__(self, status_code: int) -> None:
        super().__init__("UNEXPECTED_RESPONSE", "unexpected response from GitHub")
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Credential persistence
# ---------------------------------------------------------------------------


class PersistenceError(TidyRepoError):
    """Base exception for credential storage failures."""

    def __init__(self, code: str, message: str, path: str | None = None) -> None:
        super().__init__(code, message)
        self.path = path


class CredentialDoesNotExistError(PersistenceError):
    """Raised when no credential has ever been stored."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__(
            "CREDENTIAL_NOT_FOUND", "Credential does not exist in storage", path
        )


class FailedToGetCredentialError(PersistenceError):
    """Raised when the credential file exists but cannot be read."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("CREDENTIAL_READ_FAILED", "Failed to retrieve credential", path)


class CorruptCredentialDataError(PersistenceError):
    """Raised when the credential file cannot be deserialized."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("CREDENTIAL_CORRUPT", "Storage contains corrupted data", path)


class FailedToStoreCredentialError(PersistenceError):
    """Raised when the credential cannot be written."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("CREDENTIAL_WRITE_FAILED", "Failed to store credential", path)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


class AuthenticationError(TidyRepoError):
    """Base exception for the authenticate command."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when the host rejects the token."""

    def __init__(self) -> None:
        super().__init__("INVALID_CREDENTIALS", "invalid credentials")


class CredentialValidationError(AuthenticationError):
    """Raised when the token could not be checked against the host."""

    def __init__(self, cause: ClientError) -> None:
        super().__init__(
            "VALIDATION_FAILED", f"Could not validate authentication: {cause.message}"
        )
        self.cause = cause


class CredentialPersistenceError(AuthenticationError):
    """Raised when a validated token could not be stored."""

    def __init__(self, cause: PersistenceError) -> None:
        super().__init__("PERSISTENCE_FAILED", cause.message)
        self.cause = cause


class BranchCountError(TidyRepoError):
    """Raised when counting branches fails for any repository."""

    def __init__(self, cause: ClientError) -> None:
        super().__init__(cause.code, cause.message)
        self.cause = cause
