"""Authentication-related data models."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class AuthToken:
    """A GitHub personal access token."""

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("GitHub authentication token must not be empty")

    def __repr__(self) -> str:
        return "AuthToken(value='[REDACTED]')"


@dataclass
class Credentials:
    """On-disk form of a stored token.

    The ``github_token`` key is part of the credentials file format.
    """

    github_token: str

    @classmethod
    def from_token(cls, token: AuthToken) -> "Credentials":
        return cls(github_token=token.value)

    def to_token(self) -> AuthToken:
        return AuthToken(self.github_token)

    def to_dict(self) -> dict[str, str]:
        return {"github_token": self.github_token}


class Validity(Enum):
    """Outcome of checking a token against the host."""

    VALID = "valid"
    INVALID = "invalid"
