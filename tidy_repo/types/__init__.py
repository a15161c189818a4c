"""Tidy Repo type definitions.

This module exports all data model types used by the package.
"""

from tidy_repo.types.auth import AuthToken, Credentials, Validity
from tidy_repo.types.repos import (
    BranchName,
    CountBranchesResult,
    RepositoryCoordinates,
    RepositoryUrl,
)

__all__ = [
    # Repository types
    "RepositoryUrl",
    "RepositoryCoordinates",
    "BranchName",
    "CountBranchesResult",
    # Authentication types
    "AuthToken",
    "Credentials",
    "Validity",
]
