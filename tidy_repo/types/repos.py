"""Repository-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepositoryUrl:
    """A repository URL as given on the command line."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("repository URL must not be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RepositoryCoordinates:
    """Owner and name of a repository on the hosting service."""

    owner: str
    name: str

    def __post_init__(self) -> None:
        for segment in (self.owner, self.name):
            if not segment or "/" in segment:
                raise ValueError(f"invalid repository path segment: {segment!r}")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class BranchName:
    """Name of a branch in a repository."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("branch name must not be empty")

    def __str__(self) -> str:
        return self.value


class CountBranchesResult:
    """Branch counts keyed by repository URL, rendered one line per URL."""

    def __init__(self, counts: dict[RepositoryUrl, int]) -> None:
        self.counts = counts

    def lines(self) -> list[str]:
        return sorted(f"{url}: {count}" for url, count in self.counts.items())

    def __str__(self) -> str:
        return "\n".join(self.lines())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountBranchesResult):
            return NotImplemented
        return self.counts == other.counts

    def __repr__(self) -> str:
        return f"CountBranchesResult({self.counts!r})"
