"""Tidy Repo CLI -- count branches in GitHub repositories.

Installed as the ``tidy-repo`` console script.
"""

import asyncio
import logging
from typing import NoReturn

import click
import httpx

from tidy_repo.application import TidyRepoApp
from tidy_repo.client import GitHubClient
from tidy_repo.config import TidyRepoConfig
from tidy_repo.exceptions import TidyRepoError
from tidy_repo.logging import configure_logging
from tidy_repo.persistence import FileCredentialStore
from tidy_repo.transport import HTTPTransport
from tidy_repo.types.auth import AuthToken
from tidy_repo.types.repos import CountBranchesResult


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


def _http_transport(ctx: click.Context) -> httpx.AsyncBaseTransport | None:
    """Custom httpx transport placed on the context object (tests only)."""
    return ctx.obj.get("http_transport")


async def _count_branches(
    config: TidyRepoConfig,
    repository_urls: tuple[str, ...],
    http_transport: httpx.AsyncBaseTransport | None,
) -> CountBranchesResult:
    async with HTTPTransport(transport=http_transport) as transport:
        app = TidyRepoApp(
            GitHubClient.from_config(transport, config),
            FileCredentialStore(config.credentials_path),
        )
        counts = await app.count_branches_in_repositories(repository_urls)
    return CountBranchesResult(counts)


async def _authenticate(
    config: TidyRepoConfig,
    token: AuthToken,
    http_transport: httpx.AsyncBaseTransport | None,
) -> None:
    async with HTTPTransport(transport=http_transport) as transport:
        app = TidyRepoApp(
            GitHubClient.from_config(transport, config),
            FileCredentialStore(config.credentials_path),
        )
        await app.authenticate(token)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP traffic to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Tidy Repo: inspect branches in GitHub repositories."""
    ctx.ensure_object(dict)
    if verbose:
        configure_logging(level=logging.DEBUG)


@cli.command()
@click.argument("repository_urls", nargs=-1, metavar="[REPOSITORY_URL]...")
@click.pass_context
def branches(ctx: click.Context, repository_urls: tuple[str, ...]) -> None:
    """Count branches in each repository."""
    try:
        config = TidyRepoConfig.from_env()
        result = asyncio.run(
            _count_branches(config, repository_urls, _http_transport(ctx))
        )
    except TidyRepoError as e:
        _fail(e.message)

    click.echo(str(result))


@cli.group()
def authenticate() -> None:
    """Authenticate with repository hosting services."""


@authenticate.command("github")
@click.option("--token", "-t", required=True, help="Personal access token.")
@click.pass_context
def authenticate_github(ctx: click.Context, token: str) -> None:
    """Authenticate with GitHub."""
    try:
        auth_token = AuthToken(token)
    except ValueError as e:
        _fail(str(e))

    try:
        config = TidyRepoConfig.from_env()
        asyncio.run(_authenticate(config, auth_token, _http_transport(ctx)))
    except TidyRepoError as e:
        _fail(e.message)

    click.echo("Successfully authenticated with GitHub")


def main() -> None:
    cli(prog_name="tidy-repo")


if __name__ == "__main__":
    main()
