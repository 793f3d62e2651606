"""CLI for forgelink."""

import sys
from pathlib import Path

import click
import structlog

from forgelink import __version__
from forgelink.config.logging import configure_logging
from forgelink.core.exceptions import ForgeLinkError
from forgelink.core.models import ResourceType

logger = structlog.get_logger(__name__)

RESOURCE_TYPES = click.Choice([t.value for t in ResourceType], case_sensitive=False)


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(__version__, prog_name="forgelink")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """forgelink: web URLs for files in a git checkout."""
    from forgelink.config.settings import load_settings

    try:
        settings = load_settings()
    except ForgeLinkError as e:
        _fail(e)

    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("resource_type", type=RESOURCE_TYPES)
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option("--remote", "-r", help="Remote URL (default: upstream remote of the checkout)")
@click.option("--branch", "-b", help="Branch name (default: upstream tracking branch)")
def url(resource_type: str, file: Path, remote: str | None, branch: str | None) -> None:
    """Print the forge URL of FILE.

    RESOURCE_TYPE is one of log, tree, blob, blame, edit, plain.
    """
    from forgelink.config.settings import load_settings
    from forgelink.git.scanner import GitRepoScanner
    from forgelink.resolver import resolve_resource_url

    scanner = GitRepoScanner(file, default_remote=load_settings().default_remote)
    try:
        locator = scanner.locate(file)
        remote = remote or scanner.get_remote_url()
        if not remote:
            raise ForgeLinkError(f"No remote configured for {scanner.repo_root}")
        result = resolve_resource_url(
            remote,
            resource_type.lower(),
            locator.branch if branch is None else branch,
            locator.path,
        )
    except ForgeLinkError as e:
        _fail(e)
    click.echo(result)


@cli.command()
@click.argument("remote")
@click.argument("resource_type", type=RESOURCE_TYPES)
@click.argument("branch")
@click.argument("path")
def resolve(remote: str, resource_type: str, branch: str, path: str) -> None:
    """Print the URL for REMOTE, RESOURCE_TYPE, BRANCH and PATH.

    Pure computation: no git repository is consulted.
    """
    from forgelink.core.models import ResourceLocator
    from forgelink.resolver import resolve_resource_url

    locator = ResourceLocator(branch=branch, path=path)
    try:
        result = resolve_resource_url(remote, resource_type.lower(), locator.branch, locator.path)
    except ForgeLinkError as e:
        _fail(e)
    click.echo(result)


@cli.command()
def forges() -> None:
    """List registered forges in match order."""
    from forgelink.forges.registry import get_registry

    try:
        registry = get_registry()
    except ForgeLinkError as e:
        _fail(e)

    for forge in registry:
        types = ", ".join(t.value for t in forge.builder.supported_types)
        click.echo(f"  {forge.hostname:<24} {forge.family:<10} {types}")


if __name__ == "__main__":
    cli()
