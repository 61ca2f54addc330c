"""CLI for remote-url."""

import json
import sys
from pathlib import Path

import click
import structlog

from remote_url.config.logging import configure_logging
from remote_url.core.exceptions import RemoteURLError

logger = structlog.get_logger(__name__)


def _build_resolver(
    vcs: str | None,
    service: str | None,
    remote: str | None,
    https: bool | None,
    cwd: str | None = None,
):
    from remote_url.config.settings import get_settings
    from remote_url.services.page_resolver import initialize

    config = get_settings().to_resolver_config(
        vcs=vcs, service=service, remote=remote, https=https, cwd=cwd
    )
    try:
        return initialize(config)
    except RemoteURLError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """remote-url: web links for files tracked in a repository."""
    from remote_url.config.settings import get_settings

    log_level = "DEBUG" if verbose else get_settings().log_level
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--vcs", help="VCS to use (git, mercurial, subversion); auto-detect by default")
@click.option("--service", "-s", help="Hosting service override (github, gitlab, bitbucket)")
@click.option("--remote", "-r", help="Remote name (default: origin)")
@click.option("--https/--http", default=None, help="Scheme of generated links")
def resolve(
    paths: tuple[str, ...],
    vcs: str | None,
    service: str | None,
    remote: str | None,
    https: bool | None,
) -> None:
    """Print the view/raw/edit/blame/history links of files.

    Prints one JSON object per path, or null for untracked files.
    """
    resolver = _build_resolver(vcs, service, remote, https)

    for path in paths:
        absolute_path = Path(path).resolve()
        try:
            url_set = resolver.for_file(absolute_path)
        except RemoteURLError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)
        payload = url_set.model_dump() if url_set is not None else None
        click.echo(json.dumps({"path": str(absolute_path), "remote_url": payload}))


@cli.command()
@click.argument("repo_path", default=".")
@click.option("--vcs", help="VCS to use; auto-detect by default")
@click.option("--service", "-s", help="Hosting service override")
@click.option("--remote", "-r", help="Remote name (default: origin)")
def info(repo_path: str, vcs: str | None, service: str | None, remote: str | None) -> None:
    """Show the detected repository and hosting service."""
    repo_path_obj = Path(repo_path).resolve()
    if not repo_path_obj.exists():
        click.echo(f"Error: Path does not exist: {repo_path_obj}", err=True)
        sys.exit(1)

    resolver = _build_resolver(vcs, service, remote, None, cwd=str(repo_path_obj))

    click.echo("remote-url")
    if not resolver.enabled:
        click.echo(f"  VCS:      {resolver.vcs or 'none detected'} (disabled)")
        return

    click.echo(f"  VCS:      {resolver.vcs}")
    click.echo(f"  Root:     {resolver.root}")
    click.echo(f"  Service:  {resolver.service}")
    click.echo(f"  Base URL: {resolver.remote.base_url}")
    click.echo(f"  Repo:     {resolver.remote.path_to_repo}")
    click.echo(f"  Branch:   {resolver.remote.branch}")


if __name__ == "__main__":
    cli()
