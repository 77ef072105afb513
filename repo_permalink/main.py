"""CLI entry point for repo-permalink."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from repo_permalink.config.settings import PermalinkSettings
from repo_permalink.exceptions import ConfigurationError, RepoPermalinkError
from repo_permalink.notifications import Notification, Severity
from repo_permalink.resolver import PermalinkResolver
from repo_permalink.utils.logging_config import configure_logging, get_logger

log = get_logger(__name__)


class ClickNotificationSink:
    """Prints notifications on stderr."""

    def notify(self, notification: Notification) -> None:
        prefix = "Error" if notification.severity is Severity.ERROR else "Warning"
        click.echo(f"{prefix}: {notification.message}", err=True)


@click.group()
@click.option("--config", type=click.Path(dir_okay=False), default=None, help="Path to YAML configuration file")
@click.option("--remote", default=None, help="Remote to use instead of selecting one from the current branch")
@click.option("--repo-path", type=click.Path(file_okay=False), default=None, help="Directory inside the git working tree")
@click.option("--max-ancestor-depth", type=click.IntRange(min=0), default=None, help="Ancestors of HEAD to check")
@click.option("--log-level", default=None, help="Logging level")
@click.pass_context
def cli(
    ctx: click.Context,
    config: str | None,
    remote: str | None,
    repo_path: str | None,
    max_ancestor_depth: int | None,
    log_level: str | None,
) -> None:
    """repo-permalink: resolve git remotes and revisions for permalinks."""
    try:
        settings = PermalinkSettings.from_yaml(config) if config else PermalinkSettings()
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    overrides: dict[str, Any] = {
        "remote": remote,
        "repo_path": Path(repo_path) if repo_path else None,
        "max_ancestor_depth": max_ancestor_depth,
        "log_level": log_level,
    }
    try:
        settings = PermalinkSettings(**{**settings.model_dump(), **{k: v for k, v in overrides.items() if v is not None}})
    except ValidationError as e:
        click.echo(f"Error: Invalid option: {e}", err=True)
        sys.exit(1)

    configure_logging(settings.log_level)
    ctx.obj = {"resolver": PermalinkResolver.from_settings(settings, sink=ClickNotificationSink())}


def _run(func: Callable[[], dict[str, Any] | None]) -> None:
    """Print the command's result as JSON; exit 1 when there is none."""
    try:
        result = func()
    except RepoPermalinkError as e:
        click.echo(f"Error: {e}", err=True)
        log.debug("command_error", exc_info=True)
        sys.exit(1)

    if result is None:
        sys.exit(1)
    click.echo(json.dumps(result, indent=2))


@cli.command("select-remote")
@click.pass_context
def select_remote(ctx: click.Context) -> None:
    """Print the remote permalinks should point at."""
    resolver: PermalinkResolver = ctx.obj["resolver"]

    def command() -> dict[str, Any] | None:
        remote = resolver.remote()
        return {"remote": remote} if remote else None

    _run(command)


@cli.command("repo-data")
@click.pass_context
def repo_data(ctx: click.Context) -> None:
    """Print host, port, repo path and tracking branch of the remote."""
    resolver: PermalinkResolver = ctx.obj["resolver"]

    def command() -> dict[str, Any] | None:
        remote = resolver.remote()
        if not remote:
            return None
        data = resolver.assembler.get_repo_data(remote)
        return data.model_dump() if data else None

    _run(command)


@cli.command("closest-rev")
@click.pass_context
def closest_rev(ctx: click.Context) -> None:
    """Print the closest commit to HEAD that exists on the remote."""
    resolver: PermalinkResolver = ctx.obj["resolver"]

    def command() -> dict[str, Any] | None:
        remote = resolver.remote()
        if not remote:
            return None
        rev = resolver.revisions.closest_remote_compatible_rev(remote)
        return {"remote": remote, "rev": rev} if rev else None

    _run(command)


@cli.command()
@click.argument("file")
@click.argument("line", type=click.IntRange(min=1))
@click.option("--end-line", type=click.IntRange(min=1), default=None, help="Last line of the range")
@click.pass_context
def resolve(ctx: click.Context, file: str, line: int, end_line: int | None) -> None:
    """Print permalink parts for FILE at LINE."""
    resolver: PermalinkResolver = ctx.obj["resolver"]
    if end_line is not None and end_line < line:
        raise click.BadParameter("must not be before LINE", param_hint="--end-line")

    def command() -> dict[str, Any] | None:
        target = resolver.resolve(file, line, end_line)
        return target.model_dump() if target else None

    _run(command)


if __name__ == "__main__":
    cli()
