"""Command group: create, inspect, and edit standups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickstand.services.standup import StandupService

if TYPE_CHECKING:
    from quickstand.commands._context import AppContext

_STANDUP_EPILOG = """\b
Examples:
  quickstand standup create "Platform Team" -d "Daily platform sync"
  quickstand standup list
  quickstand standup set-default 3f2b9c1e-...
  quickstand --json standup show"""


@click.group(epilog=_STANDUP_EPILOG)
def standup() -> None:
    """Manage standups."""


@standup.command()
@click.argument("name")
@click.option("-d", "--description", default=None, help="Description of the standup.")
@click.pass_obj
def create(app: AppContext, name: str, description: str | None) -> None:
    """Create a new standup (the first one becomes the default)."""
    app.emit(StandupService(app.store).create_standup(name, description=description))


@standup.command("list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all standups. The default is marked with *."""
    app.emit(StandupService(app.store).list_standups())


@standup.command()
@click.argument("standup_id", required=False, default=None)
@click.pass_obj
def show(app: AppContext, standup_id: str | None) -> None:
    """Show a standup, or the default standup when STANDUP_ID is omitted."""
    app.emit(StandupService(app.store).get_standup(standup_id))


@standup.command()
@click.argument("standup_id")
@click.option("--name", default=None, help="New name (must be unique).")
@click.option("-d", "--description", default=None, help="New description.")
@click.pass_obj
def update(app: AppContext, standup_id: str, name: str | None, description: str | None) -> None:
    """Rename a standup or change its description."""
    changes: dict[str, object] = {}
    if name is not None:
        changes["name"] = name
    if description is not None:
        changes["description"] = description

    if not changes:
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)

    app.emit(StandupService(app.store).update_standup(standup_id, changes=changes))


@standup.command("set-default")
@click.argument("standup_id")
@click.pass_obj
def set_default(app: AppContext, standup_id: str) -> None:
    """Set the default standup."""
    app.emit(StandupService(app.store).set_default_standup(standup_id))


@standup.command()
@click.argument("standup_id")
@click.pass_obj
def remove(app: AppContext, standup_id: str) -> None:
    """Remove a standup. Its repositories stay registered."""
    app.emit(StandupService(app.store).remove_standup(standup_id))


@standup.command("add-repo")
@click.argument("standup_id")
@click.argument("repository_id")
@click.pass_obj
def add_repo(app: AppContext, standup_id: str, repository_id: str) -> None:
    """Add a registered repository to a standup."""
    app.emit(StandupService(app.store).add_repository_to_standup(standup_id, repository_id))


@standup.command("remove-repo")
@click.argument("standup_id")
@click.argument("repository_id")
@click.pass_obj
def remove_repo(app: AppContext, standup_id: str, repository_id: str) -> None:
    """Remove a repository from a standup without unregistering it."""
    app.emit(StandupService(app.store).remove_repository_from_standup(standup_id, repository_id))
