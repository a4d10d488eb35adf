"""Command group: register and manage git repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickstand.services.repository import RepositoryService

if TYPE_CHECKING:
    from quickstand.commands._context import AppContext

_REPO_EPILOG = """\b
Examples:
  quickstand repo add ~/code/api -s 3f2b9c1e-...
  quickstand repo add . --name web
  quickstand repo list -s 3f2b9c1e-...
  quickstand repo update 9a41d0c2-... --inactive"""


@click.group(epilog=_REPO_EPILOG)
def repo() -> None:
    """Manage repositories."""


@repo.command()
@click.argument("path")
@click.option("-n", "--name", default=None, help="Custom name (default: from git remote).")
@click.option("-s", "--standup", "standup_id", default=None, help="Standup ID to add it to.")
@click.pass_obj
def add(app: AppContext, path: str, name: str | None, standup_id: str | None) -> None:
    """Register the git repository at PATH."""
    result = RepositoryService(app.store).add_repository(path, name=name, standup_id=standup_id)
    app.emit(result)


@repo.command("list")
@click.option("-s", "--standup", "standup_id", default=None, help="Only this standup's members.")
@click.pass_obj
def list_cmd(app: AppContext, standup_id: str | None) -> None:
    """List repositories."""
    app.emit(RepositoryService(app.store).list_repositories(standup_id))


@repo.command()
@click.argument("repository_id")
@click.pass_obj
def show(app: AppContext, repository_id: str) -> None:
    """Show a repository."""
    app.emit(RepositoryService(app.store).get_repository(repository_id))


@repo.command()
@click.argument("repository_id")
@click.option("-n", "--name", default=None, help="New display name.")
@click.option("--path", default=None, help="New path (must be a git repository).")
@click.option("--active/--inactive", default=None, help="Mark the repository active or not.")
@click.pass_obj
def update(
    app: AppContext,
    repository_id: str,
    name: str | None,
    path: str | None,
    active: bool | None,
) -> None:
    """Rename, move, or (de)activate a repository."""
    changes: dict[str, object] = {}
    if name is not None:
        changes["name"] = name
    if path is not None:
        changes["path"] = path
    if active is not None:
        changes["active"] = active

    if not changes:
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)

    app.emit(RepositoryService(app.store).update_repository(repository_id, changes=changes))


@repo.command()
@click.argument("repository_id")
@click.pass_obj
def remove(app: AppContext, repository_id: str) -> None:
    """Remove a repository and drop it from every standup."""
    app.emit(RepositoryService(app.store).remove_repository(repository_id))
