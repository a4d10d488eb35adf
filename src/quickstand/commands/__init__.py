"""Click commands for quickstand, attached to the root group by register_commands()."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the ``standup`` and ``repo`` groups plus ``hello`` and ``format``."""
    from quickstand.commands.greet import format_cmd, hello
    from quickstand.commands.repo import repo
    from quickstand.commands.standup import standup

    for command in (standup, repo, hello, format_cmd):
        cli.add_command(command)
