"""Standalone commands: ``hello`` and ``format``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickstand.domain.names import format_name, greet
from quickstand.services.result import ServiceResult

if TYPE_CHECKING:
    from quickstand.commands._context import AppContext


@click.command()
@click.argument("name", required=False, default="world")
@click.pass_obj
def hello(app: AppContext, name: str) -> None:
    """Say hello to NAME (default: world)."""
    app.emit(ServiceResult(ok=True, op="hello", data={"text": greet(name)}))


@click.command("format")
@click.argument("name")
@click.pass_obj
def format_cmd(app: AppContext, name: str) -> None:
    """Capitalize each word of NAME."""
    app.emit(ServiceResult(ok=True, op="format", data={"text": format_name(name)}))
