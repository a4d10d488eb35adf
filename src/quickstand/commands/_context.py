"""Per-invocation state shared by every quickstand command.

The root group builds one :class:`AppContext` from the parsed settings and
stores it as ``ctx.obj``; commands receive it through ``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from quickstand.config.logging import configure_logging
from quickstand.infrastructure.config_store import ConfigStore
from quickstand.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from quickstand.config.settings import QuickstandSettings
    from quickstand.services.result import ServiceResult


class AppContext:
    """Settings, the config store, and result output for one CLI run.

    The store is opened on first use, so ``hello`` and ``--help`` never
    create the config directory.
    """

    def __init__(self, settings: QuickstandSettings) -> None:
        self.settings = settings
        self._store: ConfigStore | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> ConfigStore:
        if self._store is None:
            self._store = ConfigStore(self.settings.config_dir)
        return self._store

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        A successful result goes to stdout, followed by its warnings on
        stderr (JSON output already carries them). A failed result goes to
        stderr and ends the command with exit code 1.
        """
        output_settings = self.output_settings
        text = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if output_settings.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
