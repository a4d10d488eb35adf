"""Unified settings — CLI flags, env vars, and defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``QUICKSTAND_*`` prefix
  3. Code defaults

The config directory is a setting rather than a module constant, so tests
and ``--config-dir`` can point the store at an isolated location.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_CONFIG_DIRNAME = ".quickstand"


def default_config_dir() -> Path:
    """``~/.quickstand``."""
    return Path.home() / DEFAULT_CONFIG_DIRNAME


class QuickstandSettings(BaseSettings):
    """Settings for the quickstand CLI, frozen after construction.

    Stored on the :class:`~quickstand.commands._context.AppContext` created
    by the root CLI group.

    Attributes:
        config_dir: Directory holding ``config.json``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "QUICKSTAND_",
    }

    config_dir: Path = Field(default_factory=default_config_dir)

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @field_validator("config_dir")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @classmethod
    def from_cli(
        cls,
        *,
        config_dir: str | Path | None = None,
        **cli_flags: Any,
    ) -> QuickstandSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_dir* overrides ``QUICKSTAND_CONFIG_DIR``. Flags left
        off the command line (False) fall through to their env vars.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        if config_dir is not None:
            overrides["config_dir"] = Path(config_dir)
        return cls(**overrides)
