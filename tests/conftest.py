"""Shared pytest fixtures and test helpers for quickstand tests."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from quickstand.infrastructure.config_store import ConfigStore
from quickstand.services.repository import RepositoryService
from quickstand.services.standup import StandupService


@pytest.fixture(autouse=True)
def _git_ceiling(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop git from discovering repositories above the test's tmp_path."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and quickstand logger state after each test.

    Every CLI invocation calls configure_logging(), which replaces the root
    handler with one bound to the runner's stderr.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    qs = logging.getLogger("quickstand")
    qs_level = qs.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    qs.setLevel(qs_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Isolated config directory (not created yet)."""
    return tmp_path / "config"


@pytest.fixture
def store(config_dir: Path) -> ConfigStore:
    return ConfigStore(config_dir)


@pytest.fixture
def standups(store: ConfigStore) -> StandupService:
    return StandupService(store)


@pytest.fixture
def repositories(store: ConfigStore) -> RepositoryService:
    return RepositoryService(store)


@pytest.fixture
def make_git_repo(tmp_path: Path) -> Callable[..., Path]:
    """Factory: ``make_git_repo("api", remote="git@host:acme/api.git")``.

    Creates ``tmp_path/repos/<name>`` and runs ``git init`` in it.
    """

    def _make(name: str, *, remote: str | None = None) -> Path:
        path = tmp_path / "repos" / name
        path.mkdir(parents=True)
        subprocess.run(["git", "init"], cwd=path, capture_output=True, check=True)
        if remote:
            subprocess.run(
                ["git", "remote", "add", "origin", remote],
                cwd=path,
                capture_output=True,
                check=True,
            )
        return path

    return _make


@pytest.fixture
def _isolated_config(config_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the CLI at a temp config directory via the environment.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes.
    """
    monkeypatch.setenv("QUICKSTAND_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("HOME", str(tmp_path))


# ---------------------------------------------------------------------------
# Shared test helpers (fixtures so test modules need no imports from here)
# ---------------------------------------------------------------------------


@pytest.fixture
def create_standup(standups: StandupService) -> Callable[..., dict[str, Any]]:
    """Create a standup, asserting success, and return its data."""

    def _create(name: str, **kwargs: Any) -> dict[str, Any]:
        result = standups.create_standup(name, **kwargs)
        assert result.ok, result.error
        return result.data

    return _create


@pytest.fixture
def add_repository(repositories: RepositoryService) -> Callable[..., dict[str, Any]]:
    """Register a repository, asserting success, and return its data."""

    def _add(path: Path, **kwargs: Any) -> dict[str, Any]:
        result = repositories.add_repository(str(path), **kwargs)
        assert result.ok, result.error
        return result.data

    return _add
