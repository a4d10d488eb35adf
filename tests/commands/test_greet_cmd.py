"""Tests for the standalone ``hello`` and ``format`` commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from quickstand.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestHello:
    def test_default_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["hello"])
        assert result.exit_code == 0
        assert result.stdout == "Hello, world!\n"

    def test_named(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["hello", "John"])
        assert result.stdout == "Hello, John!\n"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "hello", "Ada"])
        payload = json.loads(result.stdout)
        assert payload["op"] == "hello"
        assert payload["data"]["text"] == "Hello, Ada!"

    def test_does_not_touch_config(self, cli_runner: CliRunner, config_dir: Path) -> None:
        cli_runner.invoke(cli, ["hello"])
        assert not config_dir.exists()


@pytest.mark.usefixtures("_isolated_config")
class TestFormat:
    def test_capitalizes_words(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", "jOHN smith"])
        assert result.exit_code == 0
        assert result.stdout == "John Smith\n"

    def test_requires_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format"])
        assert result.exit_code == 2
