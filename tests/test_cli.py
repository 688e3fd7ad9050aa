"""Tests for the root penalcalc CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from penalcalc import __version__
from penalcalc.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "penalcalc" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [
        ["--json"],
        ["-q"],
        ["-v"],
        ["--log-json"],
        ["-c", "/tmp/penalcalc-missing.toml"],
    ],
)
def test_global_flag_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


def test_invalid_toml_reports_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "penalcalc.toml").write_text("[calculation\n")
    result = cli_runner.invoke(cli, ["catalog", "wages"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


# --- Commands registered ---

EXPECTED_GROUPS = ["catalog"]

EXPECTED_COMMANDS = ["execution", "dosimetry", "fine"]


@pytest.mark.parametrize("name", EXPECTED_GROUPS)
def test_group_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(name: str) -> None:
    assert name in cli.commands
