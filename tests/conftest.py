"""Shared pytest fixtures and test helpers for penalcalc tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from penalcalc.config.settings import PenalSettings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from any real penalcalc.toml or PENALCALC_* env vars."""
    for name in list(os.environ):
        if name.startswith("PENALCALC_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    penal = logging.getLogger("penalcalc")
    penal_level = penal.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    penal.setLevel(penal_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> PenalSettings:
    """Settings with code defaults only."""
    return PenalSettings.from_cli(start=tmp_path)
