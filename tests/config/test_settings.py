"""Tests for PenalSettings — unified settings with TOML source."""

import os
from pathlib import Path

import click
import pytest

from penalcalc.config.settings import PenalSettings
from penalcalc.domain.types import PenalMode


class TestPenalSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = PenalSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.calculation.default_mode == PenalMode.SUBTRACAO
        assert settings.calculation.default_fraction == "1/6"
        assert settings.fine.default_fraction == "1/30"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PenalSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "penalcalc.toml"
        toml.write_text('[calculation]\ndefault_mode = "soma"\n[fine]\ndefault_fraction = "1/2"\n')
        settings = PenalSettings.from_cli(start=tmp_path)
        assert settings.calculation.default_mode == PenalMode.SOMA
        assert settings.fine.default_fraction == "1/2"
        assert settings.calculation.default_fraction == "1/6"  # default preserved
        assert settings.config_path == toml.resolve()

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "penalcalc.toml").write_text("")
        settings = PenalSettings.from_cli(start=tmp_path)
        assert settings.calculation.default_mode == PenalMode.SUBTRACAO

    def test_discovered_from_child_directory(self, tmp_path: Path) -> None:
        (tmp_path / "penalcalc.toml").write_text('[calculation]\ndefault_fraction = "2/3"\n')
        child = tmp_path / "casos" / "2024"
        child.mkdir(parents=True)
        settings = PenalSettings.from_cli(start=child)
        assert settings.calculation.default_fraction == "2/3"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "vara.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[calculation]\ndefault_fraction = "40%"\n')
        settings = PenalSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.calculation.default_fraction == "40%"
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "penalcalc.toml").write_text("[calculation\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PenalSettings.from_cli(start=tmp_path)

    def test_invalid_mode_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "penalcalc.toml").write_text('[calculation]\ndefault_mode = "divisao"\n')
        with pytest.raises(Exception):
            PenalSettings.from_cli(start=tmp_path)


class TestEnvOverrides:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "penalcalc.toml").write_text('[calculation]\ndefault_mode = "soma"\n')
        monkeypatch.setenv("PENALCALC_CALCULATION__DEFAULT_MODE", "subtracao")
        settings = PenalSettings.from_cli(start=tmp_path)
        assert settings.calculation.default_mode == PenalMode.SUBTRACAO


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = PenalSettings.from_cli(
            start=tmp_path,
            json_output=True,
            quiet=True,
            verbose=True,
            log_json=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_unset_flags_are_not_passed(self, tmp_path: Path) -> None:
        settings = PenalSettings.from_cli(start=tmp_path, json_output=False, quiet=None)
        assert settings.json_output is False
        assert settings.quiet is False

    def test_flag_env_vars_are_read(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PENALCALC_QUIET", "true")
        monkeypatch.setenv("PENALCALC_JSON_OUTPUT", "1")
        settings = PenalSettings.from_cli(start=tmp_path)
        assert settings.quiet is True
        assert settings.json_output is True

    def test_no_flag_env_vars_leak_into_tests(self) -> None:
        assert not [name for name in os.environ if name.startswith("PENALCALC_")]
