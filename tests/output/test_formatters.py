"""Tests for the format_result dispatcher and OutputSettings."""

import json

import pytest

from penalcalc.output.formatters import OutputSettings, format_result
from penalcalc.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(Exception):
            s.quiet = True  # type: ignore[misc]


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("fine", amount="470.67")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "fine"
        assert data["data"]["amount"] == "470.67"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("fine", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        data = json.loads(format_result(_ok("fine"), settings=settings))
        assert data["op"] == "fine"


class TestFormatResultQuiet:
    def test_quiet_success(self) -> None:
        output = format_result(_ok("execution"), settings=OutputSettings(quiet=True))
        assert output == "OK: execution"

    def test_quiet_error(self) -> None:
        output = format_result(_err("execution", "Bad"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: execution")
        assert "Bad" in output


class TestFormatResultRich:
    def test_default_is_rich(self) -> None:
        output = format_result(_ok("custom", key="val"))
        assert "OK" in output
        assert "key" in output
        assert "val" in output
