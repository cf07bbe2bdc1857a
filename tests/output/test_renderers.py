"""Tests for ServiceResult rendering."""

from __future__ import annotations

import json

from datespin.output.formatters import OutputSettings, format_result
from datespin.output.renderers import render_quiet, render_result
from datespin.services.result import ServiceError, ServiceResult

STEP = ServiceResult(
    ok=True,
    op="step",
    data={
        "start": "2024-01-02 00:00",
        "value": "2024-01-03 00:00",
        "iso": "2024-01-03T00:00:00",
        "direction": "next",
        "unit": "days",
        "steps": ["2024-01-03 00:00"],
        "taken": 1,
        "stopped_at_bound": True,
    },
    warnings=["Stopped after 1 of 5 steps: maximum reached"],
)

PARSE_FAILURE = ServiceResult(
    ok=False,
    op="parse",
    error=ServiceError(
        code="PARSE_ERROR",
        message="Text 'x' could not be parsed at index 0",
        detail={"text": "x", "error_index": 0},
    ),
)


class TestRenderResult:
    def test_generic(self) -> None:
        result = ServiceResult(ok=True, op="format", data={"text": "2024-03-05 09:30"})
        output = render_result(result)
        assert "OK" in output
        assert "format" in output
        assert "text: 2024-03-05 09:30" in output

    def test_step_table(self) -> None:
        output = render_result(STEP)
        assert "next" in output
        assert "2024-01-03 00:00" in output
        assert "stopped at bound" in output

    def test_columns(self) -> None:
        result = ServiceResult(
            ok=True,
            op="columns",
            data={"columns": None, "minimum": "", "maximum": "", "pattern": "yyyy"},
        )
        output = render_result(result)
        assert "columns: -" in output

    def test_error(self) -> None:
        output = render_result(PARSE_FAILURE)
        assert "ERROR" in output
        assert "could not be parsed at index 0" in output
        assert "error_index: 0" in output


class TestRenderQuiet:
    def test_value_only(self) -> None:
        assert render_quiet(STEP) == "2024-01-03 00:00"

    def test_unknown_op(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="other")) == "OK: other"

    def test_none_value(self) -> None:
        result = ServiceResult(ok=True, op="columns", data={"columns": None})
        assert render_quiet(result) == ""

    def test_error(self) -> None:
        assert render_quiet(PARSE_FAILURE).startswith("ERROR: parse")


class TestFormatResult:
    def test_json_wins_over_quiet(self) -> None:
        output = format_result(STEP, settings=OutputSettings(json_output=True, quiet=True))
        payload = json.loads(output)
        assert payload["data"]["iso"] == "2024-01-03T00:00:00"
        assert payload["warnings"] == STEP.warnings

    def test_quiet(self) -> None:
        assert format_result(STEP, settings=OutputSettings(quiet=True)) == "2024-01-03 00:00"

    def test_default_is_rich(self) -> None:
        assert "OK" in format_result(STEP)
