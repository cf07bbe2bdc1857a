"""Tests for the ServiceResult contract."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from datespin.domain.errors import ParseError
from datespin.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="format", data={"text": "x"})
        assert result.warnings == []
        assert result.error is None

    def test_failure_from_exception(self) -> None:
        exc = ParseError("could not be parsed", text="abc", error_index=2)
        result = ServiceResult.failure("parse", exc)
        assert not result.ok
        assert result.error == ServiceError(
            code="PARSE_ERROR",
            message="could not be parsed",
            detail={"text": "abc", "error_index": 2},
        )

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="format")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
