"""Tests for the datespin exception hierarchy."""

from __future__ import annotations

from datespin.domain.errors import DatespinError, InvalidArgument, ParseError, PatternError


class TestErrors:
    def test_invalid_argument_is_value_error(self) -> None:
        err = InvalidArgument("unit is None")
        assert isinstance(err, ValueError)
        assert isinstance(err, DatespinError)
        assert err.code == "INVALID_ARGUMENT"
        assert err.details == {}

    def test_pattern_error_is_invalid_argument(self) -> None:
        err = PatternError("bad pattern", details={"pattern": "Q"})
        assert isinstance(err, InvalidArgument)
        assert err.code == "INVALID_PATTERN"
        assert err.details["pattern"] == "Q"

    def test_parse_error_carries_offset(self) -> None:
        err = ParseError("Text 'x' could not be parsed at index 0", text="x", error_index=0)
        assert err.text == "x"
        assert err.error_index == 0
        assert err.details == {"text": "x", "error_index": 0}
        assert str(err) == err.message
        assert not isinstance(err, InvalidArgument)
