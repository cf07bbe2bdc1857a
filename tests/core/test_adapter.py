"""Tests for DateTimeTextAdapter."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from datespin.core.adapter import DateTimeTextAdapter
from datespin.domain.errors import ParseError, PatternError
from datespin.domain.patterns import DateTimePattern

US = "MM/dd/yyyy HH:mm"


@pytest.fixture
def adapter() -> DateTimeTextAdapter:
    return DateTimeTextAdapter(US)


class TestFormat:
    def test_datetime(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.format(datetime(2024, 3, 5, 9, 30)) == "03/05/2024 09:30"

    def test_none_is_empty(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.format(None) == ""

    def test_date_is_midnight(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.format(date(2024, 3, 5)) == "03/05/2024 00:00"

    def test_iso_text(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.format("2024-03-05T09:30:00") == "03/05/2024 09:30"

    def test_iso_offset_is_dropped(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.format("2024-03-05T09:30:00+02:00") == "03/05/2024 09:30"

    def test_canonical_text(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.format("03/05/2024 09:30") == "03/05/2024 09:30"

    def test_date_only_text(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.format("03/05/2024") == "03/05/2024 00:00"

    def test_aware_datetime_keeps_wall_clock(self, adapter: DateTimeTextAdapter) -> None:
        aware = datetime(2024, 3, 5, 9, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert adapter.format(aware) == "03/05/2024 09:30"

    def test_unreadable_text(self, adapter: DateTimeTextAdapter) -> None:
        with pytest.raises(ParseError):
            adapter.format("garbage")

    def test_unsupported_type(self, adapter: DateTimeTextAdapter) -> None:
        with pytest.raises(ParseError, match="Cannot format int"):
            adapter.format(12345)  # type: ignore[arg-type]


class TestParse:
    def test_full(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.parse("03/05/2024 09:30") == datetime(2024, 3, 5, 9, 30)

    def test_date_only_fallback(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.parse("03/05/2024") == datetime(2024, 3, 5, 0, 0)

    def test_garbage_raises_with_offset(self, adapter: DateTimeTextAdapter) -> None:
        with pytest.raises(ParseError) as exc_info:
            adapter.parse("not-a-date")
        assert exc_info.value.error_index == 0
        assert exc_info.value.text == "not-a-date"

    def test_offset_comes_from_date_only_attempt(self, adapter: DateTimeTextAdapter) -> None:
        with pytest.raises(ParseError, match="unparsed text found at index 10") as exc_info:
            adapter.parse("03/05/2024 09:3x")
        assert exc_info.value.error_index == 10

    @pytest.mark.parametrize("text", ["0²/05/2024 09:30", "03/05/2024 ⁰9:30", "03/05/²⁰²⁴"])
    def test_non_ascii_digits_raise_parse_error(
        self, adapter: DateTimeTextAdapter, text: str
    ) -> None:
        with pytest.raises(ParseError):
            adapter.parse(text)
        with pytest.raises(ParseError):
            adapter.format(text)
        assert adapter.try_parse(text) is None

    def test_iso_is_not_a_parse_format(self, adapter: DateTimeTextAdapter) -> None:
        with pytest.raises(ParseError):
            adapter.parse("2024-03-05T09:30:00")

    def test_non_text_rejected(self, adapter: DateTimeTextAdapter) -> None:
        with pytest.raises(ParseError, match="expected text"):
            adapter.parse(None)  # type: ignore[arg-type]

    def test_try_parse(self, adapter: DateTimeTextAdapter) -> None:
        assert adapter.try_parse("03/05/2024 09:30") == datetime(2024, 3, 5, 9, 30)
        assert adapter.try_parse("nope") is None

    @pytest.mark.parametrize(
        "value",
        [
            datetime(2024, 3, 5, 9, 30),
            datetime(1999, 12, 31, 23, 59),
            datetime(2024, 2, 29, 0, 0),
        ],
    )
    def test_round_trip(self, adapter: DateTimeTextAdapter, value: datetime) -> None:
        assert adapter.parse(adapter.format(value)) == value


class TestConstruction:
    def test_accepts_compiled_pattern(self) -> None:
        pattern = DateTimePattern("yyyy")
        assert DateTimeTextAdapter(pattern).pattern is pattern

    def test_shares_compiled_patterns(self) -> None:
        assert DateTimeTextAdapter(US).pattern is DateTimeTextAdapter(US).pattern

    def test_bad_pattern(self) -> None:
        with pytest.raises(PatternError):
            DateTimeTextAdapter("yyyy-MM-dd Q")
