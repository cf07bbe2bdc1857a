"""Tests for step units and calendar-aware stepping."""

from __future__ import annotations

from datetime import datetime

import pytest

from datespin.domain.units import StepUnit, add_units, coerce_unit


class TestCoerceUnit:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (StepUnit.HOURS, StepUnit.HOURS),
            ("days", StepUnit.DAYS),
            ("Day", StepUnit.DAYS),
            ("  MONTHS ", StepUnit.MONTHS),
            ("ms", StepUnit.MILLIS),
            ("us", StepUnit.MICROS),
            ("min", StepUnit.MINUTES),
        ],
    )
    def test_known_spellings(self, raw: str, expected: StepUnit) -> None:
        assert coerce_unit(raw) is expected

    def test_unknown_unit_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown step unit"):
            coerce_unit("fortnight")

    def test_str_enum_value(self) -> None:
        assert str(StepUnit.WEEKS) == "weeks"


class TestAddUnits:
    def test_month_end_clamps(self) -> None:
        assert add_units(datetime(2024, 1, 31), StepUnit.MONTHS) == datetime(2024, 2, 29)

    def test_month_backwards_clamps(self) -> None:
        assert add_units(datetime(2023, 3, 31), StepUnit.MONTHS, -1) == datetime(2023, 2, 28)

    def test_leap_day_plus_year(self) -> None:
        assert add_units(datetime(2024, 2, 29), StepUnit.YEARS) == datetime(2025, 2, 28)

    def test_week(self) -> None:
        assert add_units(datetime(2024, 12, 28), StepUnit.WEEKS) == datetime(2025, 1, 4)

    def test_sub_second_units(self) -> None:
        start = datetime(2024, 1, 1)
        assert add_units(start, StepUnit.MILLIS) == datetime(2024, 1, 1, 0, 0, 0, 1000)
        assert add_units(start, StepUnit.MICROS, -1) == datetime(2023, 12, 31, 23, 59, 59, 999999)

    def test_count_multiplies(self) -> None:
        assert add_units(datetime(2024, 1, 1, 9), StepUnit.HOURS, 5) == datetime(2024, 1, 1, 14)

    def test_overflow_past_max_returns_none(self) -> None:
        assert add_units(datetime(9999, 12, 31), StepUnit.DAYS) is None
        assert add_units(datetime(9999, 6, 1), StepUnit.YEARS) is None

    def test_overflow_before_min_returns_none(self) -> None:
        assert add_units(datetime(1, 1, 1), StepUnit.DAYS, -1) is None
