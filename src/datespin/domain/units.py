"""Step units and calendar-aware stepping.

Calendar math is delegated to ``dateutil.relativedelta``: adding one month
to Jan 31 lands on the last day of February.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from dateutil.relativedelta import relativedelta


class StepUnit(StrEnum):
    """Granularity by which a value advances or retreats by one step."""

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLIS = "millis"
    MICROS = "micros"


_ONE_UNIT: dict[StepUnit, relativedelta] = {
    StepUnit.YEARS: relativedelta(years=1),
    StepUnit.MONTHS: relativedelta(months=1),
    StepUnit.WEEKS: relativedelta(weeks=1),
    StepUnit.DAYS: relativedelta(days=1),
    StepUnit.HOURS: relativedelta(hours=1),
    StepUnit.MINUTES: relativedelta(minutes=1),
    StepUnit.SECONDS: relativedelta(seconds=1),
    StepUnit.MILLIS: relativedelta(microseconds=1000),
    StepUnit.MICROS: relativedelta(microseconds=1),
}

UNIT_ALIASES: dict[str, StepUnit] = {
    "y": StepUnit.YEARS,
    "year": StepUnit.YEARS,
    "month": StepUnit.MONTHS,
    "mon": StepUnit.MONTHS,
    "w": StepUnit.WEEKS,
    "week": StepUnit.WEEKS,
    "d": StepUnit.DAYS,
    "day": StepUnit.DAYS,
    "h": StepUnit.HOURS,
    "hour": StepUnit.HOURS,
    "min": StepUnit.MINUTES,
    "minute": StepUnit.MINUTES,
    "s": StepUnit.SECONDS,
    "sec": StepUnit.SECONDS,
    "second": StepUnit.SECONDS,
    "ms": StepUnit.MILLIS,
    "milli": StepUnit.MILLIS,
    "milliseconds": StepUnit.MILLIS,
    "us": StepUnit.MICROS,
    "micro": StepUnit.MICROS,
    "microseconds": StepUnit.MICROS,
}


def coerce_unit(raw: StepUnit | str) -> StepUnit:
    """Resolve *raw* to a :class:`StepUnit`.

    Accepts members, canonical values, and the spellings in
    :data:`UNIT_ALIASES`, case-insensitively.

    Raises:
        ValueError: If *raw* names no known unit.
    """
    if isinstance(raw, StepUnit):
        return raw
    key = str(raw).strip().lower()
    try:
        return StepUnit(key)
    except ValueError:
        pass
    if key in UNIT_ALIASES:
        return UNIT_ALIASES[key]
    msg = f"Unknown step unit: {raw!r}. Available: {[u.value for u in StepUnit]}"
    raise ValueError(msg)


def add_units(value: datetime, unit: StepUnit, count: int = 1) -> datetime | None:
    """Return *value* moved by *count* units, or None outside the datetime range."""
    try:
        return value + _ONE_UNIT[unit] * count
    except (OverflowError, ValueError):
        return None
