"""BoundedSteppableDateTime: the spinner value model.

Holds a civil (naive) datetime, optional inclusive bounds, and a step
unit. Bounds are enforced by stepping only: ``next_value`` and
``previous_value`` return None at the edge, while ``set_value`` and the
bound setters stay permissive and never clamp.

INVARIANT: ``minimum <= value <= maximum`` holds at construction.
Later bound changes are not re-checked.

Notification is synchronous and not guarded against re-entry: a
subscriber must not call ``set_value`` on the same model from inside its
callback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from datespin.domain.errors import InvalidArgument
from datespin.domain.units import StepUnit, add_units, coerce_unit

logger = logging.getLogger(__name__)

_UNSET: Any = object()


@dataclass(frozen=True)
class ValueChange:
    """Change event delivered to subscribers after an accepted ``set_value``."""

    source: BoundedSteppableDateTime
    old_value: datetime
    new_value: datetime


Observer = Callable[[ValueChange], None]


@dataclass(eq=False)
class Subscription:
    """Handle returned by :meth:`BoundedSteppableDateTime.subscribe`."""

    model: BoundedSteppableDateTime
    callback: Observer
    active: bool = field(default=True)

    def cancel(self) -> None:
        """Stop receiving notifications. Safe to call more than once."""
        self.model.unsubscribe(self)


def _require_datetime(name: str, value: Any) -> datetime:
    if value is None:
        raise InvalidArgument(f"{name} is None")
    if not isinstance(value, datetime):
        raise InvalidArgument(
            f"{name} must be a datetime, got {type(value).__name__}",
            details={"argument": name},
        )
    if value.tzinfo is not None:
        raise InvalidArgument(
            f"{name} must be a naive (civil) datetime, got tzinfo={value.tzinfo}",
            details={"argument": name},
        )
    return value


def _optional_datetime(name: str, value: Any) -> datetime | None:
    if value is None:
        return None
    return _require_datetime(name, value)


def _require_unit(value: Any) -> StepUnit:
    if value is None:
        raise InvalidArgument("unit is None")
    try:
        return coerce_unit(value)
    except ValueError as exc:
        raise InvalidArgument(str(exc), details={"argument": "unit"}) from exc


class BoundedSteppableDateTime:
    """A date-time value with optional inclusive bounds and a step unit.

    Usage::

        model = BoundedSteppableDateTime(
            datetime(2024, 1, 2),
            minimum=datetime(2024, 1, 1),
            maximum=datetime(2024, 1, 3),
            unit=StepUnit.DAYS,
        )
        model.next_value()   # datetime(2024, 1, 3)

    ``BoundedSteppableDateTime(value)`` is unbounded with a one-day step;
    ``BoundedSteppableDateTime()`` additionally starts at the current
    local time.

    Raises:
        InvalidArgument: If the initial value or unit is None or of the
            wrong type, or the initial value lies outside the bounds.
    """

    def __init__(
        self,
        initial_value: datetime = _UNSET,
        minimum: datetime | None = None,
        maximum: datetime | None = None,
        unit: StepUnit | str = StepUnit.DAYS,
    ) -> None:
        if initial_value is _UNSET:
            initial_value = datetime.now()
        value = _require_datetime("initial_value", initial_value)
        resolved_unit = _require_unit(unit)
        lower = _optional_datetime("minimum", minimum)
        upper = _optional_datetime("maximum", maximum)

        if not ((lower is None or lower <= value) and (upper is None or value <= upper)):
            raise InvalidArgument(
                "(minimum <= initial_value <= maximum) is false",
                details={
                    "initial_value": value.isoformat(),
                    "minimum": lower.isoformat() if lower else None,
                    "maximum": upper.isoformat() if upper else None,
                },
            )

        self._value = value
        self._minimum = lower
        self._maximum = upper
        self._unit = resolved_unit
        self._subscriptions: list[Subscription] = []

    def __repr__(self) -> str:
        return (
            f"BoundedSteppableDateTime(value={self._value!r}, minimum={self._minimum!r}, "
            f"maximum={self._maximum!r}, unit={self._unit.value!r})"
        )

    # ------------------------------------------------------------------
    # Value
    # ------------------------------------------------------------------

    @property
    def value(self) -> datetime:
        """The current value."""
        return self._value

    @value.setter
    def value(self, new_value: datetime) -> None:
        self.set_value(new_value)

    def set_value(self, new_value: datetime) -> None:
        """Replace the current value and notify subscribers.

        Equal values are a no-op with no notification. Bounds are not
        enforced here.

        Raises:
            InvalidArgument: If *new_value* is None or not a naive datetime.
        """
        new_value = _require_datetime("value", new_value)
        if new_value == self._value:
            return
        old_value = self._value
        self._value = new_value
        logger.debug("Value changed: %s -> %s", old_value.isoformat(), new_value.isoformat())
        self._notify(ValueChange(source=self, old_value=old_value, new_value=new_value))

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def next_value(self) -> datetime | None:
        """Value one unit later, or None if that would exceed the maximum."""
        candidate = add_units(self._value, self._unit, 1)
        if candidate is None:
            return None
        if self._maximum is None or candidate <= self._maximum:
            return candidate
        return None

    def previous_value(self) -> datetime | None:
        """Value one unit earlier, or None if that would fall below the minimum."""
        candidate = add_units(self._value, self._unit, -1)
        if candidate is None:
            return None
        if self._minimum is None or candidate >= self._minimum:
            return candidate
        return None

    # ------------------------------------------------------------------
    # Bounds and unit (no clamping, no notification)
    # ------------------------------------------------------------------

    @property
    def minimum(self) -> datetime | None:
        return self._minimum

    @minimum.setter
    def minimum(self, minimum: datetime | None) -> None:
        self.set_minimum(minimum)

    def set_minimum(self, minimum: datetime | None) -> None:
        self._minimum = minimum

    @property
    def maximum(self) -> datetime | None:
        return self._maximum

    @maximum.setter
    def maximum(self, maximum: datetime | None) -> None:
        self.set_maximum(maximum)

    def set_maximum(self, maximum: datetime | None) -> None:
        self._maximum = maximum

    @property
    def unit(self) -> StepUnit:
        return self._unit

    @unit.setter
    def unit(self, unit: StepUnit | str) -> None:
        self.set_unit(unit)

    def set_unit(self, unit: StepUnit | str) -> None:
        """Replace the step unit. Strings are resolved via ``coerce_unit``.

        Unlike the bound setters, the unit is validated.

        Raises:
            InvalidArgument: If *unit* is None or names no known unit.
        """
        self._unit = _require_unit(unit)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, callback: Observer) -> Subscription:
        """Register *callback* for change notifications."""
        if not callable(callback):
            raise InvalidArgument("callback must be callable")
        subscription = Subscription(model=self, callback=callback)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove *subscription*. Unknown or cancelled handles are ignored."""
        subscription.active = False
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def _notify(self, event: ValueChange) -> None:
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.callback(event)
