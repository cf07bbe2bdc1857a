"""DateTimeEditor: headless editor glue between a model and an adapter.

Toolkit-agnostic counterpart of a spinner's text editor: it keeps the
displayed text in sync with the model, commits user text back through
the adapter, drives increment/decrement, and computes a column-width
hint from the formatted bounds. A GUI binding only has to mirror
``text`` and ``columns`` into its widget.
"""

from __future__ import annotations

import logging

from datespin.core.adapter import DateTimeTextAdapter
from datespin.core.model import BoundedSteppableDateTime, ValueChange
from datespin.domain.errors import DatespinError, InvalidArgument, ParseError
from datespin.domain.patterns import DEFAULT_PATTERN, DateTimePattern

logger = logging.getLogger(__name__)


class DateTimeEditor:
    """Editor state for one model.

    Attributes:
        model: The edited value model.
        adapter: Text adapter used for display and input.
        text: Current displayed text, refreshed on every value change.
        columns: Width hint from the longer of the formatted bounds, or
            None when no bound is set or formatting failed.
    """

    def __init__(
        self,
        model: BoundedSteppableDateTime,
        adapter: DateTimeTextAdapter | DateTimePattern | str | None = None,
    ) -> None:
        if not isinstance(model, BoundedSteppableDateTime):
            raise InvalidArgument("model is not a BoundedSteppableDateTime")
        if adapter is None:
            adapter = DEFAULT_PATTERN
        if not isinstance(adapter, DateTimeTextAdapter):
            adapter = DateTimeTextAdapter(adapter)

        self.model = model
        self.adapter = adapter
        self.text = adapter.format(model.value)
        self.columns = self._compute_columns()
        self._subscription = model.subscribe(self._on_change)

    def _compute_columns(self) -> int | None:
        """Size to the longer of the formatted bounds, ignoring failures."""
        bounds = [b for b in (self.model.minimum, self.model.maximum) if b is not None]
        if not bounds:
            return None
        try:
            return max(len(self.adapter.format(b)) for b in bounds)
        except DatespinError:
            logger.debug("Column sizing skipped", exc_info=True)
            return None

    def _on_change(self, event: ValueChange) -> None:
        self.text = self.adapter.format(event.new_value)

    @property
    def can_increment(self) -> bool:
        return self.model.next_value() is not None

    @property
    def can_decrement(self) -> bool:
        return self.model.previous_value() is not None

    def increment(self) -> bool:
        """Step forward one unit. Returns False when no step is available."""
        candidate = self.model.next_value()
        if candidate is None:
            return False
        self.model.set_value(candidate)
        return True

    def decrement(self) -> bool:
        """Step back one unit. Returns False when no step is available."""
        candidate = self.model.previous_value()
        if candidate is None:
            return False
        self.model.set_value(candidate)
        return True

    def commit_text(self, text: str) -> bool:
        """Parse *text* into the model.

        On a parse failure the model is untouched, the displayed text
        reverts to the current value, and False is returned.
        """
        try:
            value = self.adapter.parse(text)
        except ParseError as exc:
            logger.debug("Rejected input %r at index %d", text, exc.error_index)
            self.text = self.adapter.format(self.model.value)
            return False
        self.model.set_value(value)
        self.text = self.adapter.format(self.model.value)
        return True

    def close(self) -> None:
        """Detach from the model."""
        self._subscription.cancel()
