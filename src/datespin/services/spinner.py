"""SpinnerService: format, parse, step, and size date-time values.

Every operation builds its adapter from ``settings.spinner.pattern`` and
returns a :class:`ServiceResult`; domain errors become failed results.
Values on the input side are text: ISO-8601 or the canonical pattern.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Literal

from datespin.core.adapter import DateTimeTextAdapter
from datespin.core.editor import DateTimeEditor
from datespin.core.model import BoundedSteppableDateTime
from datespin.domain.errors import DatespinError, InvalidArgument
from datespin.plugins.relay import PluginRelay
from datespin.services.result import ServiceResult

if TYPE_CHECKING:
    from datespin.config.settings import DatespinSettings
    from datespin.domain.units import StepUnit
    from datespin.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

Direction = Literal["next", "previous"]


class SpinnerService:
    """Service-layer operations over one settings snapshot."""

    def __init__(
        self,
        settings: DatespinSettings,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._pm = plugin_manager

    def _adapter(self) -> DateTimeTextAdapter:
        return DateTimeTextAdapter(self._settings.spinner.pattern)

    def _read(
        self,
        adapter: DateTimeTextAdapter,
        raw: str | None,
        default: datetime | None = None,
    ) -> datetime | None:
        if raw is None or raw == "":
            return default
        return adapter.coerce(raw)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def format_value(self, raw: str) -> ServiceResult:
        """Render ISO or canonical *raw* text in the canonical pattern."""
        op = "format"
        try:
            adapter = self._adapter()
            text = adapter.format(raw)
        except DatespinError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"input": raw, "text": text, "pattern": adapter.pattern.pattern},
        )

    def parse_text(self, text: str) -> ServiceResult:
        """Parse canonical (or date-only) *text* into an ISO-8601 value."""
        op = "parse"
        try:
            adapter = self._adapter()
            value = adapter.parse(text)
        except DatespinError as exc:
            return ServiceResult.failure(op, exc)

        warnings: list[str] = []
        if self._pm is not None:
            relay = PluginRelay(self._pm)
            relay.dispatch("post_parse", text=text, value=value.isoformat())
            warnings.extend(relay.failures)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": text,
                "value": value.isoformat(),
                "canonical": adapter.format(value),
                "pattern": adapter.pattern.pattern,
            },
            warnings=warnings,
        )

    def step(
        self,
        start: str | None,
        *,
        direction: Direction = "next",
        count: int = 1,
        unit: StepUnit | str | None = None,
        minimum: str | None = None,
        maximum: str | None = None,
    ) -> ServiceResult:
        """Walk *count* steps from *start* in *direction*, stopping at a bound.

        Unset options fall back to ``settings.spinner``; an unset start is
        the current time. Reaching a bound is not an error: the walk stops
        early and a warning is added.
        """
        op = "step"
        spinner = self._settings.spinner
        try:
            if count < 0:
                raise InvalidArgument(f"count must be >= 0, got {count}")
            adapter = self._adapter()
            lower = self._read(adapter, minimum, spinner.minimum)
            upper = self._read(adapter, maximum, spinner.maximum)
            initial = self._read(adapter, start, datetime.now().replace(microsecond=0))
            model = BoundedSteppableDateTime(
                initial,
                minimum=lower,
                maximum=upper,
                unit=unit if unit is not None else spinner.unit,
            )
        except DatespinError as exc:
            return ServiceResult.failure(op, exc)

        relay: PluginRelay | None = None
        if self._pm is not None:
            relay = PluginRelay(self._pm)
            relay.attach(model)

        advance = model.next_value if direction == "next" else model.previous_value
        values: list[str] = []
        stopped = False
        for _ in range(count):
            candidate = advance()
            if candidate is None:
                stopped = True
                break
            model.set_value(candidate)
            values.append(adapter.format(candidate))

        warnings: list[str] = []
        if relay is not None:
            relay.detach()
            warnings.extend(relay.failures)
        if stopped:
            bound = "maximum" if direction == "next" else "minimum"
            warnings.append(f"Stopped after {len(values)} of {count} steps: {bound} reached")
            logger.debug("Step walk stopped at %s", bound)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "start": adapter.format(initial),
                "value": adapter.format(model.value),
                "iso": model.value.isoformat(),
                "direction": direction,
                "unit": str(model.unit),
                "steps": values,
                "taken": len(values),
                "stopped_at_bound": stopped,
            },
            warnings=warnings,
        )

    def columns(self, minimum: str | None = None, maximum: str | None = None) -> ServiceResult:
        """Column-width hint: the longer of the formatted bounds.

        Bounds are not checked against each other; sizing only formats them.
        """
        op = "columns"
        spinner = self._settings.spinner
        try:
            adapter = self._adapter()
            lower = self._read(adapter, minimum, spinner.minimum)
            upper = self._read(adapter, maximum, spinner.maximum)
            anchor = lower or upper or datetime.now().replace(microsecond=0)
            model = BoundedSteppableDateTime(anchor)
            model.set_minimum(lower)
            model.set_maximum(upper)
        except DatespinError as exc:
            return ServiceResult.failure(op, exc)

        editor = DateTimeEditor(model, adapter)
        try:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "columns": editor.columns,
                    "minimum": adapter.format(lower),
                    "maximum": adapter.format(upper),
                    "pattern": adapter.pattern.pattern,
                },
            )
        finally:
            editor.close()
