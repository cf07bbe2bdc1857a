"""Pluggy hook specifications for datespin value events.

Hooks are dispatched synchronously on the caller's thread, in the same
order as the model's own change notifications.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("datespin")
hookimpl = pluggy.HookimplMarker("datespin")


class DatespinHookSpec:
    """Hook specifications for the datespin plugin system."""

    @hookspec
    def post_value_change(self, old_value: str, new_value: str, unit: str) -> None:
        """Called after a model accepts a new value (ISO-8601 strings)."""

    @hookspec
    def post_parse(self, text: str, value: str) -> None:
        """Called after user text parses successfully."""
