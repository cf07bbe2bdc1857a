"""PluginRelay: forwards model change notifications to plugin hooks.

INVARIANT: Plugin failures are warnings, never errors. A failing hook
never prevents the model's other subscribers from being notified.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datespin.core.model import BoundedSteppableDateTime, Subscription, ValueChange
    from datespin.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class PluginRelay:
    """Subscribes to one model and relays each change to ``post_value_change``."""

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager
        self._subscription: Subscription | None = None
        self.failures: list[str] = []

    def attach(self, model: BoundedSteppableDateTime) -> None:
        """Start relaying changes of *model*. Re-attaching detaches first."""
        self.detach()
        self._subscription = model.subscribe(self._on_change)

    def detach(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def dispatch(self, hook_name: str, **payload: Any) -> bool:
        """Call *hook_name* on all plugins. Returns False if a plugin raised."""
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            return True
        try:
            hook_fn(**payload)
        except Exception as exc:
            logger.warning("Hook %s failed: %s", hook_name, exc, exc_info=True)
            self.failures.append(f"Plugin hook {hook_name} failed: {exc}")
            return False
        return True

    def _on_change(self, event: ValueChange) -> None:
        self.dispatch(
            "post_value_change",
            old_value=event.old_value.isoformat(),
            new_value=event.new_value.isoformat(),
            unit=str(event.source.unit),
        )
