"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from datespin.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from datespin.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the bare result value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    key = _QUIET_KEYS.get(result.op)
    if key is None:
        return f"OK: {result.op}"
    value = result.data.get(key)
    return "" if value is None else str(value)


_QUIET_KEYS: dict[str, str] = {
    "format": "text",
    "parse": "value",
    "step": "value",
    "columns": "columns",
}


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ds.ok"), Text(f"  {result.op}", style="ds.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="ds.key")
    shown = "-" if value is None or value == "" else str(value)
    console.print(k, Text(shown, style="ds.value"), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_step(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "start", data.get("start"))
    _field(console, "value", data.get("value"))
    _field(console, "unit", data.get("unit"))

    steps = data.get("steps") or []
    if steps:
        table = Table(show_header=True, header_style="ds.key", box=None, padding=(0, 2))
        table.add_column("#", justify="right")
        table.add_column(data.get("direction", "step"))
        for idx, value in enumerate(steps, start=1):
            table.add_row(str(idx), value)
        console.print(table)

    if data.get("stopped_at_bound"):
        console.print(Text("  stopped at bound", style="ds.bound"))


def _render_columns(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "minimum", data.get("minimum"))
    _field(console, "maximum", data.get("maximum"))
    _field(console, "columns", data.get("columns"))


def _render_error(result: ServiceResult, console: Console) -> None:
    console.print(Text("ERROR", style="ds.error"), Text(f"  {result.op}", style="ds.op"))
    if result.error is None:
        return
    console.print(Text(f"  {result.error.message}"))
    index = result.error.detail.get("error_index")
    if index is not None:
        _field(console, "error_index", index)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "step": _render_step,
    "columns": _render_columns,
}
