"""Command: render a value in the canonical pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datespin.commands._base import DatespinCommand

if TYPE_CHECKING:
    from datespin.commands._context import AppContext


@click.command(
    "format",
    cls=DatespinCommand,
    examples="""\
  datespin format 2024-03-05T09:30
  datespin --pattern "MM/dd/yyyy HH:mm" format 2024-03-05T09:30
  datespin -q format "2024-03-05 09:30" """,
)
@click.argument("value")
@click.pass_obj
def format_cmd(app: AppContext, value: str) -> None:
    """Render VALUE (ISO-8601 or canonical text) in the canonical pattern."""
    app.emit(app.service.format_value(value))
