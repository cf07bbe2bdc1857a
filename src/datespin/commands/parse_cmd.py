"""Command: parse canonical or date-only text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datespin.commands._base import DatespinCommand

if TYPE_CHECKING:
    from datespin.commands._context import AppContext


@click.command(
    "parse",
    cls=DatespinCommand,
    examples="""\
  datespin parse "2024-03-05 09:30"
  datespin parse 2024-03-05
  datespin --pattern "MM/dd/yyyy HH:mm" --json parse 03/05/2024""",
)
@click.argument("text")
@click.pass_obj
def parse_cmd(app: AppContext, text: str) -> None:
    """Parse TEXT as a full date-time, or as a date at midnight."""
    app.emit(app.service.parse_text(text))
