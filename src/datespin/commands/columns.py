"""Command: column-width hint from the formatted bounds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datespin.commands._base import DatespinCommand

if TYPE_CHECKING:
    from datespin.commands._context import AppContext


@click.command(
    "columns",
    cls=DatespinCommand,
    examples="""\
  datespin columns --min 2024-01-01T00:00 --max 2024-12-31T23:59
  datespin --pattern "MMMM d, yyyy" -q columns --max 2024-09-30T00:00""",
)
@click.option("--min", "minimum", default=None, help="Lower bound (defaults to config).")
@click.option("--max", "maximum", default=None, help="Upper bound (defaults to config).")
@click.pass_obj
def columns(app: AppContext, minimum: str | None, maximum: str | None) -> None:
    """Print the input width needed for the longer formatted bound."""
    app.emit(app.service.columns(minimum, maximum))
