"""Commands: step a value forward (next) or back (prev) within bounds."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import click

from datespin.commands._base import DatespinCommand
from datespin.domain.units import UNIT_ALIASES, StepUnit

if TYPE_CHECKING:
    from datespin.commands._context import AppContext

_UNIT_CHOICES = [u.value for u in StepUnit] + sorted(UNIT_ALIASES)


def _step_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by ``next`` and ``prev``."""
    func = click.pass_obj(func)
    func = click.option("--max", "maximum", default=None, help="Inclusive upper bound.")(func)
    func = click.option("--min", "minimum", default=None, help="Inclusive lower bound.")(func)
    func = click.option(
        "-u",
        "--unit",
        type=click.Choice(_UNIT_CHOICES, case_sensitive=False),
        default=None,
        help="Step unit (defaults to config, then days).",
    )(func)
    func = click.option(
        "-n",
        "--count",
        type=click.IntRange(min=0),
        default=1,
        show_default=True,
        help="Number of steps.",
    )(func)
    return click.argument("start", required=False)(func)


@click.command(
    "next",
    cls=DatespinCommand,
    examples="""\
  datespin next 2024-01-31T00:00 --unit months
  datespin next 2024-01-02T00:00 -n 5 --max 2024-01-03T00:00
  datespin --json next "2024-03-05 09:30" -u minutes -n 3""",
)
@_step_options
def next_cmd(
    app: AppContext,
    start: str | None,
    count: int,
    unit: str | None,
    minimum: str | None,
    maximum: str | None,
) -> None:
    """Step START forward COUNT units, stopping at the maximum."""
    app.emit(
        app.service.step(
            start, direction="next", count=count, unit=unit, minimum=minimum, maximum=maximum
        )
    )


@click.command(
    "prev",
    cls=DatespinCommand,
    examples="""\
  datespin prev 2024-03-31T00:00 --unit months
  datespin prev 2024-01-02T00:00 -n 5 --min 2024-01-01T00:00""",
)
@_step_options
def prev_cmd(
    app: AppContext,
    start: str | None,
    count: int,
    unit: str | None,
    minimum: str | None,
    maximum: str | None,
) -> None:
    """Step START back COUNT units, stopping at the minimum."""
    app.emit(
        app.service.step(
            start, direction="previous", count=count, unit=unit, minimum=minimum, maximum=maximum
        )
    )
