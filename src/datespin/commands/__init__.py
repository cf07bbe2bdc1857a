"""Subcommand modules for datespin.

Provides register_commands() which uses deferred imports to keep
``datespin --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from datespin.commands.columns import columns
    from datespin.commands.format_cmd import format_cmd
    from datespin.commands.parse_cmd import parse_cmd
    from datespin.commands.step import next_cmd, prev_cmd

    cli.add_command(format_cmd)
    cli.add_command(parse_cmd)
    cli.add_command(next_cmd)
    cli.add_command(prev_cmd)
    cli.add_command(columns)
