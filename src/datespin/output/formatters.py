"""Output mode selection for ServiceResult.

The CLI renders results for humans (Rich), for scripts (``--quiet``
prints the bare value), or for machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from datespin.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from datespin.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display. JSON wins over quiet."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result)
