"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Plugins load lazily so ``--help`` and
``--version`` never touch entry points.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from datespin.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from datespin.config.settings import DatespinSettings
    from datespin.plugins.manager import PluginManager
    from datespin.services.result import ServiceResult
    from datespin.services.spinner import SpinnerService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DatespinSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from datespin.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            context={"pattern": settings.spinner.pattern},
        )

    @property
    def plugins(self) -> PluginManager | None:
        """Loaded plugin manager, or None when plugins are disabled."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from datespin.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
        return self._plugins

    @property
    def service(self) -> SpinnerService:
        from datespin.services.spinner import SpinnerService

        return SpinnerService(self.settings, self.plugins)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
