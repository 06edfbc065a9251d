"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the navigation service and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from roverctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from roverctl.config.settings import RoverctlSettings
    from roverctl.domain.rover import Rover
    from roverctl.services.navigation import NavigationService
    from roverctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: RoverctlSettings) -> None:
        self.settings = settings
        self._navigation: NavigationService | None = None

        from roverctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def navigation(self) -> NavigationService:
        """The navigation service, starting from the configured [rover] state."""
        if self._navigation is None:
            from roverctl.services.navigation import NavigationService

            self._navigation = NavigationService(self.settings.rover.to_rover())
        return self._navigation

    def start_rover(
        self,
        *,
        x: int | None = None,
        y: int | None = None,
        facing: str | None = None,
    ) -> Rover[Any]:
        """Configured starting rover with any CLI overrides applied."""
        overrides: dict[str, Any] = {}
        if x is not None:
            overrides["x"] = x
        if y is not None:
            overrides["y"] = y
        if facing is not None:
            overrides["facing"] = facing
        config = self.settings.rover
        if overrides:
            config = type(config).model_validate({**config.model_dump(), **overrides})
        return config.to_rover()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
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
