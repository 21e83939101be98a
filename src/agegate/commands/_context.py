"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns logging setup, service construction, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agegate.config.logging import configure_logging
from agegate.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from agegate.config.settings import AgegateSettings
    from agegate.services.result import ServiceResult
    from agegate.services.validation import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: AgegateSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    def validation_service(
        self,
        *,
        trim_whitespace: bool | None = None,
        fail_fast: bool | None = None,
    ) -> ValidationService:
        """Build a ValidationService; explicit flags override config values."""
        from agegate.services.validation import ValidationService

        if trim_whitespace is None:
            trim_whitespace = self.settings.parse.trim_whitespace
        if fail_fast is None:
            fail_fast = self.settings.batch.fail_fast
        return ValidationService(trim_whitespace=trim_whitespace, fail_fast=fail_fast)

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
            if settings.quiet and not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
