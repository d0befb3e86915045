"""AppContext: settings, logging setup and result emission for the CLI.

Created once per invocation. Centralises stdout/stderr routing and the
exit code so commands only build a ServiceResult.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from create_clean_arch.config.logging import configure_logging
from create_clean_arch.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from create_clean_arch.config.settings import ScaffoldSettings
    from create_clean_arch.services.result import ServiceResult


class AppContext:
    """Shared invocation context."""

    def __init__(self, settings: ScaffoldSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
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
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
