"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Decodes VALUE arguments per ``[input] format`` and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from gqlscalars.output.formatters import OutputSettings, format_result
from gqlscalars.services.coerce import CoercionService

if TYPE_CHECKING:
    from gqlscalars.config.settings import GqlSettings
    from gqlscalars.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GqlSettings) -> None:
        self.settings = settings
        self.service = CoercionService()

        from gqlscalars.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def decode_value(self, raw: str) -> Any:
        """Decode a VALUE argument.

        In ``json`` mode, ``1.5`` is a float, ``"1.5"`` a string, ``[1,2]`` a
        list; text that is not valid JSON is passed through as a string.
        """
        if self.settings.input.format == "text":
            return raw
        try:
            return json.loads(raw)
        except ValueError:
            return raw

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
