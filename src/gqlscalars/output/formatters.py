"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
``--quiet`` prints only the coerced wire value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from gqlscalars.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from gqlscalars.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags resolved from settings, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int = 120


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output flags.  Takes precedence over *json_output*.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
