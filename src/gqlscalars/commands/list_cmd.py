"""Command: list the built-in scalar types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gqlscalars.commands._base import ScalarCommand

if TYPE_CHECKING:
    from gqlscalars.commands._context import AppContext


@click.command(
    "list",
    cls=ScalarCommand,
    examples="""\
  gqlscalars list
  gqlscalars -v list
  gqlscalars --json list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List the specified scalar types in registration order."""
    app.emit(app.service.list_scalars())
