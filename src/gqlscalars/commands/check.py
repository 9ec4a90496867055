"""Command: test whether a type name is a specified scalar."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gqlscalars.commands._base import ScalarCommand

if TYPE_CHECKING:
    from gqlscalars.commands._context import AppContext


@click.command(
    cls=ScalarCommand,
    examples="""\
  gqlscalars check Int
  gqlscalars -q check DateTime""",
)
@click.argument("name")
@click.pass_obj
def check(app: AppContext, name: str) -> None:
    """Report whether NAME is one of the built-in scalar types."""
    app.emit(app.service.check(name))
