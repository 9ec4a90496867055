"""Commands: serialize, parse-value, and parse-literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gqlscalars.commands._base import ScalarCommand

if TYPE_CHECKING:
    from gqlscalars.commands._context import AppContext


@click.command(
    cls=ScalarCommand,
    examples="""\
  gqlscalars serialize Int 42
  gqlscalars serialize Int 1.5
  gqlscalars serialize String '[1,2]'
  gqlscalars serialize Int -- -5
  gqlscalars -q serialize ID 4""",
)
@click.argument("scalar")
@click.argument("value")
@click.pass_obj
def serialize(app: AppContext, scalar: str, value: str) -> None:
    """Serialize VALUE as an output value of SCALAR."""
    app.emit(app.service.serialize(scalar, app.decode_value(value)))


@click.command(
    "parse-value",
    cls=ScalarCommand,
    examples="""\
  gqlscalars parse-value Float '"3.14"'
  gqlscalars parse-value Boolean 0""",
)
@click.argument("scalar")
@click.argument("value")
@click.pass_obj
def parse_value(app: AppContext, scalar: str, value: str) -> None:
    """Coerce VALUE as a variable input for SCALAR."""
    app.emit(app.service.parse_value(scalar, app.decode_value(value)))


@click.command(
    "parse-literal",
    cls=ScalarCommand,
    examples="""\
  gqlscalars parse-literal Int int 123
  gqlscalars parse-literal ID int 007
  gqlscalars parse-literal Boolean boolean true""",
)
@click.argument("scalar")
@click.argument("kind")
@click.argument("text")
@click.pass_obj
def parse_literal(app: AppContext, scalar: str, kind: str, text: str) -> None:
    """Coerce TEXT, written in a query as a KIND literal, for SCALAR.

    KIND is int, float, string, boolean, enum, null, list, object, or variable.
    """
    app.emit(app.service.parse_literal(scalar, kind, text))
