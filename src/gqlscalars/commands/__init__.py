"""Subcommand modules for gqlscalars.

Provides register_commands() which uses deferred imports to keep
``gqlscalars --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gqlscalars.commands.check import check
    from gqlscalars.commands.coerce import parse_literal, parse_value, serialize
    from gqlscalars.commands.list_cmd import list_cmd

    cli.add_command(list_cmd)
    cli.add_command(check)
    cli.add_command(serialize)
    cli.add_command(parse_value)
    cli.add_command(parse_literal)
