"""Syntax-tree value kinds and the literal node contract.

Literal nodes are owned by the query parser.  The scalar definitions only
read ``kind`` and ``value``; :class:`LiteralNode` captures that surface as a
structural protocol so any parser's node type can be passed in.
:class:`ValueNode` is a minimal concrete node used by the CLI and tests.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel


class Kind(StrEnum):
    """Value node kinds that can appear where a scalar literal is expected."""

    VARIABLE = "Variable"
    INT = "IntValue"
    FLOAT = "FloatValue"
    STRING = "StringValue"
    BOOLEAN = "BooleanValue"
    NULL = "NullValue"
    ENUM = "EnumValue"
    LIST = "ListValue"
    OBJECT = "ObjectValue"


# Lookup by the short names used on the command line ("int", "string", ...).
KIND_ALIASES: dict[str, Kind] = {
    "variable": Kind.VARIABLE,
    "int": Kind.INT,
    "float": Kind.FLOAT,
    "string": Kind.STRING,
    "boolean": Kind.BOOLEAN,
    "null": Kind.NULL,
    "enum": Kind.ENUM,
    "list": Kind.LIST,
    "object": Kind.OBJECT,
}


@runtime_checkable
class LiteralNode(Protocol):
    """Read-only view of a parsed value node."""

    @property
    def kind(self) -> Kind: ...

    @property
    def value(self) -> Any: ...


class ValueNode(BaseModel):
    """Concrete literal node.

    ``value`` holds the raw source text for INT/FLOAT/STRING/ENUM nodes and a
    ``bool`` for BOOLEAN nodes.
    """

    model_config = {"frozen": True}

    kind: Kind
    value: str | bool | None = None


def resolve_kind(name: str) -> Kind:
    """Resolve a kind from its short alias or its full node name.

    Raises:
        ValueError: If *name* matches no kind.
    """
    alias = KIND_ALIASES.get(name.lower())
    if alias is not None:
        return alias
    return Kind(name)
