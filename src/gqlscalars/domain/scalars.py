"""Built-in scalar definitions and the specified-scalar registry.

Every scalar converts values across three boundaries:

- ``serialize``: internal value -> wire value returned to a client.
- ``parse_value``: client-supplied variable value -> internal value.
- ``parse_literal``: parsed value node -> internal value, or
  :data:`NOT_APPLICABLE` when the node kind cannot represent the scalar.

INVARIANT: The five built-ins are registered once, in the order
String, Int, Float, Boolean, ID.  Nothing mutates the registry afterwards.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from gqlscalars.domain.convert import is_nan, to_boolean, to_display_string, to_number
from gqlscalars.domain.errors import NOT_APPLICABLE, CoercionError, UnknownScalarError
from gqlscalars.domain.kinds import Kind, LiteralNode

# 32-bit signed range.  Wider than this is not an Int, even though Python
# integers are unbounded.
GRAPHQL_MAX_INT = 2147483647
GRAPHQL_MIN_INT = -2147483648

# IntValue token grammar: optional minus, ASCII digits only.
_INT_LITERAL_RE = re.compile(r"^-?[0-9]+$")


@dataclass(frozen=True)
class ScalarDefinition:
    """Immutable scalar type record.  Two definitions are equal iff names match."""

    name: str
    description: str = field(compare=False)
    serialize: Callable[[Any], Any] = field(compare=False, repr=False)
    parse_value: Callable[[Any], Any] = field(compare=False, repr=False)
    parse_literal: Callable[[LiteralNode], Any] = field(compare=False, repr=False)


# --- Int ---


def _coerce_int(value: Any) -> int:
    if isinstance(value, str) and value == "":
        raise CoercionError(
            "Int cannot represent non 32-bit signed integer value: (empty string)",
            scalar="Int",
            value=value,
        )
    num = to_number(value)
    if is_nan(num) or num > GRAPHQL_MAX_INT or num < GRAPHQL_MIN_INT:
        raise CoercionError(
            f"Int cannot represent non 32-bit signed integer value: {to_display_string(value)}",
            scalar="Int",
            value=value,
        )
    if math.floor(num) != num:
        raise CoercionError(
            f"Int cannot represent non-integer value: {to_display_string(value)}",
            scalar="Int",
            value=value,
        )
    return int(num)


def _parse_int_literal(node: LiteralNode) -> Any:
    if node.kind != Kind.INT:
        return NOT_APPLICABLE
    if not isinstance(node.value, str) or not _INT_LITERAL_RE.match(node.value):
        return NOT_APPLICABLE
    try:
        num = int(node.value, 10)
    except ValueError:
        return NOT_APPLICABLE
    # Out-of-range literals are a non-match rather than an error.
    if GRAPHQL_MIN_INT <= num <= GRAPHQL_MAX_INT:
        return num
    return NOT_APPLICABLE


# --- Float ---


def _coerce_float(value: Any) -> float:
    if isinstance(value, str) and value == "":
        raise CoercionError(
            "Float cannot represent non numeric value: (empty string)",
            scalar="Float",
            value=value,
        )
    num = to_number(value)
    if is_nan(num):
        raise CoercionError(
            f"Float cannot represent non numeric value: {to_display_string(value)}",
            scalar="Float",
            value=value,
        )
    try:
        return float(num)
    except OverflowError:
        return math.inf if num > 0 else -math.inf


def _parse_float_literal(node: LiteralNode) -> Any:
    if node.kind not in (Kind.FLOAT, Kind.INT):
        return NOT_APPLICABLE
    try:
        return float(node.value)
    except (TypeError, ValueError):
        return NOT_APPLICABLE


# --- String ---


def _coerce_string(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        raise CoercionError(
            f"String cannot represent an array value: [{to_display_string(value)}]",
            scalar="String",
            value=value,
        )
    return to_display_string(value)


def _parse_string_literal(node: LiteralNode) -> Any:
    return node.value if node.kind == Kind.STRING else NOT_APPLICABLE


# --- Boolean ---


def _parse_boolean_literal(node: LiteralNode) -> Any:
    return bool(node.value) if node.kind == Kind.BOOLEAN else NOT_APPLICABLE


# --- ID ---


def _parse_id_literal(node: LiteralNode) -> Any:
    # Raw text is kept so that "007" stays "007".
    if node.kind in (Kind.STRING, Kind.INT):
        return node.value
    return NOT_APPLICABLE


GraphQLInt = ScalarDefinition(
    name="Int",
    description=(
        "The `Int` scalar type represents non-fractional signed whole numeric values. "
        "Int can represent values between -(2^31) and 2^31 - 1."
    ),
    serialize=_coerce_int,
    parse_value=_coerce_int,
    parse_literal=_parse_int_literal,
)

GraphQLFloat = ScalarDefinition(
    name="Float",
    description=(
        "The `Float` scalar type represents signed double-precision fractional values "
        "as specified by [IEEE 754](https://en.wikipedia.org/wiki/IEEE_floating_point)."
    ),
    serialize=_coerce_float,
    parse_value=_coerce_float,
    parse_literal=_parse_float_literal,
)

GraphQLString = ScalarDefinition(
    name="String",
    description=(
        "The `String` scalar type represents textual data, represented as UTF-8 "
        "character sequences. The String type is most often used by GraphQL to "
        "represent free-form human-readable text."
    ),
    serialize=_coerce_string,
    parse_value=_coerce_string,
    parse_literal=_parse_string_literal,
)

GraphQLBoolean = ScalarDefinition(
    name="Boolean",
    description="The `Boolean` scalar type represents `true` or `false`.",
    serialize=to_boolean,
    parse_value=to_boolean,
    parse_literal=_parse_boolean_literal,
)

GraphQLID = ScalarDefinition(
    name="ID",
    description=(
        "The `ID` scalar type represents a unique identifier, often used to refetch "
        "an object or as key for a cache. The ID type appears in a JSON response as a "
        "String; however, it is not intended to be human-readable. When expected as an "
        'input type, any string (such as `"4"`) or integer (such as `4`) input value '
        "will be accepted as an ID."
    ),
    serialize=to_display_string,
    parse_value=to_display_string,
    parse_literal=_parse_id_literal,
)


# --- Registry ---

SPECIFIED_SCALAR_TYPES: tuple[ScalarDefinition, ...] = (
    GraphQLString,
    GraphQLInt,
    GraphQLFloat,
    GraphQLBoolean,
    GraphQLID,
)

_SCALARS_BY_NAME: MappingProxyType[str, ScalarDefinition] = MappingProxyType(
    {scalar.name: scalar for scalar in SPECIFIED_SCALAR_TYPES}
)


def list_specified_scalars() -> tuple[ScalarDefinition, ...]:
    """Return the built-in scalars in registration order."""
    return SPECIFIED_SCALAR_TYPES


def is_specified_scalar_type(type_: Any) -> bool:
    """Check whether *type_* (a name, or anything with ``name``) is a built-in scalar.

    Matching is by name, so a distinct definition reusing a built-in name
    still counts as specified.
    """
    name = type_ if isinstance(type_, str) else getattr(type_, "name", None)
    return any(scalar.name == name for scalar in SPECIFIED_SCALAR_TYPES)


def get_specified_scalar(name: str) -> ScalarDefinition:
    """Look up a built-in scalar by exact name.

    Raises:
        UnknownScalarError: If no built-in scalar has that name.
    """
    try:
        return _SCALARS_BY_NAME[name]
    except KeyError:
        raise UnknownScalarError(name) from None
