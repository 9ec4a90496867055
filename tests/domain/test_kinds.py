"""Tests for literal kinds and the node contract."""

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from gqlscalars.domain.kinds import Kind, LiteralNode, ValueNode, resolve_kind
from gqlscalars.domain.scalars import GraphQLInt


@dataclass(frozen=True)
class ForeignNode:
    """A node type owned by some other parser."""

    kind: Kind
    value: str


class TestResolveKind:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("int", Kind.INT),
            ("INT", Kind.INT),
            ("String", Kind.STRING),
            ("boolean", Kind.BOOLEAN),
            ("FloatValue", Kind.FLOAT),
            ("EnumValue", Kind.ENUM),
        ],
    )
    def test_resolves(self, name: str, expected: Kind) -> None:
        assert resolve_kind(name) is expected

    def test_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            resolve_kind("bigint")


class TestValueNode:
    def test_frozen(self) -> None:
        n = ValueNode(kind=Kind.INT, value="1")
        with pytest.raises(ValidationError):
            n.value = "2"  # type: ignore[misc]

    def test_kind_from_string(self) -> None:
        assert ValueNode(kind="IntValue", value="1").kind is Kind.INT  # type: ignore[arg-type]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(ValueNode(kind=Kind.NULL), LiteralNode)


class TestForeignNodes:
    def test_any_object_with_kind_and_value_is_accepted(self) -> None:
        foreign = ForeignNode(kind=Kind.INT, value="12")
        assert isinstance(foreign, LiteralNode)
        assert GraphQLInt.parse_literal(foreign) == 12
