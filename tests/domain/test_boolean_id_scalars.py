"""Tests for the Boolean and ID scalars."""

import pytest

from gqlscalars.domain.errors import NOT_APPLICABLE
from gqlscalars.domain.kinds import Kind, ValueNode
from gqlscalars.domain.scalars import GraphQLBoolean, GraphQLID


class TestBooleanCoercion:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, True),
            (False, False),
            (0, False),
            (1, True),
            (-3, True),
            ("a", True),
            ("", False),
            ("false", True),
            (None, False),
            (0.0, False),
            (float("nan"), False),
        ],
    )
    def test_truthiness(self, value: object, expected: bool) -> None:
        assert GraphQLBoolean.serialize(value) is expected
        assert GraphQLBoolean.parse_value(value) is expected

    def test_boolean_literal(self) -> None:
        assert GraphQLBoolean.parse_literal(ValueNode(kind=Kind.BOOLEAN, value=True)) is True
        assert GraphQLBoolean.parse_literal(ValueNode(kind=Kind.BOOLEAN, value=False)) is False

    @pytest.mark.parametrize(
        "kind,value",
        [(Kind.STRING, "true"), (Kind.INT, "1"), (Kind.ENUM, "TRUE")],
    )
    def test_other_kinds_not_applicable(self, kind: Kind, value: object) -> None:
        assert GraphQLBoolean.parse_literal(ValueNode(kind=kind, value=value)) is NOT_APPLICABLE


class TestIdCoercion:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (4, "4"),
            ("4", "4"),
            ("abc", "abc"),
            (1.0, "1"),
            (True, "true"),
            ([1, 2], "1,2"),
        ],
    )
    def test_stringifies(self, value: object, expected: str) -> None:
        assert GraphQLID.serialize(value) == expected
        assert GraphQLID.parse_value(value) == expected

    def test_idempotent(self) -> None:
        once = GraphQLID.serialize(123)
        assert GraphQLID.serialize(once) == once

    def test_string_literal_keeps_leading_zero(self) -> None:
        assert GraphQLID.parse_literal(ValueNode(kind=Kind.STRING, value="007")) == "007"

    def test_int_literal_keeps_leading_zero(self) -> None:
        assert GraphQLID.parse_literal(ValueNode(kind=Kind.INT, value="007")) == "007"

    @pytest.mark.parametrize(
        "kind,value",
        [(Kind.FLOAT, "1.5"), (Kind.BOOLEAN, True), (Kind.ENUM, "X"), (Kind.NULL, None)],
    )
    def test_other_kinds_not_applicable(self, kind: Kind, value: object) -> None:
        assert GraphQLID.parse_literal(ValueNode(kind=kind, value=value)) is NOT_APPLICABLE
