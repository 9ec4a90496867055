"""Tests for the specified-scalar registry and name lookup."""

import dataclasses
import pickle

import pytest

from gqlscalars.domain.errors import NOT_APPLICABLE, UnknownScalarError
from gqlscalars.domain.scalars import (
    SPECIFIED_SCALAR_TYPES,
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLString,
    ScalarDefinition,
    get_specified_scalar,
    is_specified_scalar_type,
    list_specified_scalars,
)


class TestSpecifiedScalarTypes:
    def test_registration_order(self) -> None:
        names = [s.name for s in SPECIFIED_SCALAR_TYPES]
        assert names == ["String", "Int", "Float", "Boolean", "ID"]

    def test_entries_are_the_singletons(self) -> None:
        assert SPECIFIED_SCALAR_TYPES == (
            GraphQLString,
            GraphQLInt,
            GraphQLFloat,
            GraphQLBoolean,
            GraphQLID,
        )

    def test_registry_is_immutable(self) -> None:
        assert isinstance(SPECIFIED_SCALAR_TYPES, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            GraphQLInt.name = "Integer"  # type: ignore[misc]

    def test_list_returns_registry(self) -> None:
        assert list_specified_scalars() is SPECIFIED_SCALAR_TYPES

    def test_descriptions_present(self) -> None:
        for scalar in SPECIFIED_SCALAR_TYPES:
            assert scalar.description.startswith(f"The `{scalar.name}` scalar type")


class TestIsSpecifiedScalarType:
    @pytest.mark.parametrize("name", ["String", "Int", "Float", "Boolean", "ID"])
    def test_builtin_names(self, name: str) -> None:
        assert is_specified_scalar_type(name)

    @pytest.mark.parametrize("name", ["DateTime", "int", "Id", ""])
    def test_other_names(self, name: str) -> None:
        assert not is_specified_scalar_type(name)

    def test_definition_objects(self) -> None:
        for scalar in SPECIFIED_SCALAR_TYPES:
            assert is_specified_scalar_type(scalar)

    def test_match_is_by_name(self) -> None:
        """A distinct definition reusing a built-in name is still specified."""
        impostor = ScalarDefinition(
            name="Int",
            description="Not the real Int",
            serialize=str,
            parse_value=str,
            parse_literal=lambda node: NOT_APPLICABLE,
        )
        assert impostor is not GraphQLInt
        assert impostor == GraphQLInt
        assert hash(impostor) == hash(GraphQLInt)
        assert is_specified_scalar_type(impostor)

    def test_custom_definition_not_specified(self) -> None:
        custom = dataclasses.replace(GraphQLString, name="Email")
        assert not is_specified_scalar_type(custom)
        assert custom != GraphQLString

    def test_object_without_name(self) -> None:
        assert not is_specified_scalar_type(object())


class TestGetSpecifiedScalar:
    def test_lookup(self) -> None:
        assert get_specified_scalar("Float") is GraphQLFloat

    def test_unknown_raises(self) -> None:
        with pytest.raises(UnknownScalarError) as exc_info:
            get_specified_scalar("Long")
        assert exc_info.value.name == "Long"
        assert str(exc_info.value) == "Unknown scalar type: Long"

    def test_unknown_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_specified_scalar("string")


class TestNotApplicable:
    def test_singleton_and_falsy(self) -> None:
        assert not NOT_APPLICABLE
        assert repr(NOT_APPLICABLE) == "NOT_APPLICABLE"
        assert type(NOT_APPLICABLE)() is NOT_APPLICABLE

    def test_pickle_preserves_identity(self) -> None:
        assert pickle.loads(pickle.dumps(NOT_APPLICABLE)) is NOT_APPLICABLE
