"""Output normalization for wrapper objects.

Custom scalars often return wrapper objects (identifier objects, money
amounts, ...) that stand for a single primitive or a JSON structure.
:func:`serialize_object` unwraps them before they reach the wire:

1. ``value_of()`` returning a primitive -> that primitive.
2. ``to_json()`` (or a pydantic model's JSON dump) -> that structure.
3. Anything else passes through unchanged.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

_PRIMITIVES = (str, int, float, bool, type(None))


@runtime_checkable
class SupportsValueOf(Protocol):
    """Object that can be reduced to a primitive value."""

    def value_of(self) -> Any: ...


@runtime_checkable
class SupportsToJson(Protocol):
    """Object that can describe itself as a JSON-compatible structure."""

    def to_json(self) -> Any: ...


def is_object_like(value: Any) -> bool:
    """Return True unless *value* is None or a str/int/float/bool primitive."""
    return not isinstance(value, _PRIMITIVES)


def serialize_object(value: Any) -> Any:
    """Unwrap *value* to a primitive or JSON structure where it supports it."""
    if not is_object_like(value):
        return value
    if isinstance(value, SupportsValueOf):
        extracted = value.value_of()
        if not is_object_like(extracted):
            return extracted
    if isinstance(value, SupportsToJson):
        return value.to_json()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value
