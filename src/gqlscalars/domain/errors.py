"""Coercion failures and the literal-parsing "not applicable" signal.

INVARIANT: A CoercionError always propagates to the immediate caller.
NOT_APPLICABLE is a negative match, never an error.
"""

from __future__ import annotations

from typing import Any


class CoercionError(TypeError):
    """A value failed a scalar's validation rule.

    Attributes:
        message: Human-readable reason, e.g.
            ``"Int cannot represent non-integer value: 1.5"``.
        scalar: Name of the scalar that rejected the value.
        value: The rejected input.
    """

    def __init__(self, message: str, *, scalar: str, value: Any) -> None:
        super().__init__(message)
        self.message = message
        self.scalar = scalar
        self.value = value


class UnknownScalarError(KeyError):
    """No specified scalar is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown scalar type: {self.name}"


class _NotApplicable:
    """Singleton type of :data:`NOT_APPLICABLE`."""

    _instance: _NotApplicable | None = None

    def __new__(cls) -> _NotApplicable:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_APPLICABLE"

    def __reduce__(self) -> str:
        return "NOT_APPLICABLE"


NOT_APPLICABLE = _NotApplicable()
