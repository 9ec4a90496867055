"""ServiceResult and ServiceError: the service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI, and any other interface, consumes this type; coercion
exceptions never escape the service layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"serialize"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.

    Infinite and NaN floats dump to JSON as the strings ``"Infinity"``,
    ``"-Infinity"`` and ``"NaN"``.
    """

    model_config = {"frozen": True, "ser_json_inf_nan": "strings"}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
