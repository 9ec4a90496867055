"""CoercionService: run scalar coercions by name and report ServiceResults.

Coercion failures become ``COERCION_FAILED`` errors carrying the scalar's
own message.  A literal the scalar cannot represent is not an error: it
succeeds with ``applicable: False``.
"""

from __future__ import annotations

import logging
from typing import Any

from gqlscalars.domain.convert import to_display_string
from gqlscalars.domain.errors import NOT_APPLICABLE, CoercionError, UnknownScalarError
from gqlscalars.domain.kinds import Kind, ValueNode, resolve_kind
from gqlscalars.domain.scalars import (
    ScalarDefinition,
    get_specified_scalar,
    is_specified_scalar_type,
    list_specified_scalars,
)
from gqlscalars.domain.serialize import serialize_object
from gqlscalars.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

_BOOLEAN_TEXT = {"true": True, "false": False}


def _unknown_scalar(op: str, exc: UnknownScalarError) -> ServiceResult:
    logger.debug("Unknown scalar requested", extra={"op": op, "scalar": exc.name})
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="UNKNOWN_SCALAR",
            message=str(exc),
            detail={"known": [s.name for s in list_specified_scalars()]},
        ),
    )


class CoercionService:
    """Entry point for scalar coercion operations.

    Every method returns a :class:`ServiceResult`; exceptions raised by the
    scalar definitions are translated here and never propagate further.
    """

    def list_scalars(self) -> ServiceResult:
        """List the built-in scalars in registration order."""
        items = [
            {"name": scalar.name, "description": scalar.description}
            for scalar in list_specified_scalars()
        ]
        return ServiceResult(ok=True, op="list_scalars", data={"items": items, "count": len(items)})

    def check(self, name: str) -> ServiceResult:
        """Report whether *name* is a built-in scalar."""
        return ServiceResult(
            ok=True,
            op="is_specified",
            data={"name": name, "specified": is_specified_scalar_type(name)},
        )

    def serialize(self, scalar_name: str, value: Any) -> ServiceResult:
        """Serialize an output value.  Wrapper objects are unwrapped first."""
        return self._coerce("serialize", scalar_name, serialize_object(value))

    def parse_value(self, scalar_name: str, value: Any) -> ServiceResult:
        """Coerce a variable value supplied by a client."""
        return self._coerce("parse_value", scalar_name, value)

    def parse_literal(self, scalar_name: str, kind: str, text: str) -> ServiceResult:
        """Coerce a literal of *kind* written as *text* in query source."""
        op = "parse_literal"
        try:
            scalar = get_specified_scalar(scalar_name)
        except UnknownScalarError as exc:
            return _unknown_scalar(op, exc)

        try:
            node_kind = resolve_kind(kind)
        except ValueError:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_KIND",
                    message=f"Unknown literal kind: {kind}",
                    detail={"known": [k.name.lower() for k in Kind]},
                ),
            )

        node_value: str | bool = text
        if node_kind == Kind.BOOLEAN:
            if text.lower() not in _BOOLEAN_TEXT:
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="INVALID_KIND",
                        message=f"Boolean literal must be true or false, got: {text}",
                    ),
                )
            node_value = _BOOLEAN_TEXT[text.lower()]

        result = scalar.parse_literal(ValueNode(kind=node_kind, value=node_value))
        applicable = result is not NOT_APPLICABLE
        if not applicable:
            logger.debug(
                "Literal not applicable",
                extra={"op": op, "scalar": scalar.name, "kind": str(node_kind)},
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "scalar": scalar.name,
                "kind": str(node_kind),
                "applicable": applicable,
                "result": result if applicable else None,
            },
        )

    def _coerce(self, op: str, scalar_name: str, value: Any) -> ServiceResult:
        try:
            scalar: ScalarDefinition = get_specified_scalar(scalar_name)
        except UnknownScalarError as exc:
            return _unknown_scalar(op, exc)

        coerce = scalar.serialize if op == "serialize" else scalar.parse_value
        try:
            result = coerce(value)
        except CoercionError as exc:
            logger.debug(
                "Coercion rejected", extra={"op": op, "scalar": exc.scalar, "reason": exc.message}
            )
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="COERCION_FAILED",
                    message=exc.message,
                    detail={"scalar": exc.scalar, "input": to_display_string(exc.value)},
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"scalar": scalar.name, "input": value, "result": result},
        )
