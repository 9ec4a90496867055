"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gqlscalars.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from gqlscalars.services.result import ServiceResult


def _wire(value: Any) -> str:
    """Render a coerced value the way it would appear in a JSON response."""
    return json.dumps(value)


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Coercions print only the wire value, so the output can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_scalars":
        return "\n".join(item["name"] for item in result.data.get("items", []))
    if result.op == "parse_literal" and not result.data.get("applicable"):
        return "NOT_APPLICABLE"
    if "result" in result.data:
        return _wire(result.data["result"])
    if result.op == "is_specified":
        return _wire(result.data.get("specified", False))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "gql.ok"), (f"  {result.op}", "gql.op")))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "gql.key"), (str(value), style)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "gql.error"), (f"  {result.op}", "gql.op"), f" — {msg}")
    )

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_scalar_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Name", style="gql.scalar", no_wrap=True)
    if verbose:
        table.add_column("Description", overflow="fold")
    for item in result.data.get("items", []):
        if verbose:
            table.add_row(item["name"], Text(item["description"]))
        else:
            table.add_row(item["name"])
    console.print(table)


def _render_coercion(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "scalar", data["scalar"], "gql.scalar")
    if verbose:
        _field(console, "input", _wire(data.get("input")))
    _field(console, "result", _wire(data["result"]), "gql.value")


def _render_literal(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "scalar", data["scalar"], "gql.scalar")
    _field(console, "kind", data["kind"])
    if data["applicable"]:
        _field(console, "result", _wire(data["result"]), "gql.value")
    else:
        _field(console, "result", "not applicable", "gql.na")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_scalars": _render_scalar_table,
    "serialize": _render_coercion,
    "parse_value": _render_coercion,
    "parse_literal": _render_literal,
}
