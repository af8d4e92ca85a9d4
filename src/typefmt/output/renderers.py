"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from typefmt.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from typefmt.services.result import ServiceResult

_NAME_ROWS = ("short", "qualified", "full", "repr", "module")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
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
    """Render the bare value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "name" in data:
        return str(data["name"])
    if "full" in data:
        return str(data["full"])
    if "message" in data:
        return str(data["message"])
    items = data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("token", "")) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="tf.ok")
    op = Text(f"  {result.op}", style="tf.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="tf.key"), Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tf.error")
    op = Text(f"  {result.op}", style="tf.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "target", data.get("target", ""))
    if "name" in data:
        _field(console, data.get("style", "name"), data["name"], style="tf.name")
    else:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Style", style="tf.key")
        table.add_column("Name", style="tf.name")
        for key in _NAME_ROWS:
            value = data.get(key)
            table.add_row(key, Text("—" if value is None else str(value)))
        console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_message(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(str(result.data.get("message", ""))))
    if verbose:
        _field(console, "format", result.data.get("format", ""))
        _render_meta(console, result)


def _render_tokens(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Token", style="tf.token", no_wrap=True)
    table.add_column("Meaning")
    for item in result.data.get("items", []):
        table.add_row(Text(item["token"]), Text(item["meaning"]))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "describe_type": _render_describe,
    "format_message": _render_message,
    "list_tokens": _render_tokens,
}
