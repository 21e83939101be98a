"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from agegate.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from agegate.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Batches print one ``input: age`` or ``input: CODE`` line per item.
    """
    if not result.ok and "items" not in result.data:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_quiet_item(item) for item in items)
    if "age" in result.data:
        return str(result.data["age"])
    if "product" in result.data:
        return str(result.data["product"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _quiet_item(item: dict[str, Any]) -> str:
    if item.get("ok"):
        return f"{item['input']}: {item['age']}"
    return f"{item['input']}: {item['code']}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    if result.ok:
        label = Text("OK", style="age.ok")
    else:
        label = Text("ERROR", style="age.error")
    console.print(label, Text(f"  {result.op}", style="age.op"), end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="age.key")
    if key == "input":
        v = Text(repr(value), style="age.input")
    elif key in ("age", "product"):
        v = Text(str(value), style="age.value")
    elif key == "code":
        v = Text(str(value), style="age.code")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  ! {warning}", style="age.warning"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block (verbose only)."""
    if not result.meta:
        return
    console.print(Text("  meta:", style="age.key"))
    for key, value in result.meta.items():
        console.print(Text(f"    {key}: {value}", style="age.key"))


def _items_table(items: list[dict[str, Any]], *, verbose: bool) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Input")
    table.add_column("Result")
    table.add_column("Detail")
    if verbose:
        table.add_column("Code", style="age.code")

    for item in items:
        raw = Text(repr(item["input"]), style="age.input")
        if item["ok"]:
            row = [raw, Text("valid", style="age.ok"), Text(str(item["age"]), style="age.value")]
            if verbose:
                row.append(Text(""))
        else:
            row = [raw, Text("error", style="age.error"), Text(item["message"])]
            if verbose:
                row.append(Text(item["code"]))
        table.add_row(*row)
    return table


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if items:
        console.print(_items_table(items, verbose=verbose))
    console.print(
        Text(
            f"  {result.data.get('valid_count', 0)} valid, "
            f"{result.data.get('invalid_count', 0)} invalid",
            style="age.key",
        )
    )
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="age.error"),
        Text(f"  {result.op}", style="age.op"),
        Text(f" — {msg}"),
        end="",
    )
    console.print()

    items = result.data.get("items")
    if items:
        console.print(_items_table(items, verbose=verbose))
    elif result.error is not None:
        if verbose:
            _field(console, "code", result.error.code)
        for key, value in result.error.detail.items():
            _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "validate": _render_batch,
    "demo": _render_batch,
}
