"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by a StringIO buffer, so
:func:`render_result` can hand back a plain string. Rich drops colour codes
when there is no terminal (CliRunner, pipes).

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from fieldcheck.services.result import ServiceResult

FIELDCHECK_THEME = Theme(
    {
        "fc.ok": "bold green",
        "fc.error": "bold red",
        "fc.op": "bold cyan",
        "fc.key": "dim",
        "fc.value": "bold",
        "fc.step": "magenta",
    }
)


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = Console(file=StringIO(), theme=FIELDCHECK_THEME, highlight=False, width=120)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="fc.ok")
    op = Text(f"  {result.op}", style="fc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="fc.key")
    if key == "value":
        v = Text(repr(value) if not isinstance(value, str) else value, style="fc.value")
    elif key == "steps" and isinstance(value, list):
        v = Text(" -> ".join(str(s) for s in value), style="fc.step")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="fc.error")
    op = Text(f"  {result.op}", style="fc.op")
    console.print(label, op, Text(": "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Success renderers ─────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No rules configured.")
        return
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Rule", style="fc.op")
    table.add_column("Field")
    table.add_column("Number")
    table.add_column("Steps", style="fc.step")
    for item in items:
        table.add_row(
            Text(item["name"]),
            Text(item["field"]),
            "yes" if item["number"] else "",
            Text(" -> ".join(item["steps"])),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} rules")


def _render_steps(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Step", style="fc.op")
    table.add_column("Usage", style="fc.step")
    for item in result.data.get("items", []):
        table.add_row(Text(item["name"]), Text(item["usage"]))
    console.print(table)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_rules": _render_rules,
    "list_steps": _render_steps,
}
