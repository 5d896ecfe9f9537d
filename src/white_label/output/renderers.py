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

from white_label.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from white_label.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    if result.ok and result.op == "splice" and "text" in result.data:
        # Expanded text bypasses Rich so tabs and markup-like text survive.
        return str(result.data["text"])

    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    ``resolve`` prints only the rendered literal so it can be captured by
    a build script; ``splice`` without an output file prints the text.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "resolve":
        return str(result.data["rendered"])
    if result.op == "splice" and "text" in result.data:
        return str(result.data["text"])
    if "path" in result.data:
        return str(result.data["path"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="wl.ok")
    op = Text(f"  {result.op}", style="wl.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    k = Text(f"  {key}: ", style="wl.key")
    console.print(k, Text(str(value), style=style), sep="", soft_wrap=True)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "brand", data["brand"], "wl.brand")
    _field(console, "value", data["rendered"], style_for_kind(data["kind"]))
    if verbose:
        _field(console, "kind", data["kind"])
        _field(console, "pattern", data["pattern"], "wl.pattern")
        _field(console, "raw", data["raw"])


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Pattern", style="wl.pattern")
    table.add_column("Kind")
    table.add_column("Literal")
    if verbose:
        table.add_column("Line", justify="right")
    for index, clause in enumerate(result.data["clauses"], start=1):
        row = [
            str(index),
            clause["pattern"],
            Text(clause["kind"], style=style_for_kind(clause["kind"])),
            clause["raw"],
        ]
        if verbose:
            row.append(str(clause["line"]))
        table.add_row(*row)
    console.print(table)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for entry in result.data["constants"]:
        fallback = "with wildcard" if entry["has_wildcard"] else "no wildcard"
        _field(console, entry["name"], f"{entry['count']} clauses, {fallback}")


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "brand", data["brand"], "wl.brand")
    _field(console, "path", data["path"], "wl.path")
    _field(console, "count", data["count"])
    if verbose:
        for name, rendered in data["constants"].items():
            _field(console, name, rendered)


def _render_splice(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "brand", data["brand"], "wl.brand")
    _field(console, "path", data["path"], "wl.path")
    _field(console, "count", data["count"])
    if verbose:
        for site in data["sites"]:
            _field(console, f"line {site['line']}", site["rendered"], style_for_kind(site["kind"]))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    msg = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="wl.error"), Text(f"  {result.op}", style="wl.op"), sep="", end=""
    )
    console.print(Text(f" — {msg}"), soft_wrap=True)
    if error is None:
        return
    diagnostic = error.detail.get("diagnostic")
    if diagnostic:
        console.print(Text(diagnostic), soft_wrap=True)
    for entry in error.detail.get("errors", []):
        console.print(
            Text(f"  {entry['constant']}: ", style="wl.key"),
            Text(entry["message"]),
            sep="",
            soft_wrap=True,
        )
        if entry.get("diagnostic"):
            console.print(Text(entry["diagnostic"]), soft_wrap=True)
    if verbose and error.code:
        _field(console, "code", error.code)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "resolve": _render_resolve,
    "parse": _render_parse,
    "check": _render_check,
    "generate": _render_generate,
    "splice": _render_splice,
}
