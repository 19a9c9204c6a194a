"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from agecalc.domain import messages
from agecalc.domain.types import FormField
from agecalc.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from agecalc.services.result import ServiceResult

FORM_OPS = frozenset({"submit", "change", "fill", "blur", "validate", "reset", "clock_tick"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, dark: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(dark=dark)

    if result.op in FORM_OPS and result.data:
        _render_form(result, console, verbose=verbose)
    elif result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op in FORM_OPS:
        return result_line(data.get("result"))
    if "theme" in data:
        return str(data["theme"])
    if "time" in data:
        return str(data["time"])
    return f"OK: {result.op}"


def result_line(result: dict[str, int] | None) -> str:
    """``"34 anos, 0 meses, 0 dias"`` or the placeholder row."""
    years, months, days = messages.UNITS
    if not result:
        p = messages.PLACEHOLDER
        return f"{p} {years}, {p} {months}, {p} {days}"
    return (
        f"{result['years']} {years}, {result['months']} {months}, {result['days']} {days}"
    )


def clock_line(clock: dict[str, Any], label: str | None = None) -> str:
    """``"Horário de Brasília: 09:05"``."""
    prefix = label or clock.get("label") or clock.get("timezone", "")
    return f"{prefix}: {clock['time']}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    if result.ok:
        label = Text("OK", style="age.ok")
    else:
        label = Text("ERROR", style="age.error")
    op = Text(f"  {result.op}", style="age.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="age.key")
    console.print(k, Text(str(value)), sep="", end="")
    console.print()


def _field_table(values: dict[str, str], errors: dict[str, str]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Campo", style="age.field", no_wrap=True)
    table.add_column("Valor")
    table.add_column("Erro", style="age.error")
    for name in FormField:
        table.add_row(
            messages.LABELS[name],
            values.get(name.value, ""),
            errors.get(name.value, ""),
        )
    return table


def _result_rows(console: Console, result: dict[str, int] | None) -> None:
    units = messages.UNITS
    keys = ("years", "months", "days")
    for key, unit in zip(keys, units, strict=True):
        if result is None:
            value = Text(f"  {messages.PLACEHOLDER:>4}", style="age.placeholder")
        else:
            value = Text(f"  {result[key]:>4}", style="age.value")
        console.print(value, Text(f" {unit}", style="age.unit"), sep="", end="")
        console.print()


# ── Form renderer ─────────────────────────────────────────────────────


def _render_form(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the form snapshot: fields, errors, result rows, summary, clock."""
    d = result.data
    _status_line(console, result)

    errors: dict[str, str] = d.get("errors") or {}
    if verbose or errors:
        console.print(_field_table(d.get("values") or {}, errors))

    if d.get("root_error"):
        console.print(Text(f"  {d['root_error']}", style="age.error"))
    elif not result.ok and result.error:
        console.print(Text(f"  {result.error.message}", style="age.error"))

    console.print()
    _result_rows(console, d.get("result"))

    if d.get("summary"):
        console.print()
        console.print(Text(f"  {d['summary']}", style="age.name"))

    clock = d.get("clock")
    if clock:
        console.print()
        console.print(Text(f"  {clock_line(clock)}", style="age.clock"))

    if verbose:
        _field(console, "status", d.get("status"))
        _field(console, "birth_date", d.get("birth_date"))
        _field(console, "submit_count", d.get("submit_count"))


# ── Other renderers ───────────────────────────────────────────────────


def _render_clock(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(Text(clock_line(d), style="age.clock"))
    if verbose:
        _field(console, "date", d.get("date"))
        _field(console, "timezone", d.get("timezone"))


def _render_theme(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "theme", d.get("theme"))
    if "previous" in d and d["previous"] != d.get("theme"):
        _field(console, "previous", d["previous"])
    if verbose:
        _field(console, "path", d.get("path"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="age.error")
    op = Text(f"  {result.op}", style="age.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "clock": _render_clock,
    "theme_show": _render_theme,
    "theme_set": _render_theme,
    "theme_toggle": _render_theme,
}
