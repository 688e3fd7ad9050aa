"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.

Calculation memorials are printed verbatim so the text can be copied
into a legal document unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from penalcalc.domain.durations import Duration
from penalcalc.domain.report import format_duration
from penalcalc.output.console import create_console, get_output, style_for_operation

if TYPE_CHECKING:
    from rich.console import Console

    from penalcalc.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
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
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="penal.ok"), Text(f"  {result.op}", style="penal.op"))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="penal.key"), Text(str(value), style=style))


def _duration_text(raw: dict[str, int]) -> str:
    return format_duration(Duration.model_validate(raw))


def _report(console: Console, result: ServiceResult) -> None:
    # Memorial lines are never wrapped.
    console.print(Text(result.data.get("report", "").rstrip("\n")), soft_wrap=True)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="penal.error"),
        Text(f"  {result.op}", style="penal.op"),
        Text(" — "),
        Text(msg),
    )

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}", style="dim"))


# ── Calculation renderers ─────────────────────────────────────────────


def _render_execution(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _report(console, result)
    if not verbose:
        return
    console.print()
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("#", no_wrap=True)
    table.add_column("Pena Base")
    table.add_column("Resultado", style="penal.duration")
    for item in result.data.get("items", []):
        table.add_row(
            str(item["id"]),
            _duration_text(item["base"]),
            _duration_text(item["result"]),
        )
    console.print(table)


def _phase_table(title: str, phase: dict[str, Any]) -> Table:
    table = Table(title=title, show_header=True, pad_edge=False, expand=False)
    table.add_column("Operação")
    table.add_column("Fração")
    table.add_column("Sobre")
    table.add_column("Variação", justify="right")
    table.add_column("Total", style="penal.duration", justify="right")
    for op in phase.get("operations", []):
        sign = "+" if op["type"] == "increase" else "-"
        table.add_row(
            Text(f"({sign}) {op['name']}".rstrip(), style=style_for_operation(op["type"])),
            op["fraction"]["label"],
            op["target"],
            _duration_text(op["result"]),
            _duration_text(op["total_after"]),
        )
    return table


def _render_dosimetry(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _report(console, result)
    if not verbose:
        return
    for number in (2, 3):
        phase = result.data[f"phase{number}"]
        if phase.get("operations"):
            console.print()
            console.print(_phase_table(f"{number}ª Fase", phase))


def _render_fine(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "dias-multa", d["days"])
    _field(console, "data", d["date"])
    _field(console, "salário mínimo", f"R$ {d['minimum_wage']} ({d['law']})")
    _field(console, "fração", d["fraction"])
    _field(console, "valor", f"R$ {d['amount']}", style="penal.money")


def _render_fractions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Chave", no_wrap=True, style="penal.op")
    table.add_column("Fração")
    if verbose:
        table.add_column("Valor", justify="right")
    for item in result.data.get("items", []):
        row = [item["key"], item["label"]]
        if verbose:
            row.append(item["value"])
        table.add_row(*row)
    console.print(table)


def _render_minimum_wages(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Início", no_wrap=True)
    table.add_column("Fim", no_wrap=True)
    table.add_column("Valor", justify="right", style="penal.money")
    table.add_column("Norma")
    for item in result.data.get("items", []):
        table.add_row(item["start"], item["end"] or "—", f"R$ {item['value']}", item["law"])
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "execution": _render_execution,
    "dosimetry": _render_dosimetry,
    "fine": _render_fine,
    "fractions": _render_fractions,
    "minimum_wages": _render_minimum_wages,
}
