"""Command: execution fractions (progression, remission, detraction)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from penalcalc.commands._base import PenalCommand
from penalcalc.domain.types import PenalMode

if TYPE_CHECKING:
    from penalcalc.commands._context import AppContext


@click.command(
    cls=PenalCommand,
    examples="""\
  penalcalc execution 8a --fraction 1/6
  penalcalc execution 8a 4a6m --fraction "16%" --mode soma
  penalcalc --json execution 2a3m10d --fraction 2/3""",
)
@click.argument("bases", nargs=-1, required=True)
@click.option("-f", "--fraction", default=None, help="Fraction label or key (e.g. 1/6, 40%).")
@click.option(
    "-m",
    "--mode",
    type=click.Choice([str(m) for m in PenalMode]),
    default=None,
    help="soma (add) or subtracao (remaining time is shown).",
)
@click.pass_obj
def execution(
    app: AppContext,
    bases: tuple[str, ...],
    fraction: str | None,
    mode: str | None,
) -> None:
    """Apply a fraction to one or more sentences (BASES like 8a4m10d)."""
    from penalcalc.services.execution import ExecutionService

    app.emit(ExecutionService(app.settings).execution(list(bases), fraction=fraction, mode=mode))
