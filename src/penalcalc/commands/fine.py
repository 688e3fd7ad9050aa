"""Command: criminal fine."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from penalcalc.commands._base import PenalCommand

if TYPE_CHECKING:
    from penalcalc.commands._context import AppContext


@click.command(
    cls=PenalCommand,
    examples="""\
  penalcalc fine 10 2024-05-01
  penalcalc fine 360 2019-07-15 --fraction "5 vezes"
  penalcalc --json fine 30 2023-03-10 -f 1/2""",
)
@click.argument("days", type=click.IntRange(min=0))
@click.argument("offense_date")
@click.option("-f", "--fraction", default=None, help="Minimum-wage fraction (e.g. 1/30, 2).")
@click.pass_obj
def fine(app: AppContext, days: int, offense_date: str, fraction: str | None) -> None:
    """Compute the fine for DAYS day-fines at the wage in force on OFFENSE_DATE."""
    from penalcalc.services.fine import FineService

    app.emit(FineService(app.settings).fine(days, offense_date, fraction=fraction))
