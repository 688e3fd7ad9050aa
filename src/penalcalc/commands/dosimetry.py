"""Command: three-phase dosimetry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from penalcalc.commands._base import PenalCommand

if TYPE_CHECKING:
    from penalcalc.commands._context import AppContext


@click.command(
    cls=PenalCommand,
    examples="""\
  penalcalc dosimetry 6a
  penalcalc dosimetry 6a --phase2 "increase:base:1/6:Reincidência"
  penalcalc dosimetry 6a --phase2 "aumento:base:1/6" --phase3 "diminuicao:atual:1/6:Tentativa"
  penalcalc -v dosimetry 5a --phase2 "+:base:1/6" --phase2 "-:current:1/6:Confissão"
  penalcalc --json dosimetry 8a4m""",
)
@click.argument("base")
@click.option(
    "--phase2",
    multiple=True,
    help="Aggravating/mitigating operation 'type:target:fraction[:name]' (repeatable).",
)
@click.option(
    "--phase3",
    multiple=True,
    help="Cause of increase/decrease 'type:target:fraction[:name]' (repeatable).",
)
@click.pass_obj
def dosimetry(
    app: AppContext,
    base: str,
    phase2: tuple[str, ...],
    phase3: tuple[str, ...],
) -> None:
    """Fix a sentence from BASE through the second and third phases.

    Operations run in the order given; 'base' targets the phase's starting
    value, 'current' (or 'atual') the running total.
    """
    from penalcalc.services.dosimetry import DosimetryService

    app.emit(DosimetryService(app.settings).dosimetry(base, phase2=phase2, phase3=phase3))
