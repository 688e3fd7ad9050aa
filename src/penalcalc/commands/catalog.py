"""Command group: fraction and minimum-wage catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from penalcalc.commands._base import PenalGroup
from penalcalc.domain.types import FractionKind

if TYPE_CHECKING:
    from penalcalc.commands._context import AppContext

_CATALOG_EXAMPLES = """\
  penalcalc catalog fractions
  penalcalc catalog fractions --kind fine
  penalcalc catalog wages"""


@click.group(cls=PenalGroup, examples=_CATALOG_EXAMPLES)
def catalog() -> None:
    """Show the legally recognized fractions and minimum wages."""


@catalog.command(
    examples="""\
  penalcalc catalog fractions
  penalcalc -v catalog fractions --kind fine"""
)
@click.option(
    "--kind",
    type=click.Choice([str(k) for k in FractionKind]),
    default=str(FractionKind.EXECUTION),
    help="Which fraction catalog to list.",
)
@click.pass_obj
def fractions(app: AppContext, kind: str) -> None:
    """List fractions; the key column is what --fraction accepts."""
    from penalcalc.services.catalog import CatalogService

    app.emit(CatalogService(app.settings).fractions(kind))


@catalog.command(examples="  penalcalc catalog wages")
@click.pass_obj
def wages(app: AppContext) -> None:
    """List the minimum-wage history used for fines."""
    from penalcalc.services.catalog import CatalogService

    app.emit(CatalogService(app.settings).minimum_wages())
