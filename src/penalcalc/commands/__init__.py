"""Subcommand modules for penalcalc.

Provides register_commands() which uses deferred imports to keep
``penalcalc --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from penalcalc.commands.catalog import catalog

    cli.add_command(catalog)

    # --- Standalone commands ---
    from penalcalc.commands.dosimetry import dosimetry
    from penalcalc.commands.execution import execution
    from penalcalc.commands.fine import fine

    cli.add_command(execution)
    cli.add_command(dosimetry)
    cli.add_command(fine)
