"""Rich Console factory and theme for penalcalc output.

Consoles render to a StringIO buffer so every renderer keeps the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich emits no color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PENAL_THEME = Theme(
    {
        "penal.ok": "bold green",
        "penal.error": "bold red",
        "penal.warning": "bold yellow",
        "penal.op": "bold cyan",
        "penal.key": "dim",
        "penal.duration": "bold",
        "penal.increase": "red",
        "penal.decrease": "green",
        "penal.money": "bold magenta",
    }
)

_OPERATION_STYLES: dict[str, str] = {
    "increase": "penal.increase",
    "decrease": "penal.decrease",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PENAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_operation(op_type: str) -> str:
    """Return the Rich style name for a dosimetry operation type."""
    return _OPERATION_STYLES.get(op_type, "")
