"""Rich Console factory and theme for fieldrules output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FIELDRULES_THEME = Theme(
    {
        "fr.ok": "bold green",
        "fr.error": "bold red",
        "fr.op": "bold cyan",
        "fr.key": "dim",
        "fr.field": "bold blue",
        "fr.rule": "magenta",
        "fr.value": "dim",
        "fr.source.builtin": "green",
        "fr.source.plugin": "yellow",
    }
)


def create_console() -> Console:
    """A themed Console writing into a StringIO buffer, 120 columns wide."""
    return Console(file=StringIO(), theme=FIELDRULES_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_source(source: str) -> str:
    """Return the Rich style name for a rule's origin."""
    if source == "builtin":
        return "fr.source.builtin"
    return "fr.source.plugin"
