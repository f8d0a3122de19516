from __future__ import annotations

from rich.console import Console
from rich.theme import Theme


# One Dark-inspired palette tuned for Rich output
PALETTE = {
    "fg": "#abb2bf",
    "fg_muted": "#5c6370",
    "green": "#98c379",
    "yellow": "#e5c07b",
    "orange": "#d19a66",
    "blue": "#61afef",
    "cyan": "#56b6c2",
    "purple": "#c678dd",
    "red": "#e06c75",
}

_theme = Theme(
    {
        "text": PALETTE["fg"],
        "muted": PALETTE["fg_muted"],
        "accent": PALETTE["orange"],
        "ok": PALETTE["green"],
        "warn": PALETTE["yellow"],
        "error": f"bold {PALETTE['red']}",
        "invalid": "red",
        "info": PALETTE["blue"],
        "section": f"bold {PALETTE['orange']}",
    }
)

console = Console(theme=_theme, style=PALETTE["fg"])
error_console = Console(theme=_theme, stderr=True)


def print_plain_error(message: str) -> None:
    """Write ``message`` to stderr verbatim: no markup, no highlighting, no wrapping."""
    error_console.print(message, markup=False, highlight=False, soft_wrap=True)
