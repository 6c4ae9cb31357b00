"""Plain text / terminal row rendering."""

from typing import List, Optional, Sequence

from mixed_list.items import ListItem
from mixed_list.renderer.row import RowRendering, TextLine, render_range
from mixed_list.types import ItemIndex, TextStyle

ANSI_BOLD = "\033[1m"
ANSI_DIM = "\033[2m"
ANSI_RESET = "\033[0m"


def format_line(line: TextLine, ansi: bool = False, indent: int = 2) -> str:
    if line.style == TextStyle.HEADLINE:
        return f"{ANSI_BOLD}{line.text}{ANSI_RESET}" if ansi else line.text.upper()
    if line.style == TextStyle.SECONDARY:
        text = f"{ANSI_DIM}{line.text}{ANSI_RESET}" if ansi else line.text
        return " " * indent + text
    return line.text


def format_row(row: RowRendering, ansi: bool = False, indent: int = 2) -> str:
    """Render a row as text; multi-line rows are joined with newlines."""
    return "\n".join(format_line(line, ansi=ansi, indent=indent) for line in row.lines)


def render_text(
    items: Sequence[ListItem],
    start: ItemIndex = 0,
    stop: Optional[ItemIndex] = None,
    ansi: bool = False,
) -> str:
    """Render the ``[start, stop)`` window of ``items`` as one text block."""
    rows: List[str] = [
        format_row(row, ansi=ansi) for row in render_range(items, start, stop)
    ]
    return "\n".join(rows)
