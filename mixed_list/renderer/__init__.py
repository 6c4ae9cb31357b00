"""Rendering subpackage.

Maps list items to visual rows. The work is split in two stages:

* :mod:`mixed_list.renderer.row` dispatches on the item variant and returns a
  toolkit-neutral :class:`RowRendering` (styled lines).
* Backends draw those rows: :mod:`mixed_list.renderer.text` for terminals and
  :mod:`mixed_list.renderer.image` for Pillow images.

Rendering is a pure function of the item, evaluated only for the indices a
host asks for.
"""

from .row import (
    ROW_BUILDERS,
    RowRendering,
    TextLine,
    render_index,
    render_item,
    render_range,
)
from .text import format_row, render_text
from mixed_list.items import UnrecognizedItemError

__all__ = [
    "ROW_BUILDERS",
    "RowRendering",
    "TextLine",
    "UnrecognizedItemError",
    "format_row",
    "render_index",
    "render_item",
    "render_range",
    "render_text",
]
