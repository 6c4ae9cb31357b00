"""Common type aliases and enumerations.

``ItemFactory`` and ``RowBuilder`` are the two extension points: the first
produces the item at a given index, the second turns one item variant into a
row descriptor.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from mixed_list.items import ListItem
    from mixed_list.renderer.row import RowRendering

ItemIndex = int

ItemFactory = Callable[[ItemIndex], "ListItem"]
RowBuilder = Callable[["ListItem"], "RowRendering"]


class ItemKind(StrEnum):
    """Variant names of :class:`mixed_list.items.ListItem`."""

    HEADING = auto()
    MESSAGE = auto()


class TextStyle(StrEnum):
    """Typographic role of a single rendered line."""

    HEADLINE = auto()
    PRIMARY = auto()
    SECONDARY = auto()
