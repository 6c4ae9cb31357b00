"""Row descriptors and variant dispatch.

Turns one :class:`ListItem` into a :class:`RowRendering`, a toolkit-neutral
description of the row: which variant it came from plus its styled lines.
Concrete backends (:mod:`mixed_list.renderer.text`,
:mod:`mixed_list.renderer.image`, the Streamlit app) only ever consume
``RowRendering`` values, never items.

Dispatch is by exact type through :data:`ROW_BUILDERS`. Anything not in the
registry (including subclasses of the known variants) raises
:class:`UnrecognizedItemError`.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple

from mixed_list.items import (
    HeadingItem,
    ListItem,
    MessageItem,
    UnrecognizedItemError,
)
from mixed_list.types import ItemIndex, ItemKind, RowBuilder, TextStyle


@dataclass(frozen=True)
class TextLine:
    text: str
    style: TextStyle


@dataclass(frozen=True)
class RowRendering:
    """Display unit for one list position.

    Attributes:
        kind: Variant the row was built from.
        lines: Styled lines, top to bottom. Headings have one, messages two.
    """

    kind: ItemKind
    lines: Tuple[TextLine, ...]

    @property
    def title(self) -> str:
        return self.lines[0].text

    @property
    def subtitle(self) -> Optional[str]:
        return self.lines[1].text if len(self.lines) > 1 else None

    @property
    def line_count(self) -> int:
        return len(self.lines)


def build_heading_row(item: ListItem) -> RowRendering:
    assert isinstance(item, HeadingItem)
    return RowRendering(
        kind=ItemKind.HEADING,
        lines=(TextLine(item.heading, TextStyle.HEADLINE),),
    )


def build_message_row(item: ListItem) -> RowRendering:
    assert isinstance(item, MessageItem)
    return RowRendering(
        kind=ItemKind.MESSAGE,
        lines=(
            TextLine(item.sender, TextStyle.PRIMARY),
            TextLine(item.body, TextStyle.SECONDARY),
        ),
    )


ROW_BUILDERS: Dict[type, RowBuilder] = {
    HeadingItem: build_heading_row,
    MessageItem: build_message_row,
}
"""Exact item type -> row builder."""


def render_item(item: ListItem) -> RowRendering:
    """Build the row descriptor for ``item``.

    Raises:
        UnrecognizedItemError: If ``item`` is not one of the known variants.
    """
    builder = ROW_BUILDERS.get(type(item))
    if builder is None:
        raise UnrecognizedItemError(f"No row builder for item: {item!r}")
    return builder(item)


def render_index(items: Sequence[ListItem], index: ItemIndex) -> RowRendering:
    """Render the item at ``index``; negative indices are rejected, not wrapped."""
    if not 0 <= index < len(items):
        raise IndexError(
            f"Item index {index} out of range for list of length {len(items)}"
        )
    return render_item(items[index])


def render_range(
    items: Sequence[ListItem], start: ItemIndex, stop: Optional[ItemIndex] = None
) -> Iterator[RowRendering]:
    """Lazily render ``items[start:stop]``, clipped to the list bounds."""
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    end = len(items) if stop is None else min(stop, len(items))
    for index in range(start, end):
        yield render_item(items[index])
