"""List item data model.

A list is an ordered, immutable sequence of :class:`ListItem` values. Each
element is exactly one of the concrete variants:

* :class:`HeadingItem`: a section header row.
* :class:`MessageItem`: a two-line message row.

All items are frozen dataclasses, so they compare by value and can be shared
freely between renders. The variant set is closed; code that needs to branch
on the variant should go through :func:`item_kind` (or the renderer registry)
so that an unknown subclass fails loudly instead of rendering nothing.
"""

from dataclasses import asdict, dataclass
from typing import Dict, List, Sequence

from mixed_list.types import ItemKind


class UnrecognizedItemError(ValueError):
    """Raised when an object is not one of the known list item variants."""


@dataclass(frozen=True)
class ListItem:
    """Root of the item variants. Carries no data of its own."""


@dataclass(frozen=True)
class HeadingItem(ListItem):
    """Section header.

    Attributes:
        heading: Header text, shown emphasized on a single line.
    """

    heading: str


@dataclass(frozen=True)
class MessageItem(ListItem):
    """Single message.

    Attributes:
        sender: Primary line text.
        body: Secondary line text.
    """

    sender: str
    body: str


ITEM_KINDS: Dict[type, ItemKind] = {
    HeadingItem: ItemKind.HEADING,
    MessageItem: ItemKind.MESSAGE,
}


def item_kind(item: ListItem) -> ItemKind:
    """Return the variant name of ``item``.

    Raises:
        UnrecognizedItemError: If ``item`` is not exactly one of the known variants.
    """
    kind = ITEM_KINDS.get(type(item))
    if kind is None:
        raise UnrecognizedItemError(f"Unrecognized list item: {item!r}")
    return kind


def describe_items(items: Sequence[ListItem]) -> List[Dict[str, str]]:
    """Plain ``dict`` view of ``items`` (JSON ready), preserving order."""
    return [{"kind": str(item_kind(item)), **asdict(item)} for item in items]
