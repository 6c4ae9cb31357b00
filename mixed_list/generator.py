"""Sample item sequence generator.

Every ``heading_interval``-th index (0-based, so index 0 included) becomes a
:class:`HeadingItem`; all other indices become a :class:`MessageItem`. Labels
carry the index so rows are easy to identify on screen::

    >>> from mixed_list.generator import generate_items
    >>> items = generate_items(7)
    >>> items[0], items[1]
    (HeadingItem(heading='Heading 0'), MessageItem(sender='Sender 1', body='Message body 1'))
    >>> items[6]
    HeadingItem(heading='Heading 6')
"""

import logging

from pyrsistent import pvector
from pyrsistent.typing import PVector

from mixed_list.items import HeadingItem, ListItem, MessageItem
from mixed_list.types import ItemIndex

logger = logging.getLogger(__name__)

DEFAULT_HEADING_INTERVAL = 6


def _check_interval(heading_interval: int) -> None:
    if heading_interval < 1:
        raise ValueError(f"heading_interval must be >= 1, got {heading_interval}")


def make_item(
    index: ItemIndex, heading_interval: int = DEFAULT_HEADING_INTERVAL
) -> ListItem:
    """Return the item generated for ``index``."""
    _check_interval(heading_interval)
    if index < 0:
        raise ValueError(f"Item index must be non-negative, got {index}")
    if index % heading_interval == 0:
        return HeadingItem(heading=f"Heading {index}")
    return MessageItem(sender=f"Sender {index}", body=f"Message body {index}")


def generate_items(
    count: int, heading_interval: int = DEFAULT_HEADING_INTERVAL
) -> PVector[ListItem]:
    """Build ``count`` items as a persistent vector (display order = index order).

    Raises:
        ValueError: If ``count`` is negative or ``heading_interval`` is below 1.
    """
    if count < 0:
        raise ValueError(f"Item count must be non-negative, got {count}")
    _check_interval(heading_interval)
    items: PVector[ListItem] = pvector(
        make_item(i, heading_interval) for i in range(count)
    )
    logger.debug(
        "Generated %d items (heading every %d)", len(items), heading_interval
    )
    return items
