"""Raster row rendering with Pillow.

Rows are stacked top to bottom into a single RGBA image. Heading rows are
shorter than message rows; every row ends with a 1 px divider.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw, ImageFont

from mixed_list.items import ListItem
from mixed_list.renderer.row import RowRendering, render_range
from mixed_list.types import ItemIndex, ItemKind, TextStyle

logger = logging.getLogger(__name__)

RGBA = Tuple[int, int, int, int]
Font = ImageFont.FreeTypeFont | ImageFont.ImageFont

DEFAULT_WIDTH = 480
HEADING_ROW_HEIGHT = 40
MESSAGE_ROW_HEIGHT = 56
PADDING_X = 16
DIVIDER_HEIGHT = 1

BACKGROUND_COLOR: RGBA = (255, 255, 255, 255)
HEADING_BACKGROUND_COLOR: RGBA = (238, 238, 242, 255)
DIVIDER_COLOR: RGBA = (210, 210, 215, 255)

DEFAULT_PALETTE: Dict[TextStyle, RGBA] = {
    TextStyle.HEADLINE: (20, 20, 20, 255),
    TextStyle.PRIMARY: (33, 33, 33, 255),
    TextStyle.SECONDARY: (117, 117, 117, 255),
}

DEFAULT_FONT_SIZES: Dict[TextStyle, int] = {
    TextStyle.HEADLINE: 22,
    TextStyle.PRIMARY: 16,
    TextStyle.SECONDARY: 13,
}

ROW_HEIGHTS: Dict[ItemKind, int] = {
    ItemKind.HEADING: HEADING_ROW_HEIGHT,
    ItemKind.MESSAGE: MESSAGE_ROW_HEIGHT,
}


@lru_cache(maxsize=32)
def load_font(size: int) -> Font:
    """Pillow's bundled default font at ``size`` px."""
    return ImageFont.load_default(size=size)


def row_height(row: RowRendering) -> int:
    return ROW_HEIGHTS[row.kind]


def line_offsets(row: RowRendering, font_sizes: Dict[TextStyle, int]) -> List[int]:
    """Vertical text offsets for each line, vertically centered in the row."""
    text_height = sum(font_sizes[line.style] for line in row.lines)
    gap = 6 if row.line_count > 1 else 0
    y = (row_height(row) - DIVIDER_HEIGHT - text_height - gap) // 2
    offsets: List[int] = []
    for line in row.lines:
        offsets.append(y)
        y += font_sizes[line.style] + gap
    return offsets


def render_row(
    row: RowRendering,
    width: int = DEFAULT_WIDTH,
    palette: Optional[Dict[TextStyle, RGBA]] = None,
    font_sizes: Optional[Dict[TextStyle, int]] = None,
) -> Image.Image:
    """Draw a single row."""
    palette = palette or DEFAULT_PALETTE
    font_sizes = font_sizes or DEFAULT_FONT_SIZES
    height = row_height(row)
    background = (
        HEADING_BACKGROUND_COLOR if row.kind == ItemKind.HEADING else BACKGROUND_COLOR
    )
    img = Image.new("RGBA", (width, height), background)
    draw = ImageDraw.Draw(img)
    for line, y in zip(row.lines, line_offsets(row, font_sizes)):
        draw.text(
            (PADDING_X, y),
            line.text,
            fill=palette[line.style],
            font=load_font(font_sizes[line.style]),
        )
    draw.rectangle(
        (0, height - DIVIDER_HEIGHT, width - 1, height - 1), fill=DIVIDER_COLOR
    )
    return img


def render(
    items: Sequence[ListItem],
    start: ItemIndex = 0,
    stop: Optional[ItemIndex] = None,
    width: int = DEFAULT_WIDTH,
    palette: Optional[Dict[TextStyle, RGBA]] = None,
    font_sizes: Optional[Dict[TextStyle, int]] = None,
) -> Image.Image:
    """
    Renders the ``[start, stop)`` window of ``items`` as one PIL Image.
    An empty window gives a 1 px tall background strip.
    """
    rows = list(render_range(items, start, stop))
    height = sum(row_height(row) for row in rows)
    img = Image.new("RGBA", (width, max(height, 1)), BACKGROUND_COLOR)

    y = 0
    for row in rows:
        img.alpha_composite(
            render_row(row, width=width, palette=palette, font_sizes=font_sizes),
            (0, y),
        )
        y += row_height(row)

    logger.debug("Rendered %d rows into %dx%d image", len(rows), *img.size)
    return img


class ImageRenderer:
    width: int
    palette: Dict[TextStyle, RGBA]
    font_sizes: Dict[TextStyle, int]

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        palette: Optional[Dict[TextStyle, RGBA]] = None,
        font_sizes: Optional[Dict[TextStyle, int]] = None,
    ):
        if width < 1:
            raise ValueError(f"Image width must be positive, got {width}")
        self.width = width
        self.palette = palette or DEFAULT_PALETTE
        self.font_sizes = font_sizes or DEFAULT_FONT_SIZES

    def render_row(self, row: RowRendering) -> Image.Image:
        return render_row(
            row, width=self.width, palette=self.palette, font_sizes=self.font_sizes
        )

    def render(
        self,
        items: Sequence[ListItem],
        start: ItemIndex = 0,
        stop: Optional[ItemIndex] = None,
    ) -> Image.Image:
        return render(
            items,
            start,
            stop,
            width=self.width,
            palette=self.palette,
            font_sizes=self.font_sizes,
        )

    def render_array(
        self,
        items: Sequence[ListItem],
        start: ItemIndex = 0,
        stop: Optional[ItemIndex] = None,
    ) -> npt.NDArray[np.uint8]:
        """Same as :meth:`render` but as an ``(H, W, 4)`` uint8 array."""
        return np.array(self.render(items, start, stop), dtype=np.uint8)
