# tests/unit/test_image_renderer.py

import numpy as np
import pytest

from mixed_list.generator import generate_items
from mixed_list.items import HeadingItem, MessageItem
from mixed_list.renderer import render_item
from mixed_list.renderer.image import (
    BACKGROUND_COLOR,
    DEFAULT_WIDTH,
    DIVIDER_COLOR,
    HEADING_BACKGROUND_COLOR,
    HEADING_ROW_HEIGHT,
    MESSAGE_ROW_HEIGHT,
    ImageRenderer,
    row_height,
)


def test_row_heights_by_kind() -> None:
    assert row_height(render_item(HeadingItem("h"))) == HEADING_ROW_HEIGHT
    assert row_height(render_item(MessageItem("s", "b"))) == MESSAGE_ROW_HEIGHT
    assert HEADING_ROW_HEIGHT < MESSAGE_ROW_HEIGHT


def test_render_stacks_rows() -> None:
    items = generate_items(7)
    img = ImageRenderer(width=300).render(items)
    assert img.mode == "RGBA"
    assert img.size == (300, 2 * HEADING_ROW_HEIGHT + 5 * MESSAGE_ROW_HEIGHT)


def test_render_window_only() -> None:
    items = generate_items(50)
    img = ImageRenderer().render(items, 1, 3)
    assert img.size == (DEFAULT_WIDTH, 2 * MESSAGE_ROW_HEIGHT)


def test_render_empty_window() -> None:
    img = ImageRenderer(width=100).render([])
    assert img.size == (100, 1)
    assert img.getpixel((0, 0)) == BACKGROUND_COLOR


def test_render_row_draws_text_and_divider() -> None:
    renderer = ImageRenderer(width=200)
    img = renderer.render_row(render_item(HeadingItem("Heading 0")))
    assert img.size == (200, HEADING_ROW_HEIGHT)
    assert img.getpixel((199, 0)) == HEADING_BACKGROUND_COLOR
    assert img.getpixel((0, HEADING_ROW_HEIGHT - 1)) == DIVIDER_COLOR
    pixels = np.array(img)
    # some glyph pixels differ from the row background
    assert (pixels[:-1] != np.array(HEADING_BACKGROUND_COLOR)).any()


def test_render_is_deterministic() -> None:
    items = generate_items(4)
    renderer = ImageRenderer(width=160)
    assert np.array_equal(renderer.render_array(items), renderer.render_array(items))


def test_render_array_shape() -> None:
    arr = ImageRenderer(width=120).render_array(generate_items(2))
    assert arr.dtype == np.uint8
    assert arr.shape == (HEADING_ROW_HEIGHT + MESSAGE_ROW_HEIGHT, 120, 4)


def test_invalid_width() -> None:
    with pytest.raises(ValueError):
        ImageRenderer(width=0)
