from typing import Sequence

import streamlit as st

from config import RenderMode
from mixed_list.items import ListItem
from mixed_list.renderer import RowRendering, format_row, render_range
from mixed_list.renderer.image import ImageRenderer
from mixed_list.types import ItemKind
from mixed_list.utils.window import page_count, page_window

__all__ = ["page_selector", "current_window", "display_row", "display_page"]


def page_selector(total: int, page_size: int) -> int:
    pages = max(page_count(total, page_size), 1)
    page: int = min(st.session_state.get("page", 0), pages - 1)
    prev_col, label_col, next_col = st.columns([1, 2, 1])
    with prev_col:
        if st.button("⬅️ Prev", key="prev_btn", use_container_width=True):
            page = max(page - 1, 0)
    with next_col:
        if st.button("Next ➡️", key="next_btn", use_container_width=True):
            page = min(page + 1, pages - 1)
    with label_col:
        st.markdown(f"Page **{page + 1}** / {pages}")
    st.session_state["page"] = page
    return page


def current_window(total: int, page_size: int) -> range:
    return page_window(total, page_selector(total, page_size), page_size)


def display_row(row: RowRendering) -> None:
    if row.kind == ItemKind.HEADING:
        st.subheader(row.title, divider="gray")
    else:
        st.markdown(f"**{row.title}**")
        st.caption(row.subtitle or "")


def display_page(
    items: Sequence[ListItem], window: range, mode: RenderMode, image_width: int
) -> None:
    """Render only the rows inside ``window``."""
    if len(window) == 0:
        st.info("The list is empty", icon="📭")
        return
    rows = render_range(items, window.start, window.stop)
    if mode == RenderMode.IMAGE:
        renderer = ImageRenderer(width=image_width)
        st.image(renderer.render(items, window.start, window.stop))
    elif mode == RenderMode.TEXT:
        st.code("\n".join(format_row(row) for row in rows), language=None)
    else:
        for row in rows:
            display_row(row)
