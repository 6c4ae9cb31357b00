import logging

import streamlit as st

from mixed_list.generator import generate_items
from .types import AppConfig, RenderMode

__all__ = [
    "AppConfig",
    "RenderMode",
    "set_default_config",
    "get_config_from_widgets",
    "make_items_and_reset",
]

logger = logging.getLogger(__name__)

_RENDER_MODES = list(RenderMode)


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = AppConfig()
        st.session_state["page"] = 0


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]

    st.subheader("Items")
    item_count: int = st.number_input(
        "Number of items",
        min_value=0,
        max_value=10_000,
        value=current.item_count,
        key="item_count",
    )
    heading_interval: int = st.slider(
        "Heading every N items",
        1,
        20,
        current.heading_interval,
        key="heading_interval",
    )

    st.subheader("Display")
    page_size: int = st.slider(
        "Rows per page", 1, 50, current.page_size, key="page_size"
    )
    render_mode = st.selectbox(
        "Render mode",
        _RENDER_MODES,
        index=_RENDER_MODES.index(current.render_mode),
        format_func=lambda mode: mode.capitalize(),
        key="render_mode",
    )
    image_width: int = st.slider(
        "Image width (px)",
        240,
        1024,
        current.image_width,
        step=16,
        key="image_width",
        disabled=render_mode != RenderMode.IMAGE,
    )
    return AppConfig(
        item_count=item_count,
        heading_interval=heading_interval,
        page_size=page_size,
        render_mode=RenderMode(render_mode),
        image_width=image_width,
    )


def make_items_and_reset(config: AppConfig) -> None:
    """Regenerate the item list for ``config`` and go back to the first page."""
    try:
        items = generate_items(config.item_count, config.heading_interval)
    except ValueError as e:
        st.error(f"Item generation failed: {e}")
        return
    logger.info("Regenerated %d items", len(items))
    st.session_state["config"] = config
    st.session_state["items"] = items
    st.session_state["page"] = 0
