import logging

import streamlit as st

from config import (
    AppConfig,
    set_default_config,
    get_config_from_widgets,
    make_items_and_reset,
)
from components import current_window, display_page
from mixed_list.items import describe_items

logging.basicConfig(level=logging.INFO)

st.set_page_config(layout="centered", page_title="Mixed List")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
    </style>
""",
    unsafe_allow_html=True,
)


# --------- Main App ---------

set_default_config()
tab_list, tab_config, tab_items = st.tabs(["List", "Config", "Items"])

with tab_config:
    new_config: AppConfig = get_config_from_widgets()
    if st.button("Save", key="save_config_btn", use_container_width=True):
        make_items_and_reset(new_config)
    st.divider()

if "items" not in st.session_state:
    make_items_and_reset(st.session_state["config"])

config: AppConfig = st.session_state["config"]
items = st.session_state.get("items", [])

with tab_list:
    st.info(
        f"**{len(items)}** items, a heading every **{config.heading_interval}**",
        icon="📋",
    )
    window = current_window(len(items), config.page_size)
    display_page(items, window, config.render_mode, config.image_width)

with tab_items:
    st.json(describe_items(items), expanded=1)
