from typing import Dict

import streamlit as st

from mahjong_svg.instructions import instruction_row
from mahjong_svg.notation import parse
from mahjong_svg.renderer.svg import layout, to_markup
from mahjong_svg.theme import (
    DEFAULT_THEME_NAME,
    THEME_REGISTRY,
    ThemeConfig,
    get_render_config,
)

EXAMPLE_HANDS: Dict[str, str] = {
    "Closed hand": "123m456p789s11z-5z",
    "Called pon": "2345m678p-1'11z",
    "Added kan": "11s-6\"66p",
    "Closed kan": "1234m-x55zx",
}

st.set_page_config(layout="wide", page_title="Mahjong SVG")


def theme_section() -> ThemeConfig:
    st.subheader("Theme")
    names = list(THEME_REGISTRY.keys())
    theme = st.selectbox(
        "Theme", names, index=names.index(DEFAULT_THEME_NAME), key="theme"
    )
    base_url = st.text_input(
        "Base URL",
        value="",
        key="base_url",
        help="Prefix for relative image paths in overrides below.",
    )
    raw = st.text_area(
        "Tile design overrides",
        value="",
        key="design_overrides",
        height=120,
        help="One 'tile_key,url' per line. Empty or invalid lines skipped.",
    )
    overrides: Dict[str, str] = {}
    for ln in raw.splitlines():
        line = ln.strip()
        if not line or line.startswith("#") or "," not in line:
            continue
        key, url = line.split(",", 1)
        if key.strip() and url.strip():
            overrides[key.strip()] = url.strip()
    st.markdown(f"Valid overrides: **{len(overrides)}**")
    return ThemeConfig(base_url=base_url or None, tile_designs=overrides, theme=theme)


# --------- Main App ---------

tab_render, tab_instructions = st.tabs(["Render", "Instructions"])

with tab_render:
    left_col, right_col = st.columns([0.7, 0.3])

    with right_col:
        theme_config = theme_section()
        st.divider()
        example = st.selectbox("Example hand", list(EXAMPLE_HANDS), key="example")

    with left_col:
        notation = st.text_input(
            "Notation", value=EXAMPLE_HANDS[example], key="notation"
        )
        instructions = list(parse(notation))
        result = layout(instructions, get_render_config(theme_config))
        st.markdown(to_markup(result), unsafe_allow_html=True)
        st.caption(f"{len(instructions)} instructions, width {result.width}")
        with st.expander("Markup"):
            st.code(to_markup(result), language="html")

with tab_instructions:
    rows = [instruction_row(entry) for entry in instructions]
    st.dataframe(rows, use_container_width=True)
