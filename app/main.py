import time
import streamlit as st

from typing import List, Optional

from config import (
    AppConfig,
    endpoints,
    get_config_from_widgets,
    make_maze_and_reset,
    set_default_config,
)
from maze_runner import Position, find_shortest_path
from maze_runner.renderer.image import MazeRenderer

# Lets the "Finding Path..." indicator paint before the search runs.
SEARCH_DEFER_SECONDS = 0.05

st.set_page_config(layout="centered", page_title="Maze Runner")


# --------- Main App ---------

set_default_config()
tab_maze, tab_config = st.tabs(["Maze", "Config"])

with tab_config:
    config: AppConfig = get_config_from_widgets()

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["seed_counter"] = 0
        st.session_state["config"] = config
        make_maze_and_reset(config)
    st.divider()

with tab_maze:
    st.title("Maze Runner")

    if "grid" not in st.session_state:
        make_maze_and_reset(st.session_state["config"])

    reset_col, start_col = st.columns(2)
    with reset_col:
        if st.button("Reset Maze", key="reset_btn", use_container_width=True):
            st.session_state["seed_counter"] += 1
            make_maze_and_reset(st.session_state["config"])
    with start_col:
        start_clicked = st.button(
            "Start Pathfinding", key="start_btn", use_container_width=True
        )

    current_cfg: AppConfig = st.session_state["config"]
    start, end = endpoints()

    if start_clicked:
        if "grid" not in st.session_state or start is None or end is None:
            st.error("Cannot start pathfinding: maze or start/end positions not set.")
        else:
            with st.spinner("Finding Path..."):
                time.sleep(SEARCH_DEFER_SECONDS)
                path: Optional[List[Position]] = find_shortest_path(
                    st.session_state["grid"], start, end
                )
            st.session_state["path"] = path
            st.session_state["searched"] = True

    if st.session_state.get("searched"):
        solution = st.session_state.get("path")
        if solution:
            st.success(f"Path found: {len(solution)} cells")
        else:
            st.warning("No path found.")

    if "grid" in st.session_state:
        renderer = MazeRenderer(resolution=current_cfg.resolution)
        img = renderer.render(st.session_state["grid"], st.session_state.get("path"))
        st.image(img, use_container_width=True)
    else:
        st.info("Loading Maze...")

    st.caption(f"Maze Dimensions: {current_cfg.width}x{current_cfg.height}")
    if start is not None:
        st.caption(f"Start: ({start.x}, {start.y})")
    if end is not None:
        st.caption(f"End: ({end.x}, {end.y})")
