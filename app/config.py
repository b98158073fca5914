from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from maze_runner import MAZE_HEIGHT, MAZE_WIDTH, Position, generate, locate_endpoints
from maze_runner.renderer.image import DEFAULT_RESOLUTION


@dataclass(frozen=True)
class AppConfig:
    width: int
    height: int
    seed: Optional[int]
    resolution: int


def _initial_config() -> AppConfig:
    return AppConfig(
        width=MAZE_WIDTH, height=MAZE_HEIGHT, seed=None, resolution=DEFAULT_RESOLUTION
    )


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = _initial_config()
        st.session_state["seed_counter"] = 0


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]
    st.subheader("Maze Size")
    width = st.number_input(
        "Width", min_value=3, max_value=101, value=current.width, key="maze_width"
    )
    height = st.number_input(
        "Height", min_value=3, max_value=101, value=current.height, key="maze_height"
    )
    st.subheader("Random seed")
    fixed_seed = st.checkbox(
        "Fixed seed", value=current.seed is not None, key="fixed_seed"
    )
    seed: Optional[int] = None
    if fixed_seed:
        seed = st.number_input(
            "Random seed",
            min_value=0,
            value=current.seed if current.seed is not None else 0,
            key="maze_seed",
        )
    st.subheader("Rendering")
    resolution = st.slider(
        "Resolution",
        min_value=160,
        max_value=1280,
        value=current.resolution,
        step=40,
        key="resolution",
    )
    return AppConfig(
        width=int(width),
        height=int(height),
        seed=None if seed is None else int(seed),
        resolution=int(resolution),
    )


def current_seed(config: AppConfig) -> Optional[int]:
    """Seed for the next maze: the configured base plus the reset counter."""
    if config.seed is None:
        return None
    return config.seed + st.session_state.get("seed_counter", 0)


def make_maze_and_reset(config: AppConfig) -> None:
    """Generate a maze for ``config`` and reset the solver bookkeeping.

    Centralizes session_state bookkeeping (grid, start, end, path) so the page
    only deals with widgets.
    """
    try:
        grid = generate(config.width, config.height, seed=current_seed(config))
    except (IndexError, ValueError) as e:
        st.error(f"Maze generation failed: {e}")
        return
    start, end = locate_endpoints(grid)
    st.session_state["grid"] = grid
    st.session_state["start"] = start
    st.session_state["end"] = end
    st.session_state["path"] = None
    st.session_state["searched"] = False


def endpoints() -> tuple[Optional[Position], Optional[Position]]:
    return st.session_state.get("start"), st.session_state.get("end")
