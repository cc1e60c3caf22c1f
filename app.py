import streamlit as st

from maze_forge.config import DEFAULT_COLS, DEFAULT_ROWS, DEFAULT_SEED, MazeConfig
from maze_forge.renderer.image import COLOR_MAP_REGISTRY, render_image
from maze_forge.renderer.text import legend_text, render_text
from maze_forge.stats import MazeRun, build_maze, stats_lines
from maze_forge.types import CarveVariant

st.set_page_config(layout="wide", page_title="Maze Forge")


def config_from_widgets() -> MazeConfig:
    rows = st.number_input("Rows", min_value=3, max_value=201, value=DEFAULT_ROWS)
    cols = st.number_input("Columns", min_value=3, max_value=201, value=DEFAULT_COLS)
    seed = st.number_input(
        "Seed (0 = random)", min_value=0, max_value=2**31 - 1, value=DEFAULT_SEED
    )
    variant = st.selectbox("Variant", [v.value for v in CarveVariant])
    return MazeConfig.from_dimensions(
        int(rows), int(cols), seed=int(seed), variant=CarveVariant(variant)
    )


# --------- Main App ---------

with st.sidebar:
    config = config_from_widgets()
    palette = st.selectbox("Palette", list(COLOR_MAP_REGISTRY.keys()))
    show_solution = st.checkbox("Show solution", value=True)
    if st.button("🔁 Generate", use_container_width=True) or "run" not in st.session_state:
        st.session_state["run"] = build_maze(config)

run: MazeRun = st.session_state["run"]
cfg = run.config

left_col, right_col = st.columns([0.65, 0.35])

with left_col:
    if not run.solvable:
        st.error("Maze is NOT solvable")
    st.image(
        render_image(
            run.grid,
            cfg.start,
            cfg.end,
            path=run.path if show_solution else None,
            color_map=COLOR_MAP_REGISTRY[palette],
        ),
        use_container_width=True,
    )

with right_col:
    st.subheader("Statistics")
    st.text("\n".join(stats_lines(run.stats)))
    st.text(f"Generated in {run.stats.generation_ms:.2f} ms")
    with st.expander("Text rendering"):
        st.code(
            render_text(run.grid, cfg.start, cfg.end, run.path if show_solution else None)
        )
        st.text(legend_text())
