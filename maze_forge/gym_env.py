"""Gymnasium environment wrapper for maze walking.

An agent starts on the top-left cell of a freshly generated maze and must reach
the bottom-right cell. Moving into a wall or off the grid leaves the agent in
place. Reward is ``-1`` per step and ``0`` on the step that reaches the end,
which terminates the episode; ``max_steps`` truncates.

Observation schema:

``{"image": np.ndarray(H, W, 4), "position": np.ndarray([row, col])}``

Usage:

``env = MazeEnv(rows=11, cols=11, seed=7)``

``reset(seed=...)`` regenerates the maze with that seed. Without any seed a
maze seed is drawn from the environment's ``np_random``.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL import Image

from maze_forge.actions import ACTION_DELTAS, GYM_TO_ACTION, GymAction
from maze_forge.generator import MazeGenerator
from maze_forge.grid import Grid
from maze_forge.renderer.image import (
    DEFAULT_RESOLUTION,
    ColorMap,
    render_array,
    tile_size,
)
from maze_forge.solver import bfs_distances
from maze_forge.types import CarveVariant, Coord

ObsType = Dict[str, Any]


class MazeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` over a single generated maze.

    Arguments:
        rows: Grid rows.
        cols: Grid columns.
        seed: Default maze seed used when ``reset`` gets none.
        variant: Carving variant.
        max_steps: Optional step budget; exceeding it truncates the episode.
        render_mode: ``"rgb_array"`` returns frames, ``"human"`` opens a window.
        render_resolution: Approximate image width in pixels.
        color_map: Tile palette (see :mod:`maze_forge.renderer.image`).
    """

    metadata = {"render_modes": ["human", "rgb_array"]}

    def __init__(
        self,
        rows: int = 11,
        cols: int = 11,
        seed: Optional[int] = None,
        variant: CarveVariant = CarveVariant.ROOM,
        max_steps: Optional[int] = None,
        render_mode: str = "rgb_array",
        render_resolution: int = DEFAULT_RESOLUTION,
        color_map: Optional[ColorMap] = None,
    ) -> None:
        if render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Render mode '{render_mode}' not supported.")
        self.rows = rows
        self.cols = cols
        self.variant = CarveVariant(variant)
        self.max_steps = max_steps
        self.render_mode = render_mode
        self._seed = seed
        self._render_resolution = render_resolution
        self._color_map = color_map

        self.grid = Grid(rows, cols)
        self.start: Coord = (0, 0)
        self.end: Coord = (rows - 1, cols - 1)
        self.position: Coord = self.start
        self.maze_seed: Optional[int] = None
        self.steps = 0
        self._distance_to_end: Dict[Coord, int] = {}

        size = tile_size(self.grid, render_resolution)
        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0, high=255, shape=(rows * size, cols * size, 4), dtype=np.uint8
                ),
                "position": spaces.Box(
                    low=0, high=max(rows, cols) - 1, shape=(2,), dtype=np.int64
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Generate a new maze and place the agent on the start cell."""
        super().reset(seed=seed)
        maze_seed = seed or self._seed or int(self.np_random.integers(1, 2**31 - 1))
        generator = MazeGenerator(seed=maze_seed, variant=self.variant)
        generator.generate(self.grid)
        self.maze_seed = generator.seed
        self._distance_to_end = bfs_distances(self.grid, self.end)
        self.position = self.start
        self.steps = 0
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one move.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if self.maze_seed is None:
            raise RuntimeError("Call reset() before step()")
        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        drow, dcol = ACTION_DELTAS[GYM_TO_ACTION[GymAction(int(action))]]
        row, col = self.position[0] + drow, self.position[1] + dcol
        if self.grid.in_bounds(row, col) and self.grid.is_path(row, col):
            self.position = (row, col)
        self.steps += 1

        terminated = self.position == self.end
        reward = 0.0 if terminated else -1.0
        truncated = (
            not terminated and self.max_steps is not None and self.steps >= self.max_steps
        )
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:  # type: ignore[override]
        frame = self._render_frame()
        if self.render_mode == "human":
            Image.fromarray(frame).show()
            return None
        return frame

    def _render_frame(self) -> np.ndarray:
        return render_array(
            self.grid,
            self.start,
            self.end,
            agent=self.position,
            resolution=self._render_resolution,
            color_map=self._color_map,
        )

    def _get_obs(self) -> ObsType:
        return {
            "image": self._render_frame(),
            "position": np.array(self.position, dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, object]:
        return {
            "distance": self._distance_to_end.get(self.position, -1),
            "steps": self.steps,
            "seed": self.maze_seed,
        }
