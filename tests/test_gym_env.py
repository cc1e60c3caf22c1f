import numpy as np
import pytest

from maze_forge.actions import GymAction
from maze_forge import gym_env
from maze_forge.gym_env import MazeEnv
from maze_forge.solver import find_shortest_path

DELTA_TO_ACTION = {
    (-1, 0): GymAction.UP,
    (1, 0): GymAction.DOWN,
    (0, -1): GymAction.LEFT,
    (0, 1): GymAction.RIGHT,
}


def make_env(**kwargs) -> MazeEnv:
    kwargs.setdefault("rows", 7)
    kwargs.setdefault("cols", 7)
    kwargs.setdefault("render_resolution", 70)
    return MazeEnv(**kwargs)


def test_reset_observation_matches_space() -> None:
    env = make_env(seed=3)
    obs, info = env.reset()
    assert env.observation_space.contains(obs)
    assert obs["image"].shape == (70, 70, 4)
    assert tuple(obs["position"]) == (0, 0)
    assert info["steps"] == 0
    assert info["seed"] == 3
    assert info["distance"] == len(find_shortest_path(env.grid, env.start, env.end)) - 1


def test_reset_seed_is_reproducible() -> None:
    env = make_env()
    env.reset(seed=11)
    first = env.grid.kinds.copy()
    env.reset(seed=12)
    env.reset(seed=11)
    assert np.array_equal(first, env.grid.kinds)


def test_reset_without_any_seed_draws_one() -> None:
    env = make_env()
    _, info = env.reset()
    assert isinstance(info["seed"], int)
    assert info["seed"] > 0


def test_walking_shortest_path_terminates() -> None:
    env = make_env(seed=5)
    env.reset()
    path = find_shortest_path(env.grid, env.start, env.end)
    rewards = []
    terminated = False
    for a, b in zip(path, path[1:]):
        action = DELTA_TO_ACTION[(b[0] - a[0], b[1] - a[1])]
        obs, reward, terminated, truncated, info = env.step(np.int64(action))
        rewards.append(reward)
        assert not truncated
        assert tuple(obs["position"]) == b
    assert terminated
    assert rewards[-1] == 0.0
    assert sum(rewards) == -(len(path) - 2)
    assert info["distance"] == 0
    assert info["steps"] == len(path) - 1


def test_blocked_move_keeps_position() -> None:
    env = make_env(seed=5)
    env.reset()
    obs, reward, terminated, truncated, info = env.step(np.int64(GymAction.UP))
    assert tuple(obs["position"]) == (0, 0)
    assert reward == -1.0
    assert not terminated
    assert info["steps"] == 1


def test_max_steps_truncates() -> None:
    env = make_env(seed=5, max_steps=2)
    env.reset()
    _, _, _, truncated, _ = env.step(np.int64(GymAction.LEFT))
    assert not truncated
    _, _, _, truncated, _ = env.step(np.int64(GymAction.LEFT))
    assert truncated


@pytest.mark.parametrize("action", [4, -1, 10])
def test_invalid_action(action: int) -> None:
    env = make_env(seed=1)
    env.reset()
    with pytest.raises(ValueError):
        env.step(np.int64(action))


def test_step_before_reset() -> None:
    env = make_env(seed=1)
    with pytest.raises(RuntimeError):
        env.step(np.int64(GymAction.DOWN))


def test_render_rgb_array_shows_agent() -> None:
    env = make_env(seed=2)
    env.reset()
    frame = env.render()
    assert frame is not None
    assert frame.shape == (70, 70, 4)


def test_unsupported_render_mode() -> None:
    with pytest.raises(ValueError):
        make_env(render_mode="ansi")


def test_render_human_shows_frame(monkeypatch: pytest.MonkeyPatch) -> None:
    shown = []
    monkeypatch.setattr(gym_env.Image.Image, "show", lambda self: shown.append(self.size))
    env = make_env(seed=2, render_mode="human")
    env.reset()
    assert env.render() is None
    assert shown == [(70, 70)]
