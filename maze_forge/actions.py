"""Action enumerations.

:class:`Action` is the human readable movement enum; :class:`GymAction` is the
stable integer mapping used by the Gymnasium ``Discrete`` action space.
"""

from enum import IntEnum, StrEnum, auto


class Action(StrEnum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class GymAction(IntEnum):
    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


ACTION_DELTAS: dict[Action, tuple[int, int]] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}

GYM_TO_ACTION: dict[GymAction, Action] = {
    GymAction.UP: Action.UP,
    GymAction.DOWN: Action.DOWN,
    GymAction.LEFT: Action.LEFT,
    GymAction.RIGHT: Action.RIGHT,
}
