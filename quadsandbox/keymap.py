"""Mapping from abstract actions to the keys that trigger them."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from enum import Enum, auto


class Action(Enum):
    QUIT = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    ZOOM_IN = auto()
    ZOOM_OUT = auto()


class Key(Enum):
    Q = auto()
    ESCAPE = auto()
    A = auto()
    D = auto()
    W = auto()
    S = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()


DEFAULT_BINDINGS: dict[Action, tuple[Key, ...]] = {
    Action.QUIT: (Key.Q, Key.ESCAPE),
    Action.LEFT: (Key.A, Key.LEFT),
    Action.RIGHT: (Key.D, Key.RIGHT),
    Action.UP: (Key.W, Key.UP),
    Action.DOWN: (Key.S, Key.DOWN),
    Action.ZOOM_IN: (Key.RIGHT_BRACKET,),
    Action.ZOOM_OUT: (Key.LEFT_BRACKET,),
}


class Input:
    """Resolves actions against the set of keys currently held down."""

    def __init__(self, bindings: Mapping[Action, Sequence[Key]] | None = None) -> None:
        source = DEFAULT_BINDINGS if bindings is None else bindings
        self.bindings = {action: tuple(keys) for action, keys in source.items()}

    def is_action_pressed(self, action: Action, pressed_keys: Collection[Key]) -> bool:
        """Whether any key bound to ``action`` is among ``pressed_keys``."""
        return any(key in pressed_keys for key in self.bindings.get(action, ()))