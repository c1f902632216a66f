"""Player state and keyboard-driven movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

PI = 3.14159265359


class Key(IntEnum):
    """Key symbols the game reacts to."""

    W = 119
    S = 115
    A = 97
    D = 100
    LEFT_ARROW = 65361
    RIGHT_ARROW = 65363


_KEY_FLAGS = {
    Key.W: "key_up",
    Key.S: "key_down",
    Key.A: "key_left",
    Key.D: "key_right",
    Key.LEFT_ARROW: "key_left_arrow",
    Key.RIGHT_ARROW: "key_right_arrow",
}

_STEP = 1


@dataclass
class Player:
    """Position in map tiles, view angle in radians and held movement keys."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    key_up: bool = False
    key_down: bool = False
    key_left: bool = False
    key_right: bool = False
    key_left_arrow: bool = False
    key_right_arrow: bool = False

    def _set_key(self, keycode: int, held: bool) -> None:
        try:
            flag = _KEY_FLAGS[Key(keycode)]
        except ValueError:
            return
        setattr(self, flag, held)

    def key_press(self, keycode: int) -> None:
        """Mark a key as held; unknown keys are ignored."""
        self._set_key(keycode, True)

    def key_release(self, keycode: int) -> None:
        """Mark a key as released; unknown keys are ignored."""
        self._set_key(keycode, False)

    def move(self) -> None:
        """Step one tile in each direction whose key is held."""
        if self.key_up:
            self.y -= _STEP
        if self.key_down:
            self.y += _STEP
        if self.key_left:
            self.x -= _STEP
        if self.key_right:
            self.x += _STEP