"""Keyboard and gamepad input with a short-lived action buffer."""

from __future__ import annotations

import enum
import json
import time
from os import PathLike
from typing import Callable, Optional, Protocol, Union

KEYBOARD = -1
MAX_GAMEPADS = 4
BUFFER_TIMEOUT = 0.001

_KEY_DIRECTIONS = (
    ("up", 0.0, 1.0),
    ("left", -1.0, 0.0),
    ("down", 0.0, -1.0),
    ("right", 1.0, 0.0),
)


class GamepadButton(enum.Enum):
    """Face buttons of an Xbox-style gamepad."""

    A = "A"
    B = "B"
    X = "X"
    Y = "Y"


class InputDevice(Protocol):
    """The hardware layer the input component reads from."""

    def key_pressed(self, key: str) -> bool: ...

    def key_triggered(self, key: str) -> bool: ...

    def gamepad_connected(self, controller_id: int) -> bool: ...

    def gamepad_stick_left(self, controller_id: int) -> tuple[float, float]: ...

    def gamepad_stick_right(self, controller_id: int) -> tuple[float, float]: ...

    def gamepad_button_triggered(self, controller_id: int, button: GamepadButton) -> bool: ...


def to_gamepad_key(button: str) -> Optional[GamepadButton]:
    """Map a button letter to its gamepad button, or None if unknown."""
    try:
        return GamepadButton(button)
    except ValueError:
        return None


def _whole_seconds() -> float:
    return float(int(time.time()))


def _first_char(binding: str) -> str:
    return binding[:1]


class InputComponent:
    """Reads movement and buffered actions according to a JSON keybind file."""

    def __init__(
        self,
        keybind_path: Union[str, PathLike],
        device: InputDevice,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        with open(keybind_path, encoding="utf-8") as handle:
            keybinds = json.load(handle)

        self._device = device
        self._clock = clock or _whole_seconds
        self._use_right_stick = keybinds["gamepad"]["sticks"]["movement"] != "left"
        self._keyboard_movement: dict[str, str] = dict(keybinds["keyboard"]["movement"])
        self._keyboard_actions: dict[str, str] = dict(keybinds["keyboard"]["actions"])
        self._gamepad_actions: dict[str, str] = dict(keybinds["gamepad"]["action"])

        self._input_buffer = ""
        self._movement = (0.0, 0.0)
        self._last_movement = (0.0, 0.0)
        self._time_buffer = 0.0

    def update_input(self, controller_id: int) -> None:
        """Refresh movement and actions from a gamepad, or the keyboard for -1."""
        self._update_direction(controller_id)
        self._update_actions(controller_id)

    def _update_direction(self, controller_id: int) -> None:
        if controller_id == KEYBOARD:
            x = y = 0.0
            for name, dx, dy in _KEY_DIRECTIONS:
                key = _first_char(self._keyboard_movement.get(name, ""))
                if key and self._device.key_pressed(key):
                    x += dx
                    y += dy
        elif self._use_right_stick:
            x, y = self._device.gamepad_stick_right(controller_id)
        else:
            x, y = self._device.gamepad_stick_left(controller_id)

        self._movement = (float(x), float(y))
        last_x, last_y = self._last_movement
        self._last_movement = (x if x != 0 else last_x, y if y != 0 else last_y)

    def _update_actions(self, controller_id: int) -> None:
        if controller_id == KEYBOARD:
            for action, binding in self._keyboard_actions.items():
                key = _first_char(binding)
                if key and self._device.key_triggered(key):
                    if action != self._input_buffer:
                        self._time_buffer = self._clock()
                    self._input_buffer = action
                    return
        else:
            for action, binding in self._gamepad_actions.items():
                button = to_gamepad_key(_first_char(binding))
                if button is not None and self._device.gamepad_button_triggered(controller_id, button):
                    self._input_buffer = action
                    self._time_buffer = self._clock()
                    return

        if self._input_buffer and self._clock() - self._time_buffer > BUFFER_TIMEOUT:
            self._input_buffer = ""

    def take_action(self) -> str:
        """Return the buffered action, or an empty string, and clear the buffer."""
        action, self._input_buffer = self._input_buffer, ""
        return action

    def movement(self) -> tuple[float, float]:
        """Return the current movement direction."""
        return self._movement

    def last_movement(self) -> tuple[float, float]:
        """Return the last non-zero value seen on each movement axis."""
        return self._last_movement

    def check_controllers(self) -> int:
        """Return the lowest connected gamepad id, or -1 for the keyboard."""
        return next(
            (i for i in range(MAX_GAMEPADS) if self._device.gamepad_connected(i)),
            KEYBOARD,
        )