"""Game pad, mouse and combined input state with per-frame edge detection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable, Optional


class GamePadButton(IntFlag):
    """Logical game pad buttons."""

    UP = 1 << 0
    RIGHT = 1 << 1
    DOWN = 1 << 2
    LEFT = 1 << 3
    A = 1 << 4
    B = 1 << 5
    X = 1 << 6
    Y = 1 << 7
    START = 1 << 8
    BACK = 1 << 9
    LEFT_THUMB = 1 << 10
    RIGHT_THUMB = 1 << 11
    LEFT_SHOULDER = 1 << 12
    RIGHT_SHOULDER = 1 << 13
    LEFT_TRIGGER = 1 << 14
    RIGHT_TRIGGER = 1 << 15


_NO_PAD_BUTTONS = GamePadButton(0)

TRIGGER_THRESHOLD = 30
LEFT_THUMB_DEADZONE = 7849
RIGHT_THUMB_DEADZONE = 8689

_THUMB_MIN = -0x8000
_THUMB_MAX = 0x7FFF
_THUMB_SCALE = float(0x8000)
_TRIGGER_MAX = 255

# Keyboard keys that move the sticks: key -> (stick, axis, value).
_STICK_KEYS = (
    ("W", "left", "y", 1.0),
    ("A", "left", "x", -1.0),
    ("S", "left", "y", -1.0),
    ("D", "left", "x", 1.0),
    ("I", "right", "y", 1.0),
    ("J", "right", "x", -1.0),
    ("K", "right", "y", -1.0),
    ("L", "right", "x", 1.0),
)

_BUTTON_KEYS = (
    ("Z", GamePadButton.A),
    ("X", GamePadButton.B),
    ("C", GamePadButton.X),
    ("V", GamePadButton.Y),
    ("UP", GamePadButton.UP),
    ("RIGHT", GamePadButton.RIGHT),
    ("DOWN", GamePadButton.DOWN),
    ("LEFT", GamePadButton.LEFT),
)

_DPAD_AXES = (
    (GamePadButton.UP, "y", 1.0),
    (GamePadButton.RIGHT, "x", 1.0),
    (GamePadButton.DOWN, "y", -1.0),
    (GamePadButton.LEFT, "x", -1.0),
)


@dataclass(frozen=True)
class PadReading:
    """Raw state of a connected controller for one frame."""

    buttons: GamePadButton = _NO_PAD_BUTTONS
    left_trigger: int = 0
    right_trigger: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0

    def __post_init__(self) -> None:
        for name in ("left_trigger", "right_trigger"):
            value = getattr(self, name)
            if not 0 <= value <= _TRIGGER_MAX:
                raise ValueError(f"{name} must be within 0..{_TRIGGER_MAX}, got {value}")
        for name in ("thumb_lx", "thumb_ly", "thumb_rx", "thumb_ry"):
            value = getattr(self, name)
            if not _THUMB_MIN <= value <= _THUMB_MAX:
                raise ValueError(
                    f"{name} must be within {_THUMB_MIN}..{_THUMB_MAX}, got {value}"
                )


def _inside_deadzone(x: int, y: int, deadzone: int) -> bool:
    return -deadzone < x < deadzone and -deadzone < y < deadzone


def _normalized_stick(x: float, y: float) -> Optional[tuple[float, float]]:
    if x >= 1.0 or x <= -1.0 or y >= 1.0 or y <= -1.0:
        power = math.sqrt(x * x + y * y)
        return x / power, y / power
    return None


class GamePad:
    """Game pad state, fed from a controller reading and keyboard emulation."""

    def __init__(self, slot: int = 0) -> None:
        self.slot = slot
        self._current = _NO_PAD_BUTTONS
        self._previous = _NO_PAD_BUTTONS
        self._down = _NO_PAD_BUTTONS
        self._up = _NO_PAD_BUTTONS
        self._axis_lx = 0.0
        self._axis_ly = 0.0
        self._axis_rx = 0.0
        self._axis_ry = 0.0
        self._trigger_l = 0.0
        self._trigger_r = 0.0

    @property
    def button(self) -> GamePadButton:
        """Buttons held this frame."""
        return self._current

    @property
    def button_down(self) -> GamePadButton:
        """Buttons pressed since the previous frame."""
        return self._down

    @property
    def button_up(self) -> GamePadButton:
        """Buttons released since the previous frame."""
        return self._up

    @property
    def axis_lx(self) -> float:
        return self._axis_lx

    @property
    def axis_ly(self) -> float:
        return self._axis_ly

    @property
    def axis_rx(self) -> float:
        return self._axis_rx

    @property
    def axis_ry(self) -> float:
        return self._axis_ry

    @property
    def trigger_l(self) -> float:
        return self._trigger_l

    @property
    def trigger_r(self) -> float:
        return self._trigger_r

    def update(self, reading: Optional[PadReading] = None, keys: Iterable[str] = ()) -> None:
        """Advance one frame from a controller reading (None if absent) and held keys."""
        self._axis_lx = self._axis_ly = 0.0
        self._axis_rx = self._axis_ry = 0.0
        self._trigger_l = self._trigger_r = 0.0
        new_state = _NO_PAD_BUTTONS

        if reading is not None:
            new_state |= reading.buttons
            if reading.left_trigger > TRIGGER_THRESHOLD:
                new_state |= GamePadButton.LEFT_TRIGGER
            if reading.right_trigger > TRIGGER_THRESHOLD:
                new_state |= GamePadButton.RIGHT_TRIGGER

            lx, ly = reading.thumb_lx, reading.thumb_ly
            if _inside_deadzone(lx, ly, LEFT_THUMB_DEADZONE):
                lx = ly = 0
            rx, ry = reading.thumb_rx, reading.thumb_ry
            if _inside_deadzone(rx, ry, RIGHT_THUMB_DEADZONE):
                rx = ry = 0

            self._trigger_l = reading.left_trigger / float(_TRIGGER_MAX)
            self._trigger_r = reading.right_trigger / float(_TRIGGER_MAX)
            self._axis_lx = lx / _THUMB_SCALE
            self._axis_ly = ly / _THUMB_SCALE
            self._axis_rx = rx / _THUMB_SCALE
            self._axis_ry = ry / _THUMB_SCALE

        held = {key.upper() for key in keys}
        sticks = {"left": {"x": 0.0, "y": 0.0}, "right": {"x": 0.0, "y": 0.0}}
        for key, stick, axis, value in _STICK_KEYS:
            if key in held:
                sticks[stick][axis] = value
        for key, flag in _BUTTON_KEYS:
            if key in held:
                new_state |= flag
        for flag, axis, value in _DPAD_AXES:
            if new_state & flag:
                sticks["left"][axis] = value

        left = _normalized_stick(sticks["left"]["x"], sticks["left"]["y"])
        if left is not None:
            self._axis_lx, self._axis_ly = left
        right = _normalized_stick(sticks["right"]["x"], sticks["right"]["y"])
        if right is not None:
            self._axis_rx, self._axis_ry = right

        self._previous = self._current
        self._current = new_state
        self._down = GamePadButton(int(new_state) & ~int(self._previous))
        self._up = GamePadButton(int(self._previous) & ~int(new_state))


class MouseButton(IntFlag):
    """Mouse buttons."""

    LEFT = 1 << 0
    MIDDLE = 1 << 1
    RIGHT = 1 << 2


_NO_MOUSE_BUTTONS = MouseButton(0)


@dataclass(frozen=True)
class MouseState:
    """Raw mouse state for one frame, with the cursor in client coordinates."""

    buttons: MouseButton
    cursor_x: int
    cursor_y: int
    client_width: int
    client_height: int

    def __post_init__(self) -> None:
        if self.client_width < 0 or self.client_height < 0:
            raise ValueError("client size must not be negative")


class Mouse:
    """Mouse buttons, wheel and cursor position scaled to the viewport size."""

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._current = _NO_MOUSE_BUTTONS
        self._previous = _NO_MOUSE_BUTTONS
        self._down = _NO_MOUSE_BUTTONS
        self._up = _NO_MOUSE_BUTTONS
        self._wheel_pending = 0
        self._wheel = 0
        self._position = (0, 0)
        self._old_position = (0, 0)

    @property
    def button(self) -> MouseButton:
        return self._current

    @property
    def button_down(self) -> MouseButton:
        return self._down

    @property
    def button_up(self) -> MouseButton:
        return self._up

    @property
    def wheel(self) -> int:
        """Wheel movement gathered before the last update."""
        return self._wheel

    @property
    def position_x(self) -> int:
        return self._position[0]

    @property
    def position_y(self) -> int:
        return self._position[1]

    @property
    def old_position_x(self) -> int:
        return self._old_position[0]

    @property
    def old_position_y(self) -> int:
        return self._old_position[1]

    def add_wheel(self, wheel: int) -> None:
        """Accumulate wheel movement reported between frames."""
        self._wheel_pending += wheel

    def update(self, state: MouseState) -> None:
        """Advance one frame from the given raw mouse state."""
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("screen size must be positive to scale the cursor")

        self._wheel = self._wheel_pending
        self._wheel_pending = 0

        new_state = MouseButton(state.buttons)
        self._previous = self._current
        self._current = new_state
        self._down = MouseButton(int(new_state) & ~int(self._previous))
        self._up = MouseButton(int(self._previous) & ~int(new_state))

        self._old_position = self._position
        self._position = (
            int(state.cursor_x / float(self.screen_width) * float(state.client_width)),
            int(state.cursor_y / float(self.screen_height) * float(state.client_height)),
        )


class Input:
    """Owns the game pad and mouse and updates both each frame."""

    def __init__(self, screen_width: int, screen_height: int) -> None:
        self.game_pad = GamePad()
        self.mouse = Mouse(screen_width, screen_height)

    def update(
        self,
        reading: Optional[PadReading],
        keys: Iterable[str],
        mouse_state: MouseState,
    ) -> None:
        self.game_pad.update(reading, keys)
        self.mouse.update(mouse_state)