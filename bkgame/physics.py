"""Movement of the rabbit and the scrolling background, free of any display."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 750

MOVE_SPEED_VERTICAL = 30.0
MOVE_SPEED_HORIZONTAL = 30.0
UP_EXTRA_STEP = 10.0
JUMP_HORIZONTAL_STEP = 5.0
JUMP_HEIGHT_MULTIPLIER = 150.0
JUMP_TIME_STEP = 0.09
JUMP_TIME_END = 3.14
INITIAL_START_Y = 300.0
BACKGROUND_SPEED = 0.01
BACKGROUND_START_X = 0.01


class Key(enum.Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    R = "r"
    W = "w"
    ESCAPE = "escape"


class Facing(enum.Enum):
    """Direction the rabbit looks in."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Rect:
    """Axis-aligned rectangle with float coordinates."""

    x: float
    y: float
    w: float
    h: float


def _sprite_source() -> Rect:
    return Rect(0.0, 0.0, 126.0, 215.0)


def _sprite_start() -> Rect:
    return Rect(550.0, 450.0, 126.0, 215.0)


@dataclass
class Rabbit:
    """The player sprite: position, facing and jump state."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    src: Rect = field(default_factory=_sprite_source)
    dst: Rect = field(default_factory=_sprite_start)
    facing: Facing = Facing.LEFT
    start_y: float = INITIAL_START_Y
    jumping: bool = False
    jump_time: float = 0.0
    last_landing_y: float = 450.0

    def press(self, key: Key) -> None:
        """Apply a key press to the rabbit."""
        dst = self.dst
        if key is Key.UP:
            dst.y = max(dst.y - MOVE_SPEED_VERTICAL - UP_EXTRA_STEP, 0.0)
            self.start_y = dst.y
        elif key is Key.DOWN:
            dst.y = min(dst.y + MOVE_SPEED_VERTICAL, float(self.height) - dst.h)
            self.start_y = dst.y
        elif key is Key.R:
            self.jumping = True
            self.jump_time = 0.0
            self.facing = Facing.RIGHT
            self.start_y = dst.y
        elif key is Key.W:
            # Jumping left keeps the previous take-off height.
            self.jumping = True
            self.jump_time = 0.0
            self.facing = Facing.LEFT
        elif key is Key.LEFT:
            dst.x = max(dst.x - MOVE_SPEED_HORIZONTAL, 0.0)
            self.facing = Facing.LEFT
        elif key is Key.RIGHT:
            dst.x = min(dst.x + MOVE_SPEED_HORIZONTAL, float(self.width) - dst.w)
            self.facing = Facing.RIGHT

    def update(self) -> None:
        """Advance an ongoing jump by one frame."""
        if not self.jumping:
            return
        dst = self.dst
        if self.facing is Facing.RIGHT:
            dst.x = min(dst.x + JUMP_HORIZONTAL_STEP, float(self.width) - dst.w)
        else:
            dst.x = max(dst.x - JUMP_HORIZONTAL_STEP, 0.0)

        lift = math.sin(self.jump_time) * JUMP_HEIGHT_MULTIPLIER
        dst.y = max(self.start_y - lift, 0.0)
        self.jump_time += JUMP_TIME_STEP

        if self.jump_time > JUMP_TIME_END:
            self.jumping = False
            dst.y = self.start_y
            self.last_landing_y = dst.y


@dataclass
class Background:
    """Two copies of the background image scrolling to the left."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    speed: float = BACKGROUND_SPEED
    x1: float = BACKGROUND_START_X
    x2: float | None = None

    def __post_init__(self) -> None:
        if self.x2 is None:
            self.x2 = float(self.width)

    def advance(self) -> None:
        """Scroll both copies and wrap any that left the screen."""
        self.x1 -= self.speed
        self.x2 -= self.speed
        if self.x1 <= -float(self.width):
            self.x1 = float(self.width)
        if self.x2 <= -float(self.width):
            self.x2 = float(self.width)

    def rects(self) -> tuple[Rect, Rect]:
        """Destination rectangles for the two copies."""
        w, h = float(self.width), float(self.height)
        return Rect(self.x1, 0.0, w, h), Rect(self.x2, 0.0, w, h)