"""Player position, held controls and per-frame movement."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Set

from raycube.worldmap import BLOCK, PI, Spawn, spawn_angle

SPEED = 3
ANGLE_SPEED = 0.03


class Control(enum.Enum):
    """Movement and rotation inputs a player can hold down."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"


@dataclass
class Player:
    """Position in world units, view angle in radians, and held controls."""

    x: float
    y: float
    angle: float
    held: Set[Control] = field(default_factory=set)

    def press(self, control: Control) -> None:
        """Start holding a control."""
        self.held.add(control)

    def release(self, control: Control) -> None:
        """Stop holding a control."""
        self.held.discard(control)

    def move(self) -> None:
        """Advance one frame according to the held controls.

        The movement direction is taken from the angle before this frame's
        rotation is applied.
        """
        cos_angle = math.cos(self.angle)
        sin_angle = math.sin(self.angle)

        if Control.ROTATE_LEFT in self.held:
            self.angle -= ANGLE_SPEED
        if Control.ROTATE_RIGHT in self.held:
            self.angle += ANGLE_SPEED
        if self.angle > 2 * PI:
            self.angle = 0.0
        if self.angle < 0:
            self.angle = 2 * PI

        if Control.UP in self.held:
            self.x += cos_angle * SPEED
            self.y += sin_angle * SPEED
        if Control.DOWN in self.held:
            self.x -= cos_angle * SPEED
            self.y -= sin_angle * SPEED
        if Control.LEFT in self.held:
            self.x += sin_angle * SPEED
            self.y -= cos_angle * SPEED
        if Control.RIGHT in self.held:
            self.x -= sin_angle * SPEED
            self.y += cos_angle * SPEED


def init_player(spawn: Spawn) -> Player:
    """A player standing in the centre of the spawn cell, facing its direction."""
    return Player(
        x=spawn.x * BLOCK + BLOCK // 2,
        y=spawn.y * BLOCK + BLOCK // 2,
        angle=spawn_angle(spawn.direction),
    )