"""The world grid, screen constants and the player's spawn point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

WIDTH = 1280
HEIGHT = 720
BLOCK = 64
DEBUG = False
PI = 3.14159265359

SPAWN_CHARS = "NSEW"

_DEFAULT_ROWS = (
    "11111111111111",
    "10000000000001",
    "10000000000001",
    "10000011100001",
    "10000000000001",
    "10000000000001",
    "10000000000001",
    "10000000000001",
    "10000100000001",
    "11111111111111",
)

_SPAWN_ROWS = (
    "11111111111111",
    "10000000000001",
    "1000000S000001",
    "10000011100001",
    "10000000000001",
    "10000000000001",
    "10000000000001",
    "10000000000001",
    "10000100000001",
    "11111111111111",
)


@dataclass(frozen=True)
class Spawn:
    """Grid cell where the player starts and the direction it faces."""

    x: int
    y: int
    direction: str


def default_map() -> List[str]:
    """The built-in world used for collision and rendering."""
    return list(_DEFAULT_ROWS)


def spawn_map() -> List[str]:
    """The built-in world that marks the player's starting cell."""
    return list(_SPAWN_ROWS)


def spawn_angle(direction: str) -> float:
    """View angle in radians for a compass letter; unknown letters face east."""
    angles = {
        "N": 3 * PI / 2,
        "S": PI / 2,
        "E": 0.0,
        "W": PI,
    }
    return angles.get(direction, 0.0)


def find_spawn(grid: Sequence[str]) -> Spawn:
    """The first N, S, E or W cell in row-major order.

    Raises ValueError when the grid holds no spawn cell.
    """
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell in SPAWN_CHARS:
                return Spawn(x, y, cell)
    raise ValueError("map has no player spawn position")