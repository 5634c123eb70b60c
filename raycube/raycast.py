"""Software frame buffer and the column-by-column raycasting renderer."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from raycube.player import Player
from raycube.worldmap import BLOCK, HEIGHT, PI, WIDTH

BYTES_PER_PIXEL = 4
WALL_COLOR = 255
MAP_COLOR = 0x0000FF
RAY_COLOR = 0xFF0000
PLAYER_COLOR = 0x00FF00
PLAYER_SIZE = 10


class FrameBuffer:
    """A 32-bit pixel buffer with blue, green, red byte order per pixel."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.width = width
        self.height = height
        self.size_line = width * BYTES_PER_PIXEL
        self.data = bytearray(self.size_line * height)

    def _index(self, x: int, y: int) -> int:
        return y * self.size_line + x * BYTES_PER_PIXEL

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set one pixel; coordinates outside the frame are ignored."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            return
        index = self._index(x, y)
        self.data[index] = color & 0xFF
        self.data[index + 1] = (color >> 8) & 0xFF
        self.data[index + 2] = (color >> 16) & 0xFF

    def pixel(self, x: int, y: int) -> int:
        """The 24-bit colour stored at a pixel."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")
        index = self._index(x, y)
        blue, green, red = self.data[index:index + 3]
        return (red << 16) | (green << 8) | blue

    def clear(self) -> None:
        """Set every pixel to black."""
        self.data[:] = bytes(len(self.data))


def draw_square(frame: FrameBuffer, x: float, y: float, size: int, color: int) -> None:
    """Outline a square whose top-left corner is at (x, y)."""
    x, y = int(x), int(y)
    for i in range(size):
        frame.put_pixel(x + i, y, color)
    for i in range(size):
        frame.put_pixel(x, y + i, color)
    for i in range(size):
        frame.put_pixel(x + size, y + i, color)
    for i in range(size):
        frame.put_pixel(x + i, y + size, color)


def draw_map(frame: FrameBuffer, grid: Sequence[str]) -> None:
    """Outline every wall cell of the grid from above."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == "1":
                draw_square(frame, x * BLOCK, y * BLOCK, BLOCK, MAP_COLOR)


def touch(px: float, py: float, grid: Sequence[str]) -> bool:
    """True if the point lies in a wall cell or outside the grid."""
    x = int(px / BLOCK)
    y = int(py / BLOCK)
    if y < 0 or y >= len(grid):
        return True
    if x < 0 or x >= len(grid[y]):
        return True
    return grid[y][x] == "1"


def distance(x: float, y: float) -> float:
    """Length of the vector (x, y)."""
    return math.sqrt(x * x + y * y)


def fixed_dist(x1: float, y1: float, x2: float, y2: float, view_angle: float) -> float:
    """Distance between two points projected onto the view direction."""
    delta_x = x2 - x1
    delta_y = y2 - y1
    angle = math.atan2(delta_y, delta_x) - view_angle
    return distance(delta_x, delta_y) * math.cos(angle)


def _march(player: Player, grid: Sequence[str], ray_angle: float):
    """Yield each point of a unit-step ray until it enters a wall."""
    cos_angle = math.cos(ray_angle)
    sin_angle = math.sin(ray_angle)
    ray_x, ray_y = player.x, player.y
    while not touch(ray_x, ray_y, grid):
        yield ray_x, ray_y, False
        ray_x += cos_angle
        ray_y += sin_angle
    yield ray_x, ray_y, True


def cast_ray(player: Player, grid: Sequence[str], ray_angle: float) -> Tuple[float, float]:
    """The first point along the ray, in unit steps, that touches a wall."""
    for ray_x, ray_y, hit in _march(player, grid, ray_angle):
        if hit:
            return ray_x, ray_y
    raise AssertionError("ray march ended without a hit")


def draw_column(
    frame: FrameBuffer,
    player: Player,
    grid: Sequence[str],
    ray_angle: float,
    column: int,
    debug: bool = False,
) -> None:
    """Cast one ray; draw its path in debug mode, else its wall slice."""
    hit_x = hit_y = 0.0
    for ray_x, ray_y, hit in _march(player, grid, ray_angle):
        if hit:
            hit_x, hit_y = ray_x, ray_y
        elif debug:
            frame.put_pixel(ray_x, ray_y, RAY_COLOR)
    if debug:
        return
    dist = fixed_dist(player.x, player.y, hit_x, hit_y, player.angle)
    if dist <= 0:
        start_y, end = 0, frame.height
    else:
        height = (BLOCK / dist) * (frame.width // 2)
        start_y = int((frame.height - height) / 2)
        end = int(start_y + height)
    for y in range(max(start_y, 0), min(end, frame.height)):
        frame.put_pixel(column, y, WALL_COLOR)


def render_frame(
    frame: FrameBuffer,
    player: Player,
    grid: Sequence[str],
    debug: bool = False,
) -> None:
    """Clear the frame and draw the view across a 60-degree field."""
    frame.clear()
    if debug:
        draw_square(frame, player.x, player.y, PLAYER_SIZE, PLAYER_COLOR)
        draw_map(frame, grid)
    fraction = PI / 3 / frame.width
    ray_angle = player.angle - PI / 6
    for column in range(frame.width):
        draw_column(frame, player, grid, ray_angle, column, debug)
        ray_angle += fraction