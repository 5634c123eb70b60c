"""The interactive game window and its event loop."""

from __future__ import annotations

from typing import Optional, Sequence

import pygame

from raycube.player import Control, init_player
from raycube.raycast import FrameBuffer, render_frame
from raycube.worldmap import DEBUG, default_map, find_spawn, spawn_map

TITLE = "Cub3d"

_KEY_CONTROLS = {
    pygame.K_w: Control.UP,
    pygame.K_s: Control.DOWN,
    pygame.K_d: Control.RIGHT,
    pygame.K_a: Control.LEFT,
    pygame.K_LEFT: Control.ROTATE_LEFT,
    pygame.K_RIGHT: Control.ROTATE_RIGHT,
}


def key_to_control(key: int) -> Optional[Control]:
    """The control bound to a key, or None for an unbound key."""
    return _KEY_CONTROLS.get(key)


def _frame_to_rgb(frame: FrameBuffer) -> bytes:
    rgb = bytearray(frame.width * frame.height * 3)
    rgb[0::3] = frame.data[2::4]
    rgb[1::3] = frame.data[1::4]
    rgb[2::3] = frame.data[0::4]
    return bytes(rgb)


class Game:
    """Player, world and frame, plus the window they are shown in."""

    def __init__(
        self,
        spawn_grid: Optional[Sequence[str]] = None,
        world: Optional[Sequence[str]] = None,
        frame: Optional[FrameBuffer] = None,
        debug: bool = DEBUG,
    ) -> None:
        spawn = find_spawn(spawn_map() if spawn_grid is None else spawn_grid)
        self.player = init_player(spawn)
        self.world = default_map() if world is None else list(world)
        self.frame = FrameBuffer() if frame is None else frame
        self.debug = debug
        self.screen: Optional[pygame.Surface] = None
        self.running = True

    def handle_key_down(self, key: int) -> None:
        """Escape closes the game; a bound key starts its control."""
        if key == pygame.K_ESCAPE:
            self.close()
        control = key_to_control(key)
        if control is not None:
            self.player.press(control)

    def handle_key_up(self, key: int) -> None:
        """A bound key stops its control."""
        control = key_to_control(key)
        if control is not None:
            self.player.release(control)

    def step(self) -> FrameBuffer:
        """Move the player, render a frame and show it if a window is open."""
        self.player.move()
        render_frame(self.frame, self.player, self.world, self.debug)
        if self.screen is not None:
            size = (self.frame.width, self.frame.height)
            image = pygame.image.frombuffer(_frame_to_rgb(self.frame), size, "RGB")
            self.screen.blit(image, (0, 0))
        return self.frame

    def close(self) -> None:
        """Stop the game and release the window."""
        self.running = False
        if self.screen is not None:
            pygame.display.quit()
            self.screen = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    pygame.init()
    try:
        game = Game()
        game.screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption(TITLE)
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.close()
                elif event.type == pygame.KEYDOWN:
                    game.handle_key_down(event.key)
                elif event.type == pygame.KEYUP:
                    game.handle_key_up(event.key)
            if not game.running:
                break
            game.step()
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0