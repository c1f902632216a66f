"""The game window: state, per-frame update and the event loop."""

from __future__ import annotations

from typing import Optional, Sequence

from cubed.image import Image
from cubed.player import PI, Key, Player
from cubed.render import draw_frame

WIDTH = 1800
HEIGHT = 1400
TITLE = "cub3D"

_MAP = (
    "111111111111111",
    "100000000000001",
    "100000000000001",
    "100000100000001",
    "10000000N000001",
    "100000010000001",
    "100001000000001",
    "100000000000001",
    "100000000000001",
    "111111111111111",
)


def default_map() -> list[str]:
    """Return the built-in map, one string per row."""
    return list(_MAP)


class Game:
    """The frame buffer, the player and the map."""

    def __init__(self) -> None:
        self.image = Image(WIDTH, HEIGHT)
        self.map = default_map()
        self.player = Player(x=8, y=4, angle=PI / 2)

    def key_press(self, keycode: int) -> None:
        self.player.key_press(keycode)

    def key_release(self, keycode: int) -> None:
        self.player.key_release(keycode)

    def update(self) -> Image:
        """Advance one frame and return the redrawn image."""
        draw_frame(self.image, self.player, self.map)
        return self.image


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed."""
    import pygame

    keymap = {
        pygame.K_w: Key.W,
        pygame.K_s: Key.S,
        pygame.K_a: Key.A,
        pygame.K_d: Key.D,
        pygame.K_LEFT: Key.LEFT_ARROW,
        pygame.K_RIGHT: Key.RIGHT_ARROW,
    }
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIDTH, HEIGHT))
        except pygame.error:
            return 1
        pygame.display.set_caption(TITLE)
        game = Game()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in keymap:
                    game.key_press(keymap[event.key])
                elif event.type == pygame.KEYUP and event.key in keymap:
                    game.key_release(keymap[event.key])
            if not running:
                break
            frame = game.update()
            surface = pygame.image.frombuffer(
                frame.to_rgb_bytes(), (frame.width, frame.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0