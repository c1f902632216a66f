"""Drawing the top-down map, the player and its view ray."""

from __future__ import annotations

import math
from typing import Sequence

from cubed.image import Image
from cubed.player import Player

TILE = 64
WALL_COLOR = 0xFAF0E6
PLAYER_COLOR = 0xE6E6FA
RAY_COLOR = 0xFF0000
RAY_LENGTH = 100


def draw_square(image: Image, x: int, y: int, color: int, size: int) -> None:
    """Draw the outline of a size x size square whose top-left corner is (x, y)."""
    x, y = int(x), int(y)
    for i in range(size):
        image.put_pixel(x + i, y, color)
    for i in range(size):
        image.put_pixel(x + i, y + size, color)
    for i in range(size):
        image.put_pixel(x, y + i, color)
    for i in range(size):
        image.put_pixel(x + size, y + i, color)


def draw_map(image: Image, grid: Sequence[str]) -> None:
    """Outline every wall cell ('1') of the map."""
    for row, line in enumerate(grid):
        for column, cell in enumerate(line):
            if cell == "1":
                draw_square(image, column * TILE, row * TILE, WALL_COLOR, TILE)


def draw_line(image: Image, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
    """Draw a straight line between two points, both included."""
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    step_x = 1 if x1 < x2 else -1
    step_y = 1 if y1 < y2 else -1
    err = dx - dy
    while True:
        image.put_pixel(x1, y1, color)
        if x1 == x2 and y1 == y2:
            break
        doubled = err * 2
        if doubled > -dy:
            err -= dy
            x1 += step_x
        if doubled < dx:
            err += dx
            y1 += step_y


def raycast(image: Image, player: Player) -> None:
    """Draw the player's view ray."""
    x_end = player.x * TILE + RAY_LENGTH * math.cos(player.angle)
    # The ray's vertical end is measured from the player's x coordinate.
    y_end = player.x * TILE + RAY_LENGTH * math.sin(player.angle)
    draw_line(image, player.x * TILE, player.y * TILE, x_end, y_end, RAY_COLOR)


def draw_frame(image: Image, player: Player, grid: Sequence[str]) -> None:
    """Advance the player and redraw the whole scene."""
    player.move()
    image.clear(0)
    draw_square(image, player.x * TILE, player.y * TILE, PLAYER_COLOR, TILE)
    raycast(image, player)
    draw_map(image, grid)