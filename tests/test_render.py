from cubed.image import Image
from cubed.player import Key, Player
from cubed.render import (
    PLAYER_COLOR,
    RAY_COLOR,
    RAY_LENGTH,
    TILE,
    WALL_COLOR,
    draw_frame,
    draw_line,
    draw_map,
    draw_square,
    raycast,
)


def _colored(image):
    return {
        (x, y)
        for y in range(image.height)
        for x in range(image.width)
        if image.get_pixel(x, y)
    }


def test_draw_square_outline_corners():
    image = Image(40, 40)
    draw_square(image, 5, 6, 0x123456, 10)
    assert image.get_pixel(5, 6) == 0x123456
    assert image.get_pixel(5 + 9, 6 + 10) == 0x123456
    assert image.get_pixel(5 + 10, 6 + 9) == 0x123456
    assert image.get_pixel(5 + 10, 6 + 10) == 0
    assert image.get_pixel(5 + 5, 6 + 5) == 0


def test_draw_square_clipped_at_edges():
    image = Image(10, 10)
    draw_square(image, -3, -3, 0xABCDEF, 8)
    assert image.get_pixel(5, 0) == 0xABCDEF
    assert image.get_pixel(0, 0) == 0


def test_draw_line_horizontal_covers_span():
    image = Image(30, 5)
    draw_line(image, 2, 1, 20, 1, RAY_COLOR)
    assert _colored(image) == {(x, 1) for x in range(2, 21)}


def test_draw_line_direction_independent_endpoints():
    forward = Image(30, 30)
    backward = Image(30, 30)
    draw_line(forward, 1, 2, 25, 17, 0xFF)
    draw_line(backward, 25, 17, 1, 2, 0xFF)
    assert forward.get_pixel(1, 2) == backward.get_pixel(1, 2) == 0xFF
    assert forward.get_pixel(25, 17) == backward.get_pixel(25, 17) == 0xFF
    assert len(_colored(forward)) == len(_colored(backward))


def test_draw_line_single_point():
    image = Image(5, 5)
    draw_line(image, 3, 3, 3, 3, 0x00FF00)
    assert _colored(image) == {(3, 3)}


def test_draw_map_only_walls():
    image = Image(3 * TILE + 1, TILE + 1)
    draw_map(image, ["1N1"])
    assert image.get_pixel(0, 0) == WALL_COLOR
    assert image.get_pixel(2 * TILE, 0) == WALL_COLOR
    assert image.get_pixel(TILE + TILE // 2, TILE // 2) == 0


def test_raycast_horizontal_ray():
    image = Image(300, 200)
    player = Player(x=1.0, y=1.0, angle=0.0)
    raycast(image, player)
    assert image.get_pixel(TILE, TILE) == RAY_COLOR
    assert image.get_pixel(TILE + RAY_LENGTH, TILE) == RAY_COLOR
    assert image.get_pixel(TILE + RAY_LENGTH + 1, TILE) == 0


def test_raycast_end_uses_x_for_vertical():
    image = Image(300, 300)
    player = Player(x=1.0, y=2.0, angle=0.0)
    raycast(image, player)
    assert image.get_pixel(TILE, 2 * TILE) == RAY_COLOR
    assert image.get_pixel(TILE + RAY_LENGTH, TILE) == RAY_COLOR


def test_draw_frame_clears_moves_and_draws():
    image = Image(6 * TILE, 4 * TILE)
    image.clear(0x777777)
    player = Player(x=1.0, y=1.0, angle=0.0)
    player.key_press(Key.S)
    draw_frame(image, player, ["1"])
    assert player.y == 1.0 + 1
    assert image.get_pixel(image.width - 1, image.height - 1) == 0
    assert image.get_pixel(0, 0) == WALL_COLOR
    assert image.get_pixel(TILE + TILE, 2 * TILE + 5) == PLAYER_COLOR