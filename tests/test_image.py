import pytest

from cubed.image import Image

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_new_image_geometry(size):
    width, height = size
    image = Image(width, height)
    assert image.width == width
    assert image.height == height
    assert image.bits_per_pixel == 32
    assert image.line_length == width * 4
    assert len(image.data) == width * height * 4
    assert all(byte == 0 for byte in image.data)


@pytest.mark.parametrize("size", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_fill_with_color_map_reads_back(size):
    width, height = size
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            image.put_pixel(x, y, _color_map(x, y, width, height))
    for y in range(0, height, 7):
        for x in range(0, width, 5):
            assert image.get_pixel(x, y) == _color_map(x, y, width, height)


def test_pixel_byte_layout_is_bgr():
    image = Image(4, 2)
    image.put_pixel(1, 1, 0xFF99FF)
    offset = 1 * image.line_length + 1 * 4
    assert image.data[offset:offset + 4] == bytes([0xFF, 0x99, 0xFF, 0x00])


def test_color_upper_bits_are_dropped():
    image = Image(2, 2)
    image.put_pixel(0, 0, 0x7F00FFFF)
    assert image.get_pixel(0, 0) == 0x00FFFF


@pytest.mark.parametrize("coords", [(-1, 0), (0, -1), (IM1_SX, 0), (0, IM1_SY)])
def test_out_of_bounds_put_is_ignored(coords):
    image = Image(IM1_SX, IM1_SY)
    image.put_pixel(*coords, 0xFFFFFF)
    assert image.data == bytearray(IM1_SX * IM1_SY * 4)


def test_float_coordinates_are_truncated():
    image = Image(3, 3)
    image.put_pixel(1.7, 2.2, 0x00FFFF)
    assert image.get_pixel(1, 2) == 0x00FFFF


@pytest.mark.parametrize("coords", [(-1, 0), (5, 0), (0, 5)])
def test_get_pixel_out_of_bounds_raises(coords):
    image = Image(5, 5)
    with pytest.raises(IndexError):
        image.get_pixel(*coords)


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-3, 4)])
def test_invalid_size_raises(size):
    with pytest.raises(ValueError):
        Image(*size)


def test_clear_sets_every_pixel():
    image = Image(6, 4)
    image.put_pixel(2, 2, 0xFF0000)
    image.clear(0xFAF0E6)
    assert {image.get_pixel(x, y) for x in range(6) for y in range(4)} == {0xFAF0E6}
    image.clear()
    assert image.data == bytearray(6 * 4 * 4)


def test_to_rgb_bytes_order_and_length():
    image = Image(3, 2)
    image.put_pixel(0, 0, 0x112233)
    image.put_pixel(2, 1, 0xE6E6FA)
    rgb = image.to_rgb_bytes()
    assert len(rgb) == 3 * 2 * 3
    assert rgb[0:3] == bytes([0x11, 0x22, 0x33])
    last = (1 * 3 + 2) * 3
    assert rgb[last:last + 3] == bytes([0xE6, 0xE6, 0xFA])
    assert rgb[3:6] == bytes(3)