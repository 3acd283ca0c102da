from pixelcanvas import (
    byte_position_to_coordinates,
    channel_count,
    coordinates_to_byte_position,
    create_canvas,
    iter_bytes,
    iter_pixels,
)

WIDTH = 2


def test_channel_count():
    assert channel_count(True) == 4
    assert channel_count(False) == 3


def test_coordinates_to_byte_position_rgba():
    expected = {(0, 0): 0, (1, 0): 4, (0, 1): 8, (1, 1): 12, (0, 2): 16, (1, 2): 20, (0, 3): 24, (1, 3): 28}
    for (x, y), offset in expected.items():
        assert coordinates_to_byte_position(WIDTH, True, x, y) == offset


def test_coordinates_to_byte_position_rgb():
    assert coordinates_to_byte_position(WIDTH, False, 1, 0) == 3
    assert coordinates_to_byte_position(WIDTH, False, 0, 1) == 6
    assert coordinates_to_byte_position(WIDTH, False, 1, 3) == 21


def test_byte_position_to_coordinates():
    assert byte_position_to_coordinates(WIDTH, True, 0) == (0, 0)
    assert byte_position_to_coordinates(WIDTH, True, 4) == (1, 0)
    assert byte_position_to_coordinates(WIDTH, True, 8) == (0, 1)
    assert byte_position_to_coordinates(WIDTH, True, 28) == (1, 3)
    # any byte inside a pixel maps back to that pixel
    assert byte_position_to_coordinates(WIDTH, True, 11) == (0, 1)


def test_round_trip():
    for width in (1, 3, 7):
        for has_alpha in (True, False):
            for y in range(5):
                for x in range(width):
                    offset = coordinates_to_byte_position(width, has_alpha, x, y)
                    assert byte_position_to_coordinates(width, has_alpha, offset) == (x, y)


def test_iter_pixels_row_major_once():
    canvas = create_canvas(3, 2, has_alpha_channel=False)
    visited = list(iter_pixels(canvas))
    assert visited == [
        (0, 0, 0),
        (1, 0, 3),
        (2, 0, 6),
        (0, 1, 9),
        (1, 1, 12),
        (2, 1, 15),
    ]


def test_iter_bytes_covers_buffer():
    canvas = create_canvas(2, 2)
    visited = list(iter_bytes(canvas))
    assert [offset for _, _, offset, _ in visited] == list(range(len(canvas.data)))
    assert visited[5] == (1, 0, 5, 1)
