import pytest

from pixelcanvas import Canvas, ValidationError, clone_canvas, create_canvas, create_canvas_from_buffer


def test_create_canvas_rgba():
    canvas = create_canvas(2, 4)
    assert canvas.width == 2
    assert canvas.height == 4
    assert canvas.has_alpha_channel is True
    assert canvas.channels == 4
    assert canvas.data == bytearray(32)


def test_create_canvas_rgb():
    canvas = create_canvas(3, 2, has_alpha_channel=False)
    assert canvas.channels == 3
    assert len(canvas.data) == 18
    assert not any(canvas.data)


@pytest.mark.parametrize("size", [(0, 1), (1, 0), (-2, 3)])
def test_create_canvas_rejects_empty(size):
    with pytest.raises(ValidationError):
        create_canvas(*size)


def test_create_canvas_from_buffer():
    buffer = bytes(range(24))
    canvas = create_canvas_from_buffer(buffer, 2, 3)
    assert canvas.height == 3
    assert canvas.data == bytearray(buffer)


def test_create_canvas_from_buffer_copies():
    buffer = bytearray(16)
    canvas = create_canvas_from_buffer(buffer, 2, 2)
    buffer[0] = 99
    assert canvas.data[0] == 0


def test_create_canvas_from_buffer_derives_height():
    assert create_canvas_from_buffer(bytes(32), 2).height == 4
    assert create_canvas_from_buffer(bytes(24), 2, has_alpha_channel=False).height == 4


def test_create_canvas_from_buffer_accepts_int_list():
    canvas = create_canvas_from_buffer([255, 0, 0], 1, 1, has_alpha_channel=False)
    assert canvas.data == bytearray(b"\xff\x00\x00")


def test_create_canvas_from_buffer_size_mismatch():
    with pytest.raises(ValidationError):
        create_canvas_from_buffer(bytes(30), 2, 4)
    with pytest.raises(ValidationError):
        create_canvas_from_buffer(bytes(24), 2, 4, has_alpha_channel=True)


def test_create_canvas_from_buffer_ragged_without_height():
    with pytest.raises(ValidationError):
        create_canvas_from_buffer(bytes(10), 2)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        create_canvas_from_buffer(bytes(3), 2, 2)


def test_clone_canvas_is_independent():
    canvas = create_canvas_from_buffer(bytes(range(16)), 2, 2)
    clone = clone_canvas(canvas)
    assert clone == canvas
    assert clone.data is not canvas.data
    clone.data[0] = 200
    assert canvas.data[0] == 0


def test_canvas_validate_direct():
    with pytest.raises(ValidationError):
        Canvas(width=2, height=2, has_alpha_channel=False, data=bytearray(16)).validate()


def test_canvas_contains():
    canvas = create_canvas(3, 2)
    assert canvas.contains(0, 0)
    assert canvas.contains(2, 1)
    assert not canvas.contains(3, 0)
    assert not canvas.contains(0, 2)
    assert not canvas.contains(-1, 0)
