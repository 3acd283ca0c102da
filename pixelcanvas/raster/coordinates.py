from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Tuple

from .constants import RGB, RGBA

if TYPE_CHECKING:
    from .types import Canvas


def channel_count(has_alpha_channel: bool) -> int:
    """Return bytes per pixel for the alpha mode."""
    return RGBA if has_alpha_channel else RGB


get_channel_count = channel_count


def coordinates_to_byte_position(width: int, has_alpha_channel: bool, x: int, y: int) -> int:
    """Return the offset of the pixel's first byte (red) in a row-major buffer.

    Coordinates are not checked; out-of-range values map outside the buffer.
    """
    return (y * width + x) * channel_count(has_alpha_channel)


def byte_position_to_coordinates(width: int, has_alpha_channel: bool, offset: int) -> Tuple[int, int]:
    """Return the (x, y) pixel that owns the byte at offset."""
    pixel_index = offset // channel_count(has_alpha_channel)
    return pixel_index % width, pixel_index // width


def iter_pixels(canvas: Canvas) -> Iterator[Tuple[int, int, int]]:
    """Yield (x, y, byte_offset) for every pixel, rows first."""
    channels = canvas.channels
    offset = 0
    for y in range(canvas.height):
        for x in range(canvas.width):
            yield x, y, offset
            offset += channels


def iter_bytes(canvas: Canvas) -> Iterator[Tuple[int, int, int, int]]:
    """Yield (x, y, byte_offset, channel) for every byte in buffer order."""
    for x, y, offset in iter_pixels(canvas):
        for channel in range(canvas.channels):
            yield x, y, offset + channel, channel
