from __future__ import annotations

import logging
from typing import List, Sequence

from ..errors import CoordinateRangeError, ValidationError
from .blending import blend_color
from .colors import is_equal_color
from .constants import CHANNEL_ALPHA, CHANNEL_BLUE, CHANNEL_RED, OPAQUE, RGB
from .coordinates import coordinates_to_byte_position, iter_pixels
from .types import Canvas, clone_canvas

logger = logging.getLogger(__name__)


def _require_inside(canvas: Canvas, x: int, y: int) -> None:
    if not canvas.contains(x, y):
        raise CoordinateRangeError(
            f"Pixel ({x}, {y}) is outside the {canvas.width}x{canvas.height} canvas"
        )


def _require_color(color: Sequence[int]) -> None:
    if len(color) < RGB:
        raise ValidationError(f"Color {list(color)!r} needs at least {RGB} components")


def _byte_position(canvas: Canvas, x: int, y: int) -> int:
    return coordinates_to_byte_position(canvas.width, canvas.has_alpha_channel, x, y)


def _read_rgba(canvas: Canvas, pos: int) -> List[int]:
    color = list(canvas.data[pos : pos + RGB])
    color.append(canvas.data[pos + CHANNEL_ALPHA] if canvas.has_alpha_channel else OPAQUE)
    return color


def _write_rgb(canvas: Canvas, pos: int, color: Sequence[int]) -> None:
    canvas.data[pos + CHANNEL_RED : pos + CHANNEL_BLUE + 1] = bytes(color[:RGB])


def get_color(canvas: Canvas, x: int, y: int) -> List[int]:
    """Return [r, g, b] or [r, g, b, a] at (x, y).

    Raises CoordinateRangeError outside the canvas.
    """
    _require_inside(canvas, x, y)
    pos = _byte_position(canvas, x, y)
    return list(canvas.data[pos : pos + canvas.channels])


def draw_pixel(canvas: Canvas, x: int, y: int, color: Sequence[int]) -> Canvas:
    """Set one pixel.

    Alpha is written only when the canvas has an alpha channel and color has
    four components. Raises CoordinateRangeError outside the canvas and
    ValidationError for a color with fewer than three components.
    """
    _require_inside(canvas, x, y)
    _require_color(color)
    working = clone_canvas(canvas)
    pos = _byte_position(canvas, x, y)
    _write_rgb(working, pos, color)
    if canvas.has_alpha_channel and len(color) > CHANNEL_ALPHA:
        working.data[pos + CHANNEL_ALPHA] = color[CHANNEL_ALPHA]
    return working


def draw_rect(canvas: Canvas, x: int, y: int, width: int, height: int, color: Sequence[int]) -> Canvas:
    """Fill [x, x + width) x [y, y + height), clipped to the canvas.

    Alpha is set to color's alpha, or opaque for a 3-component color.
    """
    _require_color(color)
    working = clone_canvas(canvas)
    left, right = max(x, 0), min(x + width, canvas.width)
    top, bottom = max(y, 0), min(y + height, canvas.height)
    alpha = color[CHANNEL_ALPHA] if len(color) > CHANNEL_ALPHA else OPAQUE
    for j in range(top, bottom):
        for i in range(left, right):
            pos = _byte_position(canvas, i, j)
            _write_rgb(working, pos, color)
            if canvas.has_alpha_channel:
                working.data[pos + CHANNEL_ALPHA] = alpha
    drawn = max(0, right - left) * max(0, bottom - top)
    clipped = max(0, width) * max(0, height) - drawn
    if clipped:
        logger.debug("draw_rect clipped %d of %d pixels", clipped, clipped + drawn)
    return working


def draw_canvas(destination: Canvas, source: Canvas, offset_x: int, offset_y: int) -> Canvas:
    """Paint source over destination with its top-left corner at the offset.

    Pixels landing outside the destination are skipped. Colors are
    composited source-over; a missing alpha channel counts as opaque. The
    destination alpha is updated only when both canvases carry alpha.
    """
    working = clone_canvas(destination)
    write_alpha = destination.has_alpha_channel and source.has_alpha_channel
    clipped = 0
    for x, y, src_pos in iter_pixels(source):
        dest_x, dest_y = x + offset_x, y + offset_y
        if not destination.contains(dest_x, dest_y):
            clipped += 1
            continue
        dest_pos = _byte_position(destination, dest_x, dest_y)
        blended = blend_color(_read_rgba(destination, dest_pos), _read_rgba(source, src_pos))
        _write_rgb(working, dest_pos, blended)
        if write_alpha:
            working.data[dest_pos + CHANNEL_ALPHA] = blended[CHANNEL_ALPHA]
    if clipped:
        logger.debug("draw_canvas clipped %d of %d source pixels", clipped, source.width * source.height)
    return working


def replace_color(canvas: Canvas, replacee: Sequence[int], replacer: Sequence[int]) -> Canvas:
    """Recolor every pixel whose RGB equals replacee; alpha is kept."""
    _require_color(replacee)
    _require_color(replacer)
    working = clone_canvas(canvas)
    for _x, _y, pos in iter_pixels(canvas):
        if is_equal_color(canvas.data[pos : pos + RGB], replacee):
            _write_rgb(working, pos, replacer)
    return working
