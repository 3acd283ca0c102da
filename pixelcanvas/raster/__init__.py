from .blending import blend_alpha, blend_channel, blend_color
from .colors import hex_color_to_array, is_equal_color, to_rgba
from .constants import (
    CHANNEL_ALPHA,
    CHANNEL_BLUE,
    CHANNEL_GREEN,
    CHANNEL_RED,
    DEFAULT_HAS_ALPHA_CHANNEL,
    OPAQUE,
    RGB,
    RGBA,
    TRANSPARENT,
)
from .coordinates import (
    byte_position_to_coordinates,
    channel_count,
    coordinates_to_byte_position,
    get_channel_count,
    iter_bytes,
    iter_pixels,
)
from .drawing import draw_canvas, draw_pixel, draw_rect, get_color, replace_color
from .types import Canvas, clone_canvas, create_canvas, create_canvas_from_buffer

__all__ = [
    "blend_alpha",
    "blend_channel",
    "blend_color",
    "byte_position_to_coordinates",
    "Canvas",
    "CHANNEL_ALPHA",
    "CHANNEL_BLUE",
    "CHANNEL_GREEN",
    "CHANNEL_RED",
    "channel_count",
    "clone_canvas",
    "coordinates_to_byte_position",
    "create_canvas",
    "create_canvas_from_buffer",
    "DEFAULT_HAS_ALPHA_CHANNEL",
    "draw_canvas",
    "draw_pixel",
    "draw_rect",
    "get_channel_count",
    "get_color",
    "hex_color_to_array",
    "is_equal_color",
    "iter_bytes",
    "iter_pixels",
    "OPAQUE",
    "replace_color",
    "RGB",
    "RGBA",
    "to_rgba",
    "TRANSPARENT",
]
