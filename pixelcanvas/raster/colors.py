from __future__ import annotations

import re
from typing import List, Sequence

from ..errors import ParseError
from .constants import CHANNEL_ALPHA, CHANNEL_BLUE, CHANNEL_GREEN, CHANNEL_RED, OPAQUE, RGBA

_HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")


def hex_color_to_array(value: str) -> List[int]:
    """Parse '#RRGGBB' into an opaque [r, g, b, 255] color."""
    if not isinstance(value, str) or not _HEX_COLOR_RE.fullmatch(value):
        raise ParseError(f"Invalid hex color {value!r}, expected '#RRGGBB'")
    return [int(value[i : i + 2], 16) for i in (1, 3, 5)] + [OPAQUE]


def is_equal_color(color1: Sequence[int], color2: Sequence[int]) -> bool:
    """Compare the red, green and blue channels; alpha is ignored."""
    return (
        color1[CHANNEL_RED] == color2[CHANNEL_RED]
        and color1[CHANNEL_GREEN] == color2[CHANNEL_GREEN]
        and color1[CHANNEL_BLUE] == color2[CHANNEL_BLUE]
    )


def to_rgba(color: Sequence[int]) -> List[int]:
    """Return a 4-channel copy of color, defaulting alpha to opaque."""
    rgba = list(color[:RGBA])
    if len(rgba) == CHANNEL_ALPHA:
        rgba.append(OPAQUE)
    return rgba
