from __future__ import annotations

CHANNEL_RED = 0
CHANNEL_GREEN = 1
CHANNEL_BLUE = 2
CHANNEL_ALPHA = 3

RGB = 3
RGBA = 4

OPAQUE = 0xFF
TRANSPARENT = 0x00

DEFAULT_HAS_ALPHA_CHANNEL = True
