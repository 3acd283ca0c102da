from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from ..errors import ValidationError
from .constants import DEFAULT_HAS_ALPHA_CHANNEL, TRANSPARENT
from .coordinates import channel_count

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True)
class Canvas:
    """Row-major packed RGB/RGBA pixel buffer.

    Treat instances as values: the drawing functions never write to ``data``,
    they return a new canvas instead.
    """

    width: int
    height: int
    has_alpha_channel: bool
    data: bytearray

    @property
    def channels(self) -> int:
        return channel_count(self.has_alpha_channel)

    def validate(self) -> None:
        """Check dimensions against the buffer length."""
        if self.width <= 0 or self.height <= 0:
            raise ValidationError(f"Canvas size must be positive, got {self.width}x{self.height}")
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValidationError(
                f"Buffer length {len(self.data)} does not match "
                f"{self.width}x{self.height}x{self.channels} = {expected}"
            )

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


def create_canvas(width: int, height: int, has_alpha_channel: bool = DEFAULT_HAS_ALPHA_CHANNEL) -> Canvas:
    """Create a zero-filled canvas."""
    canvas = Canvas(
        width=width,
        height=height,
        has_alpha_channel=has_alpha_channel,
        data=bytearray([TRANSPARENT]) * (max(0, width * height) * channel_count(has_alpha_channel)),
    )
    canvas.validate()
    logger.debug("Created %dx%d canvas (alpha=%s)", width, height, has_alpha_channel)
    return canvas


def create_canvas_from_buffer(
    buffer: Buffer,
    width: int,
    height: Optional[int] = None,
    has_alpha_channel: bool = DEFAULT_HAS_ALPHA_CHANNEL,
) -> Canvas:
    """Build a canvas from a copy of an external byte buffer.

    When height is omitted it is derived from the buffer length, the width
    and the channel count of the requested alpha mode, so an RGB buffer
    divides by 3 channels rather than by a fixed 4.
    """
    data = bytearray(buffer)
    if height is None:
        if width <= 0:
            raise ValidationError(f"Canvas width must be positive, got {width}")
        row_size = width * channel_count(has_alpha_channel)
        if len(data) % row_size != 0:
            raise ValidationError(f"Buffer length {len(data)} is not a multiple of the row size {row_size}")
        height = len(data) // row_size
    canvas = Canvas(width=width, height=height, has_alpha_channel=has_alpha_channel, data=data)
    canvas.validate()
    return canvas


def clone_canvas(canvas: Canvas) -> Canvas:
    """Return a canvas with the same pixels and its own buffer."""
    return create_canvas_from_buffer(canvas.data, canvas.width, canvas.height, canvas.has_alpha_channel)
