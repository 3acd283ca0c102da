from __future__ import annotations

import logging
from typing import Optional

from PIL import Image

from ..raster.types import Canvas, create_canvas_from_buffer

logger = logging.getLogger(__name__)


def _image_mode(has_alpha_channel: bool) -> str:
    return "RGBA" if has_alpha_channel else "RGB"


def _has_alpha(img: Image.Image) -> bool:
    return img.mode in ("RGBA", "LA", "PA") or (img.mode == "P" and "transparency" in img.info)


def canvas_to_image(canvas: Canvas) -> Image.Image:
    """Return a Pillow image holding a copy of the canvas pixels."""
    canvas.validate()
    return Image.frombytes(_image_mode(canvas.has_alpha_channel), (canvas.width, canvas.height), bytes(canvas.data))


def canvas_from_image(img: Image.Image, has_alpha_channel: Optional[bool] = None) -> Canvas:
    """Build a canvas from a Pillow image.

    The alpha mode follows the image unless has_alpha_channel is given.
    """
    if has_alpha_channel is None:
        has_alpha_channel = _has_alpha(img)
    mode = _image_mode(has_alpha_channel)
    if img.mode != mode:
        logger.debug("Converting %s image to %s", img.mode, mode)
        img = img.convert(mode)
    width, height = img.size
    return create_canvas_from_buffer(img.tobytes(), width, height, has_alpha_channel)
