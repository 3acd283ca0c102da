from .errors import CanvasError, CoordinateRangeError, ParseError, ValidationError
from .raster import *  # noqa: F401,F403
from .raster import __all__ as _raster_all
from .rendering import canvas_from_image, canvas_to_image

__version__ = "0.1.0"

__all__ = [
    "CanvasError",
    "canvas_from_image",
    "canvas_to_image",
    "CoordinateRangeError",
    "ParseError",
    "ValidationError",
] + list(_raster_all)
