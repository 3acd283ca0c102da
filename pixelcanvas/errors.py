from __future__ import annotations


class CanvasError(Exception):
    """Base class for errors raised by pixelcanvas."""


class ValidationError(CanvasError, ValueError):
    """Buffer size or dimensions do not describe a valid canvas."""


class ParseError(CanvasError, ValueError):
    """A color string could not be parsed."""


class CoordinateRangeError(CanvasError, IndexError):
    """A single-pixel access fell outside the canvas."""
