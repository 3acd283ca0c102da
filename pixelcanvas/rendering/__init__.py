from .imaging import canvas_from_image, canvas_to_image

__all__ = ["canvas_from_image", "canvas_to_image"]
