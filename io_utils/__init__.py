# io_utils/__init__.py
"""
I/O helpers package for the planar image toolkit.
"""
from .image_handler import read_image, save_image, detect_is_color

__all__ = [
    "read_image",
    "save_image",
    "detect_is_color",
]
