'''
Pixel addressing helpers.

Functions:
- clamp_padding: clamp (x, y, c) into the image extent and report whether it was already inside
- pixel_index: flat planar offset, no bounds checking
- get_pixel: edge-replicating read (out-of-range reads return the nearest edge sample)
- set_pixel: exact write (out-of-range writes are dropped, never redirected)
'''

from typing import Tuple

from .image import Image


def clamp_padding(im: Image, x: int, y: int, c: int) -> Tuple[int, int, int, bool]:
    """
    Clamp each axis independently to [0, extent-1].
    Returns (x', y', c', in_bounds) where in_bounds is True only if nothing was clamped.
    """
    xc = min(max(x, 0), im.w - 1)
    yc = min(max(y, 0), im.h - 1)
    cc = min(max(c, 0), im.c - 1)
    return xc, yc, cc, (xc == x and yc == y and cc == c)


def pixel_index(im: Image, x: int, y: int, c: int) -> int:
    return c * im.w * im.h + y * im.w + x


def get_pixel(im: Image, x: int, y: int, c: int) -> float:
    xc, yc, cc, _ = clamp_padding(im, x, y, c)
    return float(im.data[pixel_index(im, xc, yc, cc)])


def set_pixel(im: Image, x: int, y: int, c: int, v: float) -> None:
    """Write v at (x, y, c) if the coordinate is inside the image; otherwise do nothing."""
    _, _, _, in_bounds = clamp_padding(im, x, y, c)
    if in_bounds:
        im.data[pixel_index(im, x, y, c)] = v
