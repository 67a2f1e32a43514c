"""
core/traversal.py

Generic traversal over an image's coordinate space.

- map_yx(im1, im2, fn, args): fn(im1, im2, x, y, args) for every (x, y), y outer, x inner
- map_cyx(im1, im2, fn, args): fn(im1, im2, x, y, c, args) for every (x, y, c), c outer, then y, then x

The extent always comes from im1. im2 may be im1 itself (in place), a freshly
allocated image (out of place) or None when the callback ignores it.
args is handed through untouched.
"""

from typing import Any, Callable, Optional

from .image import Image

PixelFn = Callable[[Image, Optional[Image], int, int, Any], None]
PixelChannelFn = Callable[[Image, Optional[Image], int, int, int, Any], None]


def map_yx(im1: Image, im2: Optional[Image], fn: PixelFn, args: Any = None) -> None:
    for y in range(im1.h):
        for x in range(im1.w):
            fn(im1, im2, x, y, args)


def map_cyx(im1: Image, im2: Optional[Image], fn: PixelChannelFn, args: Any = None) -> None:
    for c in range(im1.c):
        for y in range(im1.h):
            for x in range(im1.w):
                fn(im1, im2, x, y, c, args)
