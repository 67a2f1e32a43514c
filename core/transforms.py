"""
core/transforms.py

Per-coordinate transforms and the public operations that drive them.

Each f* callback matches one of the traversal shapes in core.traversal:
  - fcopy_image, fclamp_image                        -> map_cyx (per channel)
  - frgb_to_grayscale, fshift_image, fscale_image,
    frgb_to_hsv, fhsv_to_rgb                        -> map_yx (per pixel)

Public API:
- copy_image(im) -> Image                  new image, independent store
- rgb_to_grayscale(im) -> Image            new 1-channel image, needs c == 3
- shift_image(im, c, v)                    in place, channel c += v
- scale_image(im, c, v)                    in place, channel c *= v
- clamp_image(im)                          in place, every sample into [CLAMP_MIN, CLAMP_MAX]
- rgb_to_hsv(im)                           in place, (R, G, B) -> (H, S, V), needs c == 3
- hsv_to_rgb(im, warn_out_of_range=False)  in place inverse, needs c == 3

Channel-count checks run before any sample is touched, so a failed call never
leaves a half-converted image behind.
"""

from dataclasses import dataclass
import logging
import warnings
from typing import Optional

import numpy as np

from .image import Image, make_image
from .indexing import get_pixel, set_pixel
from .traversal import map_yx, map_cyx
from .color_processing import luma, rgb_to_hsv_pixel, hsv_to_rgb_pixel

logger = logging.getLogger(__name__)

CLAMP_MIN = 0.0
CLAMP_MAX = 1.0


class InvalidChannelCountError(ValueError):
    """Raised when an operation needs a specific number of channels."""

    def __init__(self, operation: str, expected: int, actual: int):
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(f"{operation} expects a {expected}-channel image, got {actual} channels.")


@dataclass(frozen=True)
class ChannelValueArgs:
    """Parameters for the single-channel adjustments (shift, scale)."""
    c: int
    v: float


def _require_channels(im: Image, expected: int, operation: str) -> None:
    if im.c != expected:
        raise InvalidChannelCountError(operation, expected, im.c)


# --- per-coordinate callbacks ---
def fcopy_image(im1: Image, im2: Image, x: int, y: int, c: int, args=None) -> None:
    set_pixel(im2, x, y, c, get_pixel(im1, x, y, c))


def frgb_to_grayscale(im1: Image, im2: Image, x: int, y: int, args=None) -> None:
    r = get_pixel(im1, x, y, 0)
    g = get_pixel(im1, x, y, 1)
    b = get_pixel(im1, x, y, 2)
    set_pixel(im2, x, y, 0, luma(r, g, b))


def fshift_image(im1: Image, im2: Optional[Image], x: int, y: int, args: ChannelValueArgs) -> None:
    set_pixel(im1, x, y, args.c, get_pixel(im1, x, y, args.c) + args.v)


def fscale_image(im1: Image, im2: Optional[Image], x: int, y: int, args: ChannelValueArgs) -> None:
    set_pixel(im1, x, y, args.c, get_pixel(im1, x, y, args.c) * args.v)


def fclamp_image(im1: Image, im2: Optional[Image], x: int, y: int, c: int, args=None) -> None:
    v = get_pixel(im1, x, y, c)
    if v > CLAMP_MAX:
        v = CLAMP_MAX
    if v < CLAMP_MIN:
        v = CLAMP_MIN
    set_pixel(im1, x, y, c, v)


def frgb_to_hsv(im1: Image, im2: Optional[Image], x: int, y: int, args=None) -> None:
    h, s, v = rgb_to_hsv_pixel(get_pixel(im1, x, y, 0), get_pixel(im1, x, y, 1), get_pixel(im1, x, y, 2))
    set_pixel(im1, x, y, 0, h)
    set_pixel(im1, x, y, 1, s)
    set_pixel(im1, x, y, 2, v)


def fhsv_to_rgb(im1: Image, im2: Optional[Image], x: int, y: int, args=None) -> None:
    r, g, b = hsv_to_rgb_pixel(get_pixel(im1, x, y, 0), get_pixel(im1, x, y, 1), get_pixel(im1, x, y, 2))
    set_pixel(im1, x, y, 0, r)
    set_pixel(im1, x, y, 1, g)
    set_pixel(im1, x, y, 2, b)


# --- public APIs ---
def copy_image(im: Image) -> Image:
    logger.debug("copy_image on %dx%dx%d image", im.w, im.h, im.c)
    copy = make_image(im.w, im.h, im.c)
    map_cyx(im, copy, fcopy_image)
    return copy


def rgb_to_grayscale(im: Image) -> Image:
    """
    Return a new w x h x 1 image holding the BT.601 luma of an RGB image.
    The input is left untouched. Raises InvalidChannelCountError unless im.c == 3.
    """
    _require_channels(im, 3, "rgb_to_grayscale")
    logger.debug("rgb_to_grayscale on %dx%d image", im.w, im.h)
    gray = make_image(im.w, im.h, 1)
    map_yx(im, gray, frgb_to_grayscale)
    return gray


def shift_image(im: Image, c: int, v: float) -> None:
    """
    Add v to every sample of channel c, in place.
    Other channels are not written. A channel index outside the image changes nothing.
    """
    logger.debug("shift_image channel=%d v=%s", c, v)
    map_yx(im, None, fshift_image, ChannelValueArgs(c, v))


def scale_image(im: Image, c: int, v: float) -> None:
    """Multiply every sample of channel c by v, in place."""
    logger.debug("scale_image channel=%d v=%s", c, v)
    map_yx(im, None, fscale_image, ChannelValueArgs(c, v))


def clamp_image(im: Image) -> None:
    logger.debug("clamp_image on %dx%dx%d image to [%s, %s]", im.w, im.h, im.c, CLAMP_MIN, CLAMP_MAX)
    map_cyx(im, None, fclamp_image)


def rgb_to_hsv(im: Image) -> None:
    """
    Convert an RGB image to HSV in place; channel order becomes (H, S, V).
    H is a fraction of a full turn in [0, 1). Raises InvalidChannelCountError unless im.c == 3.
    """
    _require_channels(im, 3, "rgb_to_hsv")
    logger.debug("rgb_to_hsv on %dx%d image", im.w, im.h)
    map_yx(im, None, frgb_to_hsv)


def hsv_to_rgb(im: Image, warn_out_of_range: bool = False) -> None:
    """
    Convert an HSV image back to RGB in place.

    Hues outside [0, 1) are converted as-is (no wrapping, no clamping; see
    core.color_processing.hsv_to_rgb_pixel). With warn_out_of_range=True a
    RuntimeWarning is issued when any such hue is present.
    Raises InvalidChannelCountError unless im.c == 3.
    """
    _require_channels(im, 3, "hsv_to_rgb")
    if warn_out_of_range:
        hue = im.data[: im.w * im.h]
        n_out = int(np.count_nonzero((hue < 0.0) | (hue >= 1.0)))
        if n_out:
            warnings.warn(
                f"hsv_to_rgb received {n_out} hue value(s) outside [0, 1); "
                "they are converted without wrapping.",
                RuntimeWarning,
            )
    logger.debug("hsv_to_rgb on %dx%d image", im.w, im.h)
    map_yx(im, None, fhsv_to_rgb)
