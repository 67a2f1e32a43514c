"""
core/color_processing.py

Scalar color formulas used by the per-pixel transforms.

API:
- three_way_max(a, b, c) / three_way_min(a, b, c)
- luma(r, g, b) -> float  (BT.601 weights R_WEIGHT, G_WEIGHT, B_WEIGHT)
- rgb_to_hsv_pixel(r, g, b) -> (h, s, v)
- hsv_to_rgb_pixel(h, s, v) -> (r, g, b)

All channels are floats in the image's nominal [0, 1] range; H is a fraction of
a full turn in [0, 1). Inputs outside [0, 1] are not rejected.
"""

import math
from typing import Tuple

R_WEIGHT = 0.299
G_WEIGHT = 0.587
B_WEIGHT = 0.114


def three_way_max(a: float, b: float, c: float) -> float:
    return (a if a > c else c) if a > b else (b if b > c else c)


def three_way_min(a: float, b: float, c: float) -> float:
    return (a if a < c else c) if a < b else (b if b < c else c)


def luma(r: float, g: float, b: float) -> float:
    return r * R_WEIGHT + g * G_WEIGHT + b * B_WEIGHT


def rgb_to_hsv_pixel(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert one RGB triple to HSV.

    V is the largest channel and chroma the spread between largest and smallest.
    Saturation is 0 for black (V == 0) and hue is 0 for achromatic pixels
    (chroma == 0), so neither case divides by zero.
    When two channels tie for the maximum, red wins over green and green over blue.
    """
    v = three_way_max(r, g, b)
    chroma = v - three_way_min(r, g, b)
    s = 0.0 if v == 0 else chroma / v

    if chroma == 0:
        h = 0.0
    elif v == r:
        h = (g - b) / chroma
    elif v == g:
        h = (b - r) / chroma + 2
    else:
        h = (r - g) / chroma + 4

    # h is in (-1, 5); map it onto [0, 1)
    if h < 0:
        return h / 6 + 1, s, v
    return h / 6, s, v


def hsv_to_rgb_pixel(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert one HSV triple to RGB.

    The hue is split into six 60 degree sectors. The hue is neither wrapped nor
    clamped: any sector index outside [0, 5) falls through to the last sector,
    so callers feeding hues outside [0, 1) get that sector's mix rather than a
    wrapped color.
    """
    chroma = v * s
    sector = 360 * h / 60
    x = chroma * (1 - abs(math.fmod(sector, 2) - 1))

    if 0 <= sector < 1:
        r, g, b = chroma, x, 0.0
    elif 1 <= sector < 2:
        r, g, b = x, chroma, 0.0
    elif 2 <= sector < 3:
        r, g, b = 0.0, chroma, x
    elif 3 <= sector < 4:
        r, g, b = 0.0, x, chroma
    elif 4 <= sector < 5:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    m = v - chroma
    return r + m, g + m, b + m
