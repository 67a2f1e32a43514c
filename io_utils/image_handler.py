# io/image_handler.py
"""
Image read/write helpers using Pillow.

Functions:
- read_image(path) -> (Image, meta), planar float32 samples scaled to [0, 1]
- save_image(path, image) -> writes a 1-channel (L) or 3-channel (RGB) image
- detect_is_color(image) -> bool
"""

import logging
from typing import Tuple

from PIL import Image as PILImage
import pillow_avif  # noqa: F401  (registers the AVIF plugin with Pillow)
import numpy as np

from core.image import Image

logger = logging.getLogger(__name__)

MAX_8BIT = 255.0


def read_image(path: str) -> Tuple[Image, dict]:
    """
    Read an image from `path` and return (image, meta).
    - Color files become 3-channel images, everything else 1-channel.
    - Samples are divided by 255 so 8-bit data lands in [0, 1].
    - Meta contains mode and size. If the file has alpha, meta includes 'has_alpha'
      and meta['alpha'] as a separate HxW uint8 array; alpha is not part of the image.
    """
    img = PILImage.open(path)
    mode = img.mode
    logger.debug("read_image %s (mode %s, size %s)", path, mode, img.size)
    if mode in ("RGBA", "LA") or ("transparency" in img.info):
        img = img.convert("RGBA")
        arr = np.asarray(img)
        meta = {"mode": "RGBA", "size": img.size, "has_alpha": True}
        meta["alpha"] = arr[..., 3]
        return Image.from_array(arr[..., :3] / MAX_8BIT), meta
    # convert to RGB for color images, L for grayscale
    if mode.startswith("RGB") or mode in ("P",) or path.lower().endswith(".avif"):
        img = img.convert("RGB")
        meta = {"mode": "RGB", "size": img.size, "has_alpha": False}
    else:
        img = img.convert("L")
        meta = {"mode": "L", "size": img.size, "has_alpha": False}
    return Image.from_array(np.asarray(img) / MAX_8BIT), meta


def save_image(path: str, image: Image):
    """
    Save an image to `path`. Accepts 1-channel (grayscale) or 3-channel (RGB) images.
    Samples are clipped to [0, 1] and scaled to uint8.
    """
    if image.c == 1:
        mode = "L"
    elif image.c == 3:
        mode = "RGB"
    else:
        raise ValueError(f"save_image expects a 1- or 3-channel image, got {image.c} channels.")

    arr = np.rint(np.clip(image.to_array(), 0.0, 1.0) * MAX_8BIT).astype(np.uint8)
    if mode == "L":
        arr = arr[..., 0]

    logger.debug("save_image %s (mode %s, %dx%d)", path, mode, image.w, image.h)
    PILImage.fromarray(arr).save(path)


def detect_is_color(image: Image) -> bool:
    return image.c == 3
