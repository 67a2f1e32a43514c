"""
core/image.py

Planar image container.

An Image holds w, h, c and a flat float32 store of w*h*c samples laid out
channel-major, then row-major within a channel:

    offset(x, y, c) = c*w*h + y*w + x

Samples are nominally in [0, 1] for color data but nothing here enforces it.

Provided:
- Image (dataclass) with from_array / to_array helpers
- make_image(w, h, c) -> zero-filled Image
"""

from dataclasses import dataclass
import numpy as np

SAMPLE_DTYPE = np.float32


@dataclass
class Image:
    w: int
    h: int
    c: int
    data: np.ndarray

    def __post_init__(self):
        if self.w <= 0 or self.h <= 0 or self.c <= 0:
            raise ValueError(f"Image dimensions must be positive, got w={self.w}, h={self.h}, c={self.c}.")
        if self.data.ndim != 1 or self.data.size != self.w * self.h * self.c:
            raise ValueError(
                f"Image store must be a flat array of {self.w * self.h * self.c} samples, "
                f"got shape {self.data.shape}."
            )
        if self.data.dtype != SAMPLE_DTYPE:
            raise ValueError(f"Image store must hold {np.dtype(SAMPLE_DTYPE).name} samples, got {self.data.dtype}.")

    @property
    def shape(self):
        return (self.w, self.h, self.c)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Image":
        """
        Build an Image from an HxW or HxWxC array (the interleaved layout numpy/Pillow use).
        The samples are copied into planar order and cast to float32; no rescaling is done.
        """
        a = np.asarray(arr)
        if a.ndim == 2:
            a = a[:, :, None]
        if a.ndim != 3:
            raise ValueError("Image.from_array expects an HxW or HxWxC array.")
        h, w, c = a.shape
        planar = np.transpose(a, (2, 0, 1)).astype(SAMPLE_DTYPE).ravel()
        return cls(w, h, c, planar)

    def to_array(self) -> np.ndarray:
        """Return an HxWxC float32 copy of the samples."""
        planar = self.data.reshape(self.c, self.h, self.w)
        return np.transpose(planar, (1, 2, 0)).copy()


def make_image(w: int, h: int, c: int) -> Image:
    """Allocate a zero-filled w x h x c image."""
    if w <= 0 or h <= 0 or c <= 0:
        raise ValueError(f"Image dimensions must be positive, got w={w}, h={h}, c={c}.")
    return Image(w, h, c, np.zeros(w * h * c, dtype=SAMPLE_DTYPE))
