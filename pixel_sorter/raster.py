"""Packed ARGB raster used as the engine's input and output."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image

OPAQUE_ALPHA = np.uint32(0xFF000000)
WHITE = np.uint32(0xFFFFFFFF)


def pack_argb(
    a: np.ndarray, r: np.ndarray, g: np.ndarray, b: np.ndarray
) -> np.ndarray:
    """Pack channel arrays into 32-bit ARGB values."""
    return (
        (np.asarray(a, dtype=np.uint32) << 24)
        | (np.asarray(r, dtype=np.uint32) << 16)
        | (np.asarray(g, dtype=np.uint32) << 8)
        | np.asarray(b, dtype=np.uint32)
    )


def unpack_argb(
    pixels: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Split packed ARGB values into (a, r, g, b) uint8 arrays."""
    packed = np.asarray(pixels, dtype=np.uint32)
    a = ((packed >> 24) & 0xFF).astype(np.uint8)
    r = ((packed >> 16) & 0xFF).astype(np.uint8)
    g = ((packed >> 8) & 0xFF).astype(np.uint8)
    b = (packed & 0xFF).astype(np.uint8)
    return a, r, g, b


@dataclass
class Raster:
    """A width x height grid of packed ARGB pixels stored row-major.

    ``pixels`` is a flat ``uint32`` array of length ``width * height``.
    """

    width: int
    height: int
    pixels: np.ndarray

    @classmethod
    def blank(cls, width: int, height: int) -> "Raster":
        """Create a raster filled with opaque white."""
        return cls(width, height, np.full(width * height, WHITE, dtype=np.uint32))

    @classmethod
    def from_argb(cls, width: int, height: int, values) -> "Raster":
        """Build a raster from a sequence of (a, r, g, b) tuples."""
        arr = np.asarray(list(values), dtype=np.uint32).reshape(-1, 4)
        pixels = pack_argb(arr[:, 0], arr[:, 1], arr[:, 2], arr[:, 3])
        return cls(width, height, pixels)

    @classmethod
    def from_image(cls, img: Image.Image) -> "Raster":
        """Convert a Pillow image to a raster.

        Args:
            img: Image in any mode; converted to RGBA first.

        Returns:
            Raster with the same dimensions as the image.
        """
        width, height = img.size
        arr = np.array(img.convert("RGBA"), dtype=np.uint8).reshape(-1, 4)
        pixels = pack_argb(arr[:, 3], arr[:, 0], arr[:, 1], arr[:, 2])
        return cls(width, height, pixels)

    def to_image(self) -> Image.Image:
        """Convert the raster to an RGBA Pillow image."""
        a, r, g, b = unpack_argb(self.pixels)
        arr = np.stack([r, g, b, a], axis=1).reshape(self.height, self.width, 4)
        return Image.fromarray(arr)

    def to_argb(self) -> list:
        """Return pixels as a list of (a, r, g, b) tuples in row-major order."""
        a, r, g, b = unpack_argb(self.pixels)
        return [
            (int(pa), int(pr), int(pg), int(pb))
            for pa, pr, pg, pb in zip(a, r, g, b)
        ]
