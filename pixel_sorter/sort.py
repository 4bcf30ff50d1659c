"""Pixel sorting by color intensity and HSV value.

Opaque pixels are pulled out of a raster, ordered from brightest red
downwards, and written back row-major into a new raster of the same
width. Cells left over at the end are padded with opaque white.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .color import rgb_to_hsv_array
from .config import InvalidInputError
from .raster import OPAQUE_ALPHA, WHITE, Raster, unpack_argb

logger = logging.getLogger("pixel_sorter")


def _validate_raster(raster: Optional[Raster]) -> None:
    if raster is None:
        raise InvalidInputError("The provided image cannot be None")
    if raster.width <= 0 or raster.height <= 0:
        raise InvalidInputError("The provided image must have non-zero dimensions")
    if np.asarray(raster.pixels).size != raster.width * raster.height:
        raise InvalidInputError(
            f"Pixel buffer holds {np.asarray(raster.pixels).size} values, "
            f"expected {raster.width}x{raster.height}"
        )


def extract_opaque(pixels: np.ndarray) -> np.ndarray:
    """Return pixels whose alpha is non-zero, keeping their original values.

    Args:
        pixels: Flat array of packed ARGB values in row-major order.

    Returns:
        New array with fully transparent pixels removed.
    """
    packed = np.asarray(pixels, dtype=np.uint32).ravel()
    return packed[(packed >> 24) != 0].copy()


def sort_pixels(pixels: np.ndarray) -> np.ndarray:
    """Sort packed pixels by red, green, blue and HSV value, all descending.

    The value key only matters when the three channels already tie, but it
    is part of the ordering contract and stays in.

    Args:
        pixels: Flat array of packed ARGB values.

    Returns:
        New array with the pixels in sorted order.
    """
    packed = np.asarray(pixels, dtype=np.uint32)
    if packed.size == 0:
        return packed.copy()

    _, r, g, b = unpack_argb(packed)
    value = rgb_to_hsv_array(np.stack([r, g, b], axis=1))[:, 2]

    # lexsort uses the last key as primary; negate for descending order
    order = np.lexsort((
        -value,
        -b.astype(np.int32),
        -g.astype(np.int32),
        -r.astype(np.int32),
    ))
    return packed[order]


def repack(pixels: np.ndarray, width: int) -> Raster:
    """Lay sorted pixels out row-major in a new white raster.

    Args:
        pixels: Sorted packed ARGB values; must not be empty.
        width: Width of the output raster.

    Returns:
        Raster of the given width whose height is just enough to hold every
        pixel. Written pixels are forced fully opaque.
    """
    count = int(np.asarray(pixels).size)
    new_height = count // width
    if count % width != 0:
        new_height += 1
    new_height = max(new_height, 1)

    out = np.full(width * new_height, WHITE, dtype=np.uint32)
    out[:count] = np.asarray(pixels, dtype=np.uint32) | OPAQUE_ALPHA
    return Raster(width, new_height, out)


def process(raster: Optional[Raster]) -> Raster:
    """Sort the opaque pixels of a raster into a new raster.

    Args:
        raster: Source raster. It is not modified.

    Returns:
        New raster with the same width. When every pixel is transparent the
        result is a blank white raster of the original size.

    Raises:
        InvalidInputError: If the raster is None or has a zero dimension.
    """
    _validate_raster(raster)

    opaque = extract_opaque(raster.pixels)
    logger.debug(
        f"Extracted {opaque.size} opaque pixels from "
        f"{raster.width}x{raster.height} raster"
    )
    if opaque.size == 0:
        logger.debug("No opaque pixels, returning blank raster")
        return Raster.blank(raster.width, raster.height)

    result = repack(sort_pixels(opaque), raster.width)
    logger.debug(f"Sorted raster size: {result.width}x{result.height}")
    return result
