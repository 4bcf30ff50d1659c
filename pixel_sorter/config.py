"""Configuration and validation for pixel sorter."""
from __future__ import annotations

from dataclasses import dataclass


class PixelSorterError(Exception):
    """Base exception for pixel sorter errors."""

    pass


class InvalidInputError(PixelSorterError):
    """Raised when a raster is missing or has a zero dimension."""

    pass


class DecodeError(PixelSorterError):
    """Raised when an image file cannot be read or decoded."""

    pass


class EncodeError(PixelSorterError):
    """Raised when a raster cannot be encoded or written."""

    pass


DEFAULT_OUTPUT_NAME = "sorted-image.png"
MAX_DIMENSION = 10000


@dataclass
class Config:
    """Configuration for a sort run."""

    input_path: str = ""
    output_path: str = ""
    # File name used when output_path is a directory
    output_name: str = DEFAULT_OUTPUT_NAME
    preview: bool = False
    timing: bool = False
    gui: bool = False
    max_dimension: int = MAX_DIMENSION


def validate_image_dimensions(
    width: int, height: int, limit: int = MAX_DIMENSION
) -> None:
    """Validate image dimensions are within acceptable bounds.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        limit: Largest accepted size on either axis.

    Raises:
        InvalidInputError: If either dimension is zero.
        PixelSorterError: If the image is larger than the limit.
    """
    if width <= 0 or height <= 0:
        raise InvalidInputError("Image dimensions cannot be zero")
    if width > limit or height > limit:
        raise PixelSorterError(
            f"Image dimensions too large (max {limit}x{limit})"
        )
