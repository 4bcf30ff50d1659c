"""Image loading and saving on top of Pillow."""
from __future__ import annotations

import io
import logging
import os

from PIL import Image

from .config import (
    DEFAULT_OUTPUT_NAME,
    MAX_DIMENSION,
    DecodeError,
    EncodeError,
    validate_image_dimensions,
)
from .raster import Raster

logger = logging.getLogger("pixel_sorter")


def decode_raster(input_bytes: bytes, max_dimension: int = MAX_DIMENSION) -> Raster:
    """Decode PNG/JPEG/BMP (or any Pillow-readable) bytes into a raster.

    Args:
        input_bytes: Encoded image data.
        max_dimension: Largest accepted size on either axis.

    Returns:
        Decoded raster.

    Raises:
        DecodeError: If the data cannot be decoded.
    """
    try:
        with Image.open(io.BytesIO(input_bytes)) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Failed to decode image: {exc}") from exc

    validate_image_dimensions(rgba.width, rgba.height, max_dimension)
    return Raster.from_image(rgba)


def load_raster(path: str, max_dimension: int = MAX_DIMENSION) -> Raster:
    """Read and decode an image file.

    Raises:
        DecodeError: If the file cannot be read or decoded.
    """
    logger.debug(f"Loading image: {path}")
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise DecodeError(f"Failed to read image {path}: {exc}") from exc
    return decode_raster(data, max_dimension)


def encode_raster(raster: Raster) -> bytes:
    """Encode a raster as PNG bytes.

    Raises:
        EncodeError: If the raster cannot be converted or encoded.
    """
    try:
        img = raster.to_image()
        buf = io.BytesIO()
        img.save(buf, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(f"Failed to encode image: {exc}") from exc
    return buf.getvalue()


def resolve_output_path(path: str, output_name: str = DEFAULT_OUTPUT_NAME) -> str:
    """Return the file to write, placing output_name inside directories."""
    if os.path.isdir(path):
        return os.path.join(path, output_name)
    return path


def save_raster(
    raster: Raster, path: str, output_name: str = DEFAULT_OUTPUT_NAME
) -> str:
    """Write a raster to disk as PNG.

    Args:
        raster: Raster to save.
        path: Destination file, or a directory to hold output_name.
        output_name: File name used when path is a directory.

    Returns:
        Path of the written file.

    Raises:
        EncodeError: If encoding or writing fails.
    """
    target = resolve_output_path(path, output_name)
    data = encode_raster(raster)
    try:
        with open(target, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise EncodeError(f"Failed to write image {target}: {exc}") from exc
    logger.debug(f"Saved {raster.width}x{raster.height} image to {target}")
    return target
