"""Pixel Sorter - Reorder an image's pixels by color intensity.

Opaque pixels are sorted by red, green, blue and HSV value (all
descending) and reflowed row-major into a new image of the same width,
padded with white.

Example:
    from pixel_sorter import load_raster, process, save_raster

    raster = load_raster("input.png")
    save_raster(process(raster), "output.png")

Working with bytes:

    from pixel_sorter import process_image_bytes

    with open("input.png", "rb") as f:
        output_bytes = process_image_bytes(f.read())

For debug logging, enable with:

    import logging
    logging.getLogger("pixel_sorter").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - disabled by default, enable with logging.getLogger("pixel_sorter").setLevel(logging.DEBUG)
logger = logging.getLogger("pixel_sorter")
logger.addHandler(logging.NullHandler())
from .cli import main, process_image, process_image_bytes
from .codec import decode_raster, encode_raster, load_raster, save_raster
from .color import rgb_to_hsv, rgb_to_hsv_array
from .config import (
    Config,
    DecodeError,
    EncodeError,
    InvalidInputError,
    PixelSorterError,
)
from .raster import Raster, pack_argb, unpack_argb
from .sort import extract_opaque, process, repack, sort_pixels

__all__ = [
    "Config",
    "PixelSorterError",
    "InvalidInputError",
    "DecodeError",
    "EncodeError",
    "Raster",
    "pack_argb",
    "unpack_argb",
    "main",
    "process_image",
    "process_image_bytes",
    # Engine
    "process",
    "extract_opaque",
    "sort_pixels",
    "repack",
    "rgb_to_hsv",
    "rgb_to_hsv_array",
    # Codec
    "decode_raster",
    "encode_raster",
    "load_raster",
    "save_raster",
]

__version__ = "1.0.0"
