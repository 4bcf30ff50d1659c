"""Command-line interface for pixel sorter."""
from __future__ import annotations

import logging
import sys
import time
from typing import List, Optional, Sequence

from PIL import Image

logger = logging.getLogger("pixel_sorter")

from .codec import decode_raster, encode_raster, resolve_output_path
from .config import Config, PixelSorterError
from .sort import process


def process_image_bytes(
    input_bytes: bytes, config: Optional[Config] = None
) -> bytes:
    """Sort the pixels of an encoded image.

    Args:
        input_bytes: Input image as PNG/JPEG/BMP bytes.
        config: Configuration options. Uses defaults if None.

    Returns:
        Output PNG image bytes.
    """
    config = config or Config()

    t0 = time.perf_counter()
    raster = decode_raster(input_bytes, config.max_dimension)
    t1 = time.perf_counter()

    sorted_raster = process(raster)
    t2 = time.perf_counter()

    output_bytes = encode_raster(sorted_raster)
    t3 = time.perf_counter()

    if config.timing:
        print(
            "Timing (s): "
            f"load={t1 - t0:.4f}, "
            f"sort={t2 - t1:.4f}, "
            f"encode={t3 - t2:.4f}, "
            f"total={t3 - t0:.4f}"
        )

    return output_bytes


def process_image(config: Config) -> None:
    """Sort an image file and write the result.

    Args:
        config: Configuration with input/output paths.
    """
    print(f"Processing: {config.input_path}")
    with open(config.input_path, "rb") as f:
        img_bytes = f.read()
    logger.debug(f"Read {len(img_bytes)} bytes from {config.input_path}")

    output_bytes = process_image_bytes(img_bytes, config)
    output_path = resolve_output_path(config.output_path, config.output_name)
    with open(output_path, "wb") as f:
        f.write(output_bytes)

    print(f"Saved to: {output_path}")
    if config.preview:
        preview_side_by_side(img_bytes, output_bytes)


def compose_preview(
    input_img: Image.Image,
    output_img: Image.Image,
    scale: int = 4,
    gap: int = 4,
) -> Image.Image:
    """Place the input and sorted images next to each other.

    Both images are enlarged with nearest-neighbour resampling so single
    pixels stay visible.

    Args:
        input_img: Original image.
        output_img: Sorted image.
        scale: Minimum scale factor.
        gap: Gap in pixels between the two images.

    Returns:
        RGBA image holding both, top-aligned on a dark background.
    """
    input_img = input_img.convert("RGBA")
    output_img = output_img.convert("RGBA")
    in_w, in_h = input_img.size
    out_w, out_h = output_img.size

    # Target at least 400px on the shortest side
    min_dimension = min(in_w, in_h)
    if min_dimension * scale < 400:
        scale = max(scale, 400 // min_dimension + 1)

    scaled_input = input_img.resize((in_w * scale, in_h * scale), resample=Image.NEAREST)
    scaled_output = output_img.resize((out_w * scale, out_h * scale), resample=Image.NEAREST)

    preview_w = scaled_input.width + gap + scaled_output.width
    preview_h = max(scaled_input.height, scaled_output.height)
    preview_img = Image.new("RGBA", (preview_w, preview_h), (40, 40, 40, 255))
    preview_img.paste(scaled_input, (0, 0))
    preview_img.paste(scaled_output, (scaled_input.width + gap, 0))
    return preview_img


def preview_side_by_side(input_bytes: bytes, output_bytes: bytes) -> None:
    """Display input and output images side by side."""
    input_img = decode_raster(input_bytes).to_image()
    output_img = decode_raster(output_bytes).to_image()
    compose_preview(input_img, output_img).show(title="Pixel Sorter Preview")


def parse_args(argv: Sequence[str]) -> Config:
    """Parse command-line arguments.

    Args:
        argv: Command-line arguments (including program name).

    Returns:
        Configured Config instance.

    Raises:
        PixelSorterError: If arguments are invalid.
    """
    args = list(argv[1:])
    preview = False
    timing = False
    debug = False
    gui = False
    positional: List[str] = []

    for arg in args:
        if arg == "--preview":
            preview = True
        elif arg == "--timing":
            timing = True
        elif arg == "--debug":
            debug = True
        elif arg == "--gui":
            gui = True
        elif arg.startswith("--"):
            raise PixelSorterError(f"Unknown option: {arg}\n{_usage_message()}")
        else:
            positional.append(arg)

    if gui:
        if positional:
            raise PixelSorterError(_usage_message())
    elif len(positional) != 2:
        raise PixelSorterError(_usage_message())

    config = Config(
        input_path=positional[0] if positional else "",
        output_path=positional[1] if positional else "",
        preview=preview,
        timing=timing,
        gui=gui,
    )

    # Enable debug logging if requested
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s"
        )
        logging.getLogger("pixel_sorter").setLevel(logging.DEBUG)

    return config


def _usage_message() -> str:
    """Return usage message string."""
    return (
        "Usage: python sort_pixels.py input.png output.png "
        "[--preview] [--timing] [--debug]\n"
        "       python sort_pixels.py --gui [--debug]"
    )


def main(argv: Sequence[str]) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        config = parse_args(argv)
        if config.gui:
            from .app import run_app

            run_app(config)
        else:
            process_image(config)
        return 0
    except PixelSorterError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Processing error: {exc}", file=sys.stderr)
        return 1


def console_main() -> int:
    """Console script entry point."""
    return main(sys.argv)
