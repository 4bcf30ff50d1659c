"""Pytest fixtures for pixel_sorter tests."""
from __future__ import annotations

import io

import numpy as np
import pytest
from PIL import Image

from pixel_sorter import Config, Raster


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance."""
    return Config()


@pytest.fixture
def example_raster() -> Raster:
    """A single row of three pixels, the middle one transparent."""
    return Raster.from_argb(3, 1, [
        (255, 10, 20, 30),
        (0, 99, 99, 99),
        (255, 50, 60, 70),
    ])


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a 16x8 RGBA image of random colors with some transparency."""
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, size=(8, 16, 4), dtype=np.uint8)
    # Force a mix of fully transparent, translucent and opaque pixels
    arr[:, :, 3] = 255
    arr[0, :5, 3] = 0
    arr[3, 2:6, 3] = 64
    return Image.fromarray(arr)


@pytest.fixture
def sample_image_bytes(sample_image: Image.Image) -> bytes:
    """Return sample image as PNG bytes."""
    buf = io.BytesIO()
    sample_image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def transparent_image() -> Image.Image:
    """Create a fully transparent 5x4 image."""
    return Image.new("RGBA", (5, 4), (12, 34, 56, 0))


@pytest.fixture
def gray_ramp_raster() -> Raster:
    """A 4x2 raster of grays, darkest first."""
    values = [(255, v, v, v) for v in (0, 30, 60, 90, 120, 150, 180, 210)]
    return Raster.from_argb(4, 2, values)
