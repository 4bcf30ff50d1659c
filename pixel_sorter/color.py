"""RGB to HSV conversion used by the pixel sort key."""
from __future__ import annotations

from typing import Tuple

import numpy as np


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert one RGB color to HSV.

    Args:
        r: Red channel in range [0, 255].
        g: Green channel in range [0, 255].
        b: Blue channel in range [0, 255].

    Returns:
        Tuple of (hue, saturation, value) with hue in [0, 360) and
        saturation and value in [0, 100].
    """
    rn, gn, bn = r / 255.0, g / 255.0, b / 255.0
    c_max = max(rn, gn, bn)
    c_min = min(rn, gn, bn)
    delta = c_max - c_min

    if delta == 0:
        hue = 0.0
    elif c_max == rn:
        hue = 60.0 * ((gn - bn) / delta)
    elif c_max == gn:
        hue = 120.0 + 60.0 * ((bn - rn) / delta)
    else:
        hue = 240.0 + 60.0 * ((rn - gn) / delta)
    if hue < 0:
        hue += 360.0

    saturation = 0.0 if c_max == 0 else 100.0 * (delta / c_max)
    value = 100.0 * c_max
    return hue, saturation, value


def rgb_to_hsv_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorized form of rgb_to_hsv.

    Args:
        rgb: Array of shape (N, 3) with RGB values in range [0, 255].

    Returns:
        Array of shape (N, 3) with (hue, saturation, value) rows.
    """
    norm = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0
    r, g, b = norm[:, 0], norm[:, 1], norm[:, 2]
    c_max = norm.max(axis=1)
    c_min = norm.min(axis=1)
    delta = c_max - c_min

    # Avoid dividing by zero for grays; those rows are masked out below
    safe_delta = np.where(delta == 0, 1.0, delta)
    hue = np.where(
        c_max == r,
        60.0 * ((g - b) / safe_delta),
        np.where(
            c_max == g,
            120.0 + 60.0 * ((b - r) / safe_delta),
            240.0 + 60.0 * ((r - g) / safe_delta),
        ),
    )
    hue = np.where(delta == 0, 0.0, hue)
    hue = np.where(hue < 0, hue + 360.0, hue)

    safe_max = np.where(c_max == 0, 1.0, c_max)
    saturation = np.where(c_max == 0, 0.0, 100.0 * (delta / safe_max))
    value = 100.0 * c_max

    return np.stack([hue, saturation, value], axis=1)
