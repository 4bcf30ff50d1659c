"""Tests for sort module."""
from __future__ import annotations

import math
from collections import Counter

import numpy as np
import pytest
from PIL import Image

from pixel_sorter.config import InvalidInputError
from pixel_sorter.raster import Raster, pack_argb, unpack_argb
from pixel_sorter.sort import extract_opaque, process, repack, sort_pixels


def _rgb(argb):
    return [(r, g, b) for _, r, g, b in argb]


class TestExtractOpaque:
    """Tests for extract_opaque function."""

    def test_drops_transparent(self, example_raster: Raster) -> None:
        """Should drop alpha 0 pixels and keep the rest in scan order."""
        opaque = extract_opaque(example_raster.pixels)
        assert [int(p) for p in opaque] == [0xFF0A141E, 0xFF323C46]

    def test_keeps_original_alpha(self) -> None:
        """Translucent pixels should keep their alpha value."""
        pixels = pack_argb([1, 0, 200], [5, 5, 5], [5, 5, 5], [5, 5, 5])
        a, _, _, _ = unpack_argb(extract_opaque(pixels))
        assert list(a) == [1, 200]

    def test_does_not_alias_input(self, example_raster: Raster) -> None:
        """Returned array should be independent of the input."""
        opaque = extract_opaque(example_raster.pixels)
        opaque[:] = 0
        assert int(example_raster.pixels[0]) == 0xFF0A141E


class TestSortPixels:
    """Tests for sort_pixels function."""

    def test_red_first(self) -> None:
        """Higher red should come first."""
        pixels = pack_argb([255] * 3, [10, 200, 50], [0, 0, 0], [0, 0, 0])
        _, r, _, _ = unpack_argb(sort_pixels(pixels))
        assert list(r) == [200, 50, 10]

    def test_green_breaks_red_tie(self) -> None:
        """Green should order pixels with equal red."""
        pixels = pack_argb([255] * 3, [7, 7, 7], [1, 9, 5], [0, 0, 0])
        _, _, g, _ = unpack_argb(sort_pixels(pixels))
        assert list(g) == [9, 5, 1]

    def test_blue_breaks_red_green_tie(self) -> None:
        """Blue should order pixels with equal red and green."""
        pixels = pack_argb([255] * 3, [7, 7, 7], [3, 3, 3], [2, 250, 40])
        _, _, _, b = unpack_argb(sort_pixels(pixels))
        assert list(b) == [250, 40, 2]

    def test_channels_outrank_value(self) -> None:
        """A brighter pixel with lower red should still come after."""
        pixels = pack_argb([255, 255], [100, 101], [255, 0], [255, 0])
        _, r, _, _ = unpack_argb(sort_pixels(pixels))
        assert list(r) == [101, 100]

    def test_equal_colors_keep_alpha_values(self) -> None:
        """Same-color pixels may differ only in alpha and are all kept."""
        pixels = pack_argb([10, 255, 80], [4, 4, 4], [4, 4, 4], [4, 4, 4])
        a, _, _, _ = unpack_argb(sort_pixels(pixels))
        assert sorted(a) == [10, 80, 255]

    def test_empty(self) -> None:
        """Empty input should give empty output."""
        assert sort_pixels(np.array([], dtype=np.uint32)).size == 0


class TestRepack:
    """Tests for repack function."""

    def test_pads_with_white(self) -> None:
        """Unused trailing cells should be opaque white."""
        pixels = pack_argb([255, 255], [1, 2], [1, 2], [1, 2])
        raster = repack(pixels, 3)
        assert raster.height == 1
        assert raster.to_argb()[2] == (255, 255, 255, 255)

    def test_forces_alpha(self) -> None:
        """Written pixels should become fully opaque."""
        pixels = pack_argb([3], [9], [8], [7])
        assert repack(pixels, 1).to_argb() == [(255, 9, 8, 7)]

    def test_height_rounds_up(self) -> None:
        """Height should be ceil(count / width)."""
        pixels = pack_argb([255] * 7, [0] * 7, [0] * 7, [0] * 7)
        assert repack(pixels, 3).height == 3
        assert repack(pixels, 7).height == 1


class TestProcess:
    """Tests for process function."""

    def test_documented_example(self, example_raster: Raster) -> None:
        """Should match the three-pixel worked example."""
        result = process(example_raster)
        assert (result.width, result.height) == (3, 1)
        assert result.to_argb() == [
            (255, 50, 60, 70),
            (255, 10, 20, 30),
            (255, 255, 255, 255),
        ]

    def test_all_transparent(self, transparent_image: Image.Image) -> None:
        """All transparent input should give a white raster of the same size."""
        result = process(Raster.from_image(transparent_image))
        assert (result.width, result.height) == (5, 4)
        assert set(result.to_argb()) == {(255, 255, 255, 255)}

    def test_none_rejected(self) -> None:
        """Should reject a missing raster."""
        with pytest.raises(InvalidInputError, match="cannot be None"):
            process(None)

    @pytest.mark.parametrize("width,height", [(0, 3), (3, 0)])
    def test_zero_dimension_rejected(self, width: int, height: int) -> None:
        """Should reject zero width or height."""
        raster = Raster(width, height, np.array([], dtype=np.uint32))
        with pytest.raises(InvalidInputError, match="non-zero"):
            process(raster)

    def test_buffer_size_mismatch(self) -> None:
        """Should reject a buffer that does not match the dimensions."""
        raster = Raster(2, 2, np.zeros(3, dtype=np.uint32))
        with pytest.raises(InvalidInputError, match="expected 2x2"):
            process(raster)

    def test_input_not_mutated(self, sample_image: Image.Image) -> None:
        """Input pixel buffer should be unchanged."""
        raster = Raster.from_image(sample_image)
        before = raster.pixels.copy()
        process(raster)
        assert np.array_equal(raster.pixels, before)

    def test_gray_ramp(self, gray_ramp_raster: Raster) -> None:
        """Grays should come out lightest first, same shape."""
        result = process(gray_ramp_raster)
        assert (result.width, result.height) == (4, 2)
        assert [r for _, r, _, _ in result.to_argb()] == [
            210, 180, 150, 120, 90, 60, 30, 0
        ]

    def test_properties_on_random_image(self, sample_image: Image.Image) -> None:
        """Width, height, alpha, color multiset and ordering should hold."""
        raster = Raster.from_image(sample_image)
        source = raster.to_argb()
        opaque = [p for p in source if p[0] != 0]

        result = process(raster)
        out = result.to_argb()

        assert result.width == raster.width
        assert result.height == max(1, math.ceil(len(opaque) / raster.width))
        assert all(a == 255 for a, _, _, _ in out)

        head = _rgb(out[:len(opaque)])
        assert Counter(head) == Counter(_rgb(opaque))
        assert all(x >= y for x, y in zip(head, head[1:]))
        assert set(out[len(opaque):]) <= {(255, 255, 255, 255)}
