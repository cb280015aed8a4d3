# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""Tests for pixel sampling and average color."""

import numpy as np
import pytest

from brandpick.schema import Color
from brandpick.measure.sample import average_color, sample_pixels, to_rgba


def _rgba_image(rgba, height=10, width=10):
    return np.full((height, width, 4), rgba, dtype=np.uint8)


class TestToRGBA:

    def test_rgb_becomes_opaque(self):
        rgb = np.zeros((2, 3, 3), dtype=np.uint8)
        rgba = to_rgba(rgb)
        assert rgba.shape == (6, 4)
        assert (rgba[:, 3] == 255).all()

    def test_bytes(self):
        rgba = to_rgba(bytes([1, 2, 3, 255, 4, 5, 6, 0]))
        assert rgba.tolist() == [[1, 2, 3, 255], [4, 5, 6, 0]]

    def test_bad_byte_length(self):
        with pytest.raises(ValueError, match="multiple of 4"):
            to_rgba(b"\x00\x01\x02")

    def test_bad_dtype(self):
        with pytest.raises(ValueError, match="uint8"):
            to_rgba(np.zeros((2, 2, 4), dtype=np.float32))

    def test_bad_shape(self):
        with pytest.raises(ValueError, match="shape"):
            to_rgba(np.zeros((2, 2, 5), dtype=np.uint8))


class TestSamplePixels:

    def test_small_image_takes_every_pixel(self):
        img = _rgba_image([10, 20, 30, 255], height=4, width=5)
        samples = sample_pixels(img, sample_size=100)
        assert len(samples) == 20
        assert all(s == Color(10, 20, 30) for s in samples)

    def test_stride(self):
        """100 pixels, target 10 → every 10th pixel."""
        flat = np.zeros((100, 4), dtype=np.uint8)
        flat[:, 0] = np.arange(100)
        flat[:, 3] = 255
        samples = sample_pixels(flat, sample_size=10)
        assert [s.r for s in samples] == list(range(0, 100, 10))

    def test_stride_floors(self):
        """105 pixels, target 10 → step 10 → 11 samples."""
        flat = np.zeros((105, 4), dtype=np.uint8)
        flat[:, 3] = 255
        assert len(sample_pixels(flat, sample_size=10)) == 11

    def test_transparent_pixels_skipped(self):
        flat = np.zeros((4, 4), dtype=np.uint8)
        flat[:, 0] = [1, 2, 3, 4]
        flat[:, 3] = [255, 127, 128, 0]
        samples = sample_pixels(flat, sample_size=10)
        assert [s.r for s in samples] == [1, 3]

    def test_fully_transparent_yields_empty(self):
        assert sample_pixels(_rgba_image([255, 0, 0, 0])) == []

    def test_scan_order_and_reproducible(self):
        rs = np.random.RandomState(3)
        img = rs.randint(0, 256, size=(50, 60, 4)).astype(np.uint8)
        img[..., 3] = 255
        first = sample_pixels(img, sample_size=500)
        second = sample_pixels(img, sample_size=500)
        assert [c.hex for c in first] == [c.hex for c in second]
        assert first[0] == Color(*map(int, img[0, 0, :3]))

    def test_samples_are_unweighted(self):
        samples = sample_pixels(_rgba_image([1, 2, 3, 255]))
        assert all(s.count is None for s in samples)

    def test_invalid_sample_size(self):
        with pytest.raises(ValueError):
            sample_pixels(_rgba_image([1, 2, 3, 255]), sample_size=0)


class TestAverageColor:

    def test_average_of_opaque_only(self):
        flat = np.array([
            [0, 0, 0, 255],
            [100, 200, 50, 255],
            [255, 255, 255, 0],
        ], dtype=np.uint8)
        assert average_color(flat) == Color(50, 100, 25)

    def test_rounds_half_up(self):
        flat = np.array([[0, 0, 0, 255], [1, 3, 5, 255]], dtype=np.uint8)
        assert average_color(flat) == Color(1, 2, 3)

    def test_all_transparent_is_none(self):
        assert average_color(_rgba_image([9, 9, 9, 10])) is None
