# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Pixel sampling.

Reduces a decoded pixel buffer to a bounded, representative list of
Colors. Sampling is a deterministic stride through the buffer, so the
same buffer always yields the same sample.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from brandpick.schema import Color
from brandpick.measure.colorspace import round_channel

logger = logging.getLogger(__name__)

PixelBuffer = Union[NDArray[np.uint8], bytes, bytearray, memoryview]

# Pixels at or below ~50% opacity are ignored
ALPHA_THRESHOLD = 128


def to_rgba(pixels: PixelBuffer) -> NDArray[np.uint8]:
    """
    Normalize a pixel buffer to a flat (N, 4) RGBA array.

    Accepts:
        - uint8 array of shape (H, W, 4), (N, 4), (H, W, 3) or (N, 3).
          RGB input is treated as fully opaque.
        - Row-major RGBA bytes (length must be a multiple of 4)

    Raises:
        ValueError: On an unsupported shape, dtype or byte length
    """
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        data = np.frombuffer(pixels, dtype=np.uint8)
        if data.size % 4 != 0:
            raise ValueError(
                f"RGBA buffer length must be a multiple of 4, got {data.size}"
            )
        return data.reshape(-1, 4)

    pixels = np.asarray(pixels)
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 array, got {pixels.dtype}")
    if pixels.ndim not in (2, 3) or pixels.shape[-1] not in (3, 4):
        raise ValueError(
            f"Expected (H, W, 3|4) or (N, 3|4) array, got shape {pixels.shape}"
        )

    flat = pixels.reshape(-1, pixels.shape[-1])
    if flat.shape[1] == 3:
        alpha = np.full((len(flat), 1), 255, dtype=np.uint8)
        flat = np.concatenate([flat, alpha], axis=1)
    return flat


def sample_pixels(pixels: PixelBuffer, sample_size: int = 10000) -> list[Color]:
    """
    Sample a pixel buffer down to roughly ``sample_size`` Colors.

    Visits every ``step``-th pixel, where
    ``step = max(1, total_pixels // sample_size)``. Visited pixels with
    alpha below 128 are dropped; they are not replaced by a neighbor, so
    transparent images yield fewer samples.

    Args:
        pixels: Decoded pixel buffer (see ``to_rgba``)
        sample_size: Target number of samples

    Returns:
        Colors in buffer scan order (duplicates preserved)
    """
    if sample_size < 1:
        raise ValueError(f"sample_size must be >= 1, got {sample_size}")

    rgba = to_rgba(pixels)
    total = len(rgba)
    step = max(1, total // sample_size)

    visited = rgba[::step]
    opaque = visited[visited[:, 3] >= ALPHA_THRESHOLD]

    logger.debug(
        "Sampled %d of %d pixels (step=%d, %d transparent skipped)",
        len(opaque), total, step, len(visited) - len(opaque),
    )
    return [Color(int(r), int(g), int(b)) for r, g, b, _ in opaque]


def average_color(pixels: PixelBuffer) -> Optional[Color]:
    """
    Mean color of the opaque pixels in a buffer.

    Returns:
        The rounded channel mean, or None if no pixel is opaque
    """
    rgba = to_rgba(pixels)
    opaque = rgba[rgba[:, 3] >= ALPHA_THRESHOLD, :3]
    if len(opaque) == 0:
        return None

    r, g, b = opaque.astype(np.float64).mean(axis=0)
    return Color(round_channel(r), round_channel(g), round_channel(b))
