# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Median cut color quantization.

Starts with one box holding every pixel and repeatedly splits the box
with the widest single-channel range at the median of that channel.
Each final box collapses to its mean color.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from brandpick.schema import Color
from brandpick.algorithms.base import mean_color, to_array

# Channel indices in tie-break priority when ranges are equal
_GREEN, _BLUE, _RED = 1, 2, 0


def _split_channel(ranges: NDArray[np.int64]) -> int:
    """Channel with the largest range; ties prefer green, then blue, then red."""
    r_range, g_range, b_range = ranges
    if g_range >= r_range and g_range >= b_range:
        return _GREEN
    if b_range >= r_range and b_range >= g_range:
        return _BLUE
    return _RED


def _ranges(box: NDArray[np.int64]) -> NDArray[np.int64]:
    return box.max(axis=0) - box.min(axis=0)


def median_cut_colors(pixels: Sequence[Color], depth: int = 4) -> list[Color]:
    """
    Quantize pixels into at most ``2 ** depth`` colors.

    Args:
        pixels: Sampled pixels
        depth: Split depth. Unlike the other algorithms this is not an
            output cap; callers truncate the result if needed.

    Returns:
        Box mean colors ordered by box population descending. Stops early
        (fewer colors) once every box is a single color.
    """
    if not pixels:
        return []

    target = 2 ** depth
    boxes: list[NDArray[np.int64]] = [to_array(pixels)]

    while len(boxes) < target:
        spans = [int(_ranges(box).max()) for box in boxes]
        widest = int(np.argmax(spans))
        if spans[widest] == 0:
            break

        box = boxes[widest]
        channel = _split_channel(_ranges(box))
        ordered = box[np.argsort(box[:, channel], kind="stable")]
        median = len(ordered) // 2
        boxes[widest:widest + 1] = [ordered[:median], ordered[median:]]

    colors = [mean_color(box) for box in boxes]
    colors.sort(key=lambda c: c.count, reverse=True)
    return colors
