# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""Dominant colors: the most frequent exact pixel values."""

from __future__ import annotations

from typing import Sequence

from brandpick.schema import Color
from brandpick.algorithms.base import count_colors


def dominant_colors(pixels: Sequence[Color], count: int = 6) -> list[Color]:
    """
    Extract the most common exact colors.

    Args:
        pixels: Sampled pixels (duplicates carry the frequency signal)
        count: Maximum number of colors to return

    Returns:
        Colors ordered by frequency descending, each with ``count`` set to
        its number of occurrences. Equal frequencies keep input order.
    """
    if not pixels:
        return []

    counter = count_colors(pixels)
    return [color.with_count(n) for color, n in counter.most_common(count)]
