# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Histogram analysis.

Quantizes each channel into 16 bins (value // 16), so the color cube is
split into at most 4096 cells. Each occupied cell reports the average of
the pixels that fell into it.
"""

from __future__ import annotations

from typing import Sequence

from brandpick.schema import Color
from brandpick.measure.colorspace import round_channel

BIN_SIZE = 16


def histogram_colors(pixels: Sequence[Color], count: int = 6) -> list[Color]:
    """
    Extract colors from the most populated histogram bins.

    Args:
        pixels: Sampled pixels
        count: Maximum number of colors to return

    Returns:
        Bin mean colors ordered by bin population descending
    """
    if not pixels:
        return []

    # bin -> [sum_r, sum_g, sum_b, n]
    bins: dict[tuple[int, int, int], list[int]] = {}
    for p in pixels:
        key = (p.r // BIN_SIZE, p.g // BIN_SIZE, p.b // BIN_SIZE)
        acc = bins.get(key)
        if acc is None:
            bins[key] = [p.r, p.g, p.b, 1]
        else:
            acc[0] += p.r
            acc[1] += p.g
            acc[2] += p.b
            acc[3] += 1

    colors = [
        Color(
            round_channel(sr / n),
            round_channel(sg / n),
            round_channel(sb / n),
            count=n,
        )
        for sr, sg, sb, n in bins.values()
    ]
    colors.sort(key=lambda c: c.count, reverse=True)
    return colors[:count]
