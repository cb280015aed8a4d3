# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""Vibrant colors: saturated colors ranked by saturation and frequency."""

from __future__ import annotations

import math
from typing import Sequence

from brandpick.schema import Color
from brandpick.algorithms.base import count_colors
from brandpick.measure.contrast import get_saturation

MIN_SATURATION = 0.3


def vibrant_colors(pixels: Sequence[Color], count: int = 6) -> list[Color]:
    """
    Extract the most vibrant colors.

    Colors with saturation <= 0.3 are discarded. The rest are ranked by
    ``saturation * ln(count + 1)``: the log damps frequency so a large
    vibrant region wins over a few oversaturated stray pixels without
    letting sheer area dominate.

    Args:
        pixels: Sampled pixels
        count: Maximum number of colors to return

    Returns:
        Colors ordered by vibrancy score descending
    """
    if not pixels:
        return []

    scored = []
    for color, n in count_colors(pixels).items():
        saturation = get_saturation(color)
        if saturation > MIN_SATURATION:
            scored.append((saturation * math.log(n + 1), color.with_count(n)))

    scored.sort(key=lambda item: item[0], reverse=True)
    return [color for _, color in scored[:count]]
