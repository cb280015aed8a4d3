# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Balanced palette.

Builds a diverse set by picking one representative per category before
filling up by frequency:

1. Most frequent color overall
2. Most saturated color (saturation > 0.4)
3. Most frequent light color (luminance > 0.7)
4. Most frequent dark color (luminance < 0.3)
5. Most frequent remaining colors

A category with no qualifying member is skipped, not substituted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from brandpick.schema import Color
from brandpick.algorithms.base import count_colors
from brandpick.measure.contrast import get_luminance, get_saturation

VIBRANT_MIN_SATURATION = 0.4
LIGHT_MIN_LUMINANCE = 0.7
DARK_MAX_LUMINANCE = 0.3


@dataclass(frozen=True)
class _ColorStats:
    color: Color
    saturation: float
    luminance: float


def _first_max(stats: list[_ColorStats], key) -> Optional[_ColorStats]:
    """First entry with the highest key (max() already keeps the first)."""
    return max(stats, key=key) if stats else None


def palette_colors(pixels: Sequence[Color], count: int = 6) -> list[Color]:
    """
    Extract a balanced palette of dominant, vibrant, light and dark colors.

    Args:
        pixels: Sampled pixels
        count: Maximum number of colors to return

    Returns:
        Up to ``count`` distinct colors in category order, each carrying
        its pixel frequency
    """
    if not pixels:
        return []

    # Frequency order first, so every tie below resolves to the more
    # frequent (then earlier) color
    stats = [
        _ColorStats(color.with_count(n), get_saturation(color), get_luminance(color))
        for color, n in count_colors(pixels).most_common()
    ]

    candidates = [
        stats[0],
        _first_max(
            [s for s in stats if s.saturation > VIBRANT_MIN_SATURATION],
            key=lambda s: s.saturation,
        ),
        _first_max(
            [s for s in stats if s.luminance > LIGHT_MIN_LUMINANCE],
            key=lambda s: s.color.count,
        ),
        _first_max(
            [s for s in stats if s.luminance < DARK_MAX_LUMINANCE],
            key=lambda s: s.color.count,
        ),
    ]

    palette: list[Color] = []
    for candidate in candidates:
        if candidate is not None and candidate.color not in palette:
            palette.append(candidate.color)

    for s in stats:
        if len(palette) >= count:
            break
        if s.color not in palette:
            palette.append(s.color)

    return palette[:count]
