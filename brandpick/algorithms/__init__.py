# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Color extraction algorithms.

Each algorithm turns an unordered bag of sampled pixels into a small,
ranked list of Colors carrying their pixel weight:

- dominant:   most frequent exact colors
- histogram:  averaged 16-level channel bins
- kmeans:     iterative RGB clustering (randomly seeded)
- mediancut:  recursive box splitting (``count`` is the split depth)
- vibrant:    saturation weighted by log frequency
- palette:    one dominant, vibrant, light and dark color, then by frequency

Empty input always yields an empty list.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

from brandpick.schema import Algorithm, Color, resolve_algorithm
from brandpick.algorithms.base import Extractor
from brandpick.algorithms.dominant import dominant_colors
from brandpick.algorithms.histogram import histogram_colors
from brandpick.algorithms.kmeans import RandomSource, kmeans_colors
from brandpick.algorithms.mediancut import median_cut_colors
from brandpick.algorithms.palette import palette_colors
from brandpick.algorithms.vibrant import vibrant_colors


EXTRACTORS: Mapping[Algorithm, Extractor] = MappingProxyType({
    Algorithm.DOMINANT: dominant_colors,
    Algorithm.HISTOGRAM: histogram_colors,
    Algorithm.KMEANS: kmeans_colors,
    Algorithm.MEDIANCUT: median_cut_colors,
    Algorithm.VIBRANT: vibrant_colors,
    Algorithm.PALETTE: palette_colors,
})


def run_algorithm(
    pixels: Sequence[Color],
    algorithm: Algorithm | str,
    count: int,
    *,
    rng: RandomSource = None,
) -> list[Color]:
    """
    Run one extraction algorithm.

    Args:
        pixels: Sampled pixels
        algorithm: Algorithm or its string id (e.g. "vibrant")
        count: Number of colors to extract (split depth for mediancut)
        rng: Seed or numpy Generator, used by kmeans only

    Raises:
        ValueError: Unknown algorithm or ``count < 1``
    """
    algorithm = resolve_algorithm(algorithm)
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    if algorithm is Algorithm.KMEANS:
        return kmeans_colors(pixels, count, rng=rng)
    return EXTRACTORS[algorithm](pixels, count)


__all__ = [
    "EXTRACTORS",
    "run_algorithm",
    "dominant_colors",
    "histogram_colors",
    "kmeans_colors",
    "median_cut_colors",
    "vibrant_colors",
    "palette_colors",
]
