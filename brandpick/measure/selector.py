# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Brand color selection.

Pipeline:
1. Run an extraction algorithm, over-asking for candidates, and merge
   candidates that share a hex
2. Drop neutral colors (grays, near-white, near-black)
3. Drop colors that cannot host legible text (contrast < 4.5 against
   their black/white text color)
4. Rank survivors by contrast

When the contrast filter leaves fewer than two colors from an image that
produced several candidates, the selector falls back to the non-neutral
candidates ranked by saturation, so a colorful image never collapses to
a single unusable swatch.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from brandpick.schema import Algorithm, Color, resolve_algorithm
from brandpick.algorithms import run_algorithm
from brandpick.algorithms.kmeans import RandomSource
from brandpick.measure.contrast import (
    AA_NORMAL,
    get_contrast_color,
    get_contrast_ratio,
    get_saturation,
    is_neutral_color,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionConfig:
    """Configuration for brand color selection."""

    # Candidates requested from the algorithm per final color
    candidate_multiplier: int = 2

    # Minimum contrast against the paired text color (WCAG AA, normal text)
    min_contrast: float = AA_NORMAL

    # Below this many survivors the saturation fallback kicks in
    min_results: int = 2


def candidate_count(requested_count: int, algorithm: Algorithm, config: SelectionConfig) -> int:
    """
    Number to pass to the algorithm for ``requested_count`` final colors.

    Median cut takes a split depth, so it gets the smallest depth whose
    ``2 ** depth`` boxes cover the candidate count (12 candidates -> 4).
    """
    candidates = requested_count * config.candidate_multiplier
    if algorithm is Algorithm.MEDIANCUT:
        return max(1, math.ceil(math.log2(candidates)))
    return candidates


def merge_duplicates(colors: Sequence[Color]) -> list[Color]:
    """
    Collapse colors with the same hex into one, summing their weights.

    Median cut and k-means can return one color from several boxes or
    clusters. The merged color keeps the position of its first occurrence.
    """
    merged: dict[Color, int] = {}
    for color in colors:
        merged[color] = merged.get(color, 0) + (color.count or 0)
    return [color.with_count(n) if n else color for color, n in merged.items()]


def select_brand_colors(
    pixels: Sequence[Color],
    algorithm: Algorithm | str = Algorithm.VIBRANT,
    requested_count: int = 6,
    *,
    config: Optional[SelectionConfig] = None,
    rng: RandomSource = None,
) -> list[Color]:
    """
    Select brand colors from sampled pixels.

    Args:
        pixels: Sampled pixels (see ``sample_pixels``)
        algorithm: Extraction algorithm or its string id
        requested_count: Maximum number of brand colors to return
        config: Selection settings (uses defaults if None)
        rng: Seed or numpy Generator for k-means

    Returns:
        Up to ``requested_count`` non-neutral colors, best contrast first.
        Empty when the image has no usable color at all.

    Raises:
        ValueError: Unknown algorithm or ``requested_count < 1``
    """
    cfg = config or SelectionConfig()
    algorithm = resolve_algorithm(algorithm)
    if requested_count < 1:
        raise ValueError(f"requested_count must be >= 1, got {requested_count}")

    candidates = run_algorithm(
        pixels,
        algorithm,
        candidate_count(requested_count, algorithm, cfg),
        rng=rng,
    )
    candidates = merge_duplicates(candidates)

    colorful = [c for c in candidates if not is_neutral_color(c)]

    scored = []
    for color in colorful:
        ratio = get_contrast_ratio(color, get_contrast_color(color.hex))
        if ratio >= cfg.min_contrast:
            scored.append((ratio, color))
    scored.sort(key=lambda item: item[0], reverse=True)

    logger.debug(
        "%s: %d candidates, %d non-neutral, %d with contrast >= %.1f",
        algorithm.value, len(candidates), len(colorful), len(scored), cfg.min_contrast,
    )

    if len(scored) < cfg.min_results and len(candidates) >= cfg.min_results:
        logger.debug("Too few legible colors; falling back to saturation ranking")
        by_saturation = sorted(colorful, key=get_saturation, reverse=True)
        return by_saturation[:requested_count]

    return [color for _, color in scored[:requested_count]]
