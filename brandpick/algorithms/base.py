# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""Shared helpers for extraction algorithms."""

from __future__ import annotations

from collections import Counter
from typing import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from brandpick.schema import Color
from brandpick.measure.colorspace import round_channel

# (pixels, count) -> ranked colors
Extractor = Callable[[Sequence[Color], int], list[Color]]


def count_colors(pixels: Sequence[Color]) -> Counter[Color]:
    """
    Count exact pixel values.

    Colors hash and compare by RGB only, so this groups by hex. The
    counter keeps first-occurrence order, which ranking relies on for
    stable tie-breaks.
    """
    return Counter(pixels)


def to_array(pixels: Sequence[Color]) -> NDArray[np.int64]:
    """Stack Colors into an (N, 3) integer array."""
    return np.array([p.rgb for p in pixels], dtype=np.int64).reshape(-1, 3)


def mean_color(rgb: NDArray[np.int64]) -> Color:
    """Half-up rounded channel mean of a non-empty (N, 3) array, weighted by N."""
    r, g, b = rgb.sum(axis=0) / len(rgb)
    return Color(round_channel(r), round_channel(g), round_channel(b), count=len(rgb))
