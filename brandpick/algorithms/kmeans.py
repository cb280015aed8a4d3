# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
K-means clustering in RGB space.

Centroids are seeded from distinct random pixels, so results vary between
runs unless a seed or Generator is supplied.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from brandpick.schema import Color
from brandpick.algorithms.base import to_array
from brandpick.measure.colorspace import round_channel

logger = logging.getLogger(__name__)

RandomSource = Union[int, np.random.Generator, None]

MAX_ITERATIONS = 10


def _round_means(sums: NDArray[np.float64], sizes: NDArray[np.int64]) -> NDArray[np.int64]:
    """Half-up rounded per-cluster means (non-empty clusters only)."""
    return np.floor(sums / sizes[:, np.newaxis] + 0.5).astype(np.int64)


def kmeans_colors(
    pixels: Sequence[Color],
    k: int = 6,
    max_iterations: int = MAX_ITERATIONS,
    rng: RandomSource = None,
) -> list[Color]:
    """
    Cluster pixels with k-means and return the cluster centroids.

    Each round assigns every pixel to its nearest centroid (Euclidean RGB;
    ties go to the lowest centroid index), then moves each non-empty
    cluster's centroid to its rounded channel mean. Iteration stops after
    ``max_iterations`` rounds or as soon as no centroid moves.

    Args:
        pixels: Sampled pixels
        k: Number of clusters (clamped to the number of pixels)
        max_iterations: Upper bound on assignment/update rounds
        rng: Seed or numpy Generator for centroid seeding. None draws
            fresh OS entropy, so the default is nondeterministic.

    Returns:
        Centroids of non-empty clusters ordered by cluster size
        descending. May hold fewer than ``k`` colors.
    """
    if not pixels:
        return []

    generator = np.random.default_rng(rng)
    data = to_array(pixels)
    n = len(data)
    k = min(k, n)

    # Distinct indices, not distinct colors: duplicates may seed twice
    seeds = generator.choice(n, size=k, replace=False)
    centroids = data[seeds].copy()
    labels = np.zeros(n, dtype=np.int64)

    for iteration in range(max_iterations):
        # Squared distances rank the same as color_distance
        dists = np.sum(
            (data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2,
            axis=2,
        )
        labels = np.argmin(dists, axis=1)

        sizes = np.bincount(labels, minlength=k)
        occupied = sizes > 0
        sums = np.zeros((k, 3), dtype=np.float64)
        np.add.at(sums, labels, data)

        updated = centroids.copy()
        updated[occupied] = _round_means(sums[occupied], sizes[occupied])

        if np.array_equal(updated, centroids):
            logger.debug("k-means converged after %d iterations", iteration + 1)
            break
        centroids = updated

    sizes = np.bincount(labels, minlength=k)
    order = sorted(
        (i for i in range(k) if sizes[i] > 0),
        key=lambda i: sizes[i],
        reverse=True,
    )
    return [
        Color(*(round_channel(v) for v in centroids[i]), count=int(sizes[i]))
        for i in order
    ]
