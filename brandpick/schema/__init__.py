# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Schema definitions for brand color extraction.

All types in this module are immutable (frozen dataclasses or enums).
They are created per call and owned by the caller that created them.
"""

from brandpick.schema.color import (
    ALGORITHMS,
    BLACK,
    WHITE,
    Algorithm,
    AlgorithmInfo,
    BrandingRecommendation,
    Color,
    ContrastLevel,
    ContrastRating,
    IconContrast,
    OKLCHColor,
    ThemeRecommendation,
    resolve_algorithm,
)

__all__ = [
    # Core types
    "Color",
    "OKLCHColor",
    "BLACK",
    "WHITE",
    # Contrast
    "ContrastLevel",
    "ContrastRating",
    # Recommendations
    "ThemeRecommendation",
    "BrandingRecommendation",
    "IconContrast",
    # Algorithm registry
    "Algorithm",
    "AlgorithmInfo",
    "ALGORITHMS",
    "resolve_algorithm",
]
