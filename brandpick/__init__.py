# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Brandpick -- Accessible brand color extraction for app metadata.

Extracts a small ranked set of brand colors from decoded image pixels,
keeps only those that can host legible text, and recommends light and
dark scheme colors for AppStream branding.

Quick start::

    from brandpick import analyze_image, recommend_themes, to_branding_xml

    colors = analyze_image(pixels, "vibrant")
    themes = recommend_themes(colors)
    print(to_branding_xml(themes.light.background, themes.dark.background))
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from brandpick.measure import (
    SelectionConfig,
    analyze_image,
    icon_contrast,
    recommend_themes,
    select_brand_colors,
)
from brandpick.measure.sample import sample_pixels
from brandpick.algorithms import run_algorithm
from brandpick.runtime import to_branding_xml, to_tool_output
from brandpick.schema import (
    ALGORITHMS,
    Algorithm,
    BrandingRecommendation,
    Color,
    ContrastRating,
    OKLCHColor,
    ThemeRecommendation,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "analyze_image",
    "sample_pixels",
    "run_algorithm",
    "select_brand_colors",
    "SelectionConfig",
    "recommend_themes",
    "icon_contrast",
    # Output
    "to_branding_xml",
    "to_tool_output",
    # Types (commonly needed)
    "Color",
    "OKLCHColor",
    "ContrastRating",
    "ThemeRecommendation",
    "BrandingRecommendation",
    "Algorithm",
    "ALGORITHMS",
    # Version
    "__version__",
]
