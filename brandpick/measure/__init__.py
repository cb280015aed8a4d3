# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Measurement core for Brandpick.

Color math, pixel sampling, brand color selection and theme
recommendation. Everything here is pure and synchronous.
"""

from brandpick.measure.extract import analyze_image
from brandpick.measure.selector import SelectionConfig, select_brand_colors
from brandpick.measure.themes import icon_contrast, recommend_foreground, recommend_themes

__all__ = [
    "analyze_image",
    "select_brand_colors",
    "SelectionConfig",
    "recommend_themes",
    "recommend_foreground",
    "icon_contrast",
]
