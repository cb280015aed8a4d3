# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Light and dark theme recommendation.

Given the final brand colors, recommends one background per color scheme
and the black or white foreground that reads best on it.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from brandpick.schema import (
    BLACK,
    WHITE,
    BrandingRecommendation,
    Color,
    IconContrast,
    ThemeRecommendation,
)
from brandpick.measure.contrast import (
    AA_NORMAL,
    best_text_contrast,
    get_contrast_rating,
    get_contrast_ratio,
    get_luminance,
)
from brandpick.measure.sample import PixelBuffer, average_color


def recommend_foreground(background: Color) -> ThemeRecommendation:
    """
    Pair a background with pure black or pure white text.

    White wins only when strictly better; ties go to black.
    """
    with_white = get_contrast_ratio(background, WHITE)
    with_black = get_contrast_ratio(background, BLACK)
    if with_white > with_black:
        foreground, ratio = WHITE, with_white
    else:
        foreground, ratio = BLACK, with_black

    return ThemeRecommendation(
        background=background,
        foreground=foreground,
        contrast_ratio=ratio,
        rating=get_contrast_rating(ratio),
    )


def recommend_themes(colors: Sequence[Color]) -> BrandingRecommendation:
    """
    Recommend brand colors for the light and dark color schemes.

    Colors whose best text contrast reaches WCAG AA (4.5) are preferred;
    if none does, all colors are considered. Among those, the lightest
    color goes to the light scheme and the darkest to the dark scheme.
    A single color serves both.

    Args:
        colors: Brand colors, e.g. from ``select_brand_colors``

    Returns:
        BrandingRecommendation with a foreground and rating per scheme

    Raises:
        ValueError: If ``colors`` is empty
    """
    if not colors:
        raise ValueError("Cannot recommend themes from an empty color list")

    good = [c for c in colors if best_text_contrast(c) >= AA_NORMAL]
    pool = good or list(colors)

    # max()/min() keep the first of equal luminances
    light = max(pool, key=get_luminance)
    dark = min(pool, key=get_luminance)

    return BrandingRecommendation(
        light=recommend_foreground(light),
        dark=recommend_foreground(dark),
    )


def icon_contrast(
    icon_pixels: PixelBuffer,
    background: Union[Color, str],
) -> Optional[IconContrast]:
    """
    Contrast between an icon's average color and a background.

    Args:
        icon_pixels: Decoded icon buffer (RGBA, transparency respected)
        background: Background Color or hex string

    Returns:
        IconContrast, or None if the icon has no opaque pixels

    Raises:
        ValueError: If ``background`` is a malformed hex string
    """
    if isinstance(background, str):
        background = Color.from_hex(background)

    icon_color = average_color(icon_pixels)
    if icon_color is None:
        return None

    return IconContrast(
        icon_color=icon_color,
        background=background,
        contrast_ratio=get_contrast_ratio(icon_color, background),
    )
