# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Luminance, saturation and WCAG contrast.

References:
- WCAG 2.0 relative luminance and contrast ratio:
  https://www.w3.org/TR/WCAG20/#relativeluminancedef
- Perceived brightness: https://www.w3.org/TR/AERT/#color-contrast

Luminance here uses the WCAG 2.0 gamma threshold (0.03928), which differs
slightly from the 0.04045 used by the OKLab chain in ``colorspace``.
"""

from __future__ import annotations

from brandpick.schema import BLACK, WHITE, Color, ContrastLevel, ContrastRating
from brandpick.measure.colorspace import hex_to_rgb


# WCAG thresholds
AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

# Neutral color thresholds
NEUTRAL_MAX_SATURATION = 0.15
NEUTRAL_MAX_LUMINANCE = 0.9
NEUTRAL_MIN_LUMINANCE = 0.1

# Perceived brightness above which black text reads better
_BRIGHTNESS_THRESHOLD = 125


def _channel_to_linear(value: int) -> float:
    v = value / 255
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


def get_luminance(color: Color) -> float:
    """WCAG relative luminance in [0, 1]."""
    return (
        0.2126 * _channel_to_linear(color.r)
        + 0.7152 * _channel_to_linear(color.g)
        + 0.0722 * _channel_to_linear(color.b)
    )


def get_saturation(color: Color) -> float:
    """
    HSV-style saturation ``(max - min) / max`` over normalized channels.

    Returns 0 for black instead of dividing by zero.
    """
    hi = max(color.r, color.g, color.b) / 255
    lo = min(color.r, color.g, color.b) / 255
    if hi == 0:
        return 0.0
    return (hi - lo) / hi


def is_neutral_color(color: Color) -> bool:
    """
    True for colors unusable as a brand color.

    A color is neutral if it is grayish (low saturation), nearly white,
    or nearly black.
    """
    saturation = get_saturation(color)
    luminance = get_luminance(color)
    return (
        saturation < NEUTRAL_MAX_SATURATION
        or luminance > NEUTRAL_MAX_LUMINANCE
        or luminance < NEUTRAL_MIN_LUMINANCE
    )


def get_contrast_ratio(color1: Color, color2: Color) -> float:
    """WCAG contrast ratio between two colors, from 1.0 to 21.0."""
    lum1 = get_luminance(color1)
    lum2 = get_luminance(color2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def get_contrast_rating(ratio: float) -> ContrastRating:
    """WCAG AA/AAA conformance for normal and large text."""
    return ContrastRating(
        aa=ContrastLevel(normal=ratio >= AA_NORMAL, large=ratio >= AA_LARGE),
        aaa=ContrastLevel(normal=ratio >= AAA_NORMAL, large=ratio >= AAA_LARGE),
    )


def get_contrast_color(hex_color: str) -> Color:
    """
    Pick black or white text for a background using perceived brightness.

    This is the single-branch YIQ heuristic, not a contrast-ratio search.

    Raises:
        ValueError: If ``hex_color`` is not a valid hex color
    """
    color = hex_to_rgb(hex_color)
    if color is None:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    brightness = (299 * color.r + 587 * color.g + 114 * color.b) / 1000
    return BLACK if brightness > _BRIGHTNESS_THRESHOLD else WHITE


def best_text_contrast(color: Color) -> float:
    """Highest contrast ratio achievable against pure black or pure white."""
    return max(get_contrast_ratio(color, WHITE), get_contrast_ratio(color, BLACK))
