# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → OKLab → OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

The array functions are pure NumPy and work on shapes (..., 3).
The Color-level helpers (hex parsing, OKLCH round-trip, RGB distance)
sit on top of them.
"""

from __future__ import annotations

import math
import re
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from brandpick.schema import Color, OKLCHColor


# =============================================================================
# Hex Encoding
# =============================================================================

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def round_channel(value: float) -> int:
    """Round half up, so 127.5 becomes 128 rather than the banker's 128/127."""
    return int(math.floor(value + 0.5))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to a canonical hex string.

    Each channel is rounded to the nearest integer (half up). Callers are
    expected to pass values already in 0-255.

    Returns:
        Lowercase hex string like "#3941c8"
    """
    return "#" + "".join(f"{round_channel(v):02x}" for v in (r, g, b))


def hex_to_rgb(hex_color: str) -> Optional[Color]:
    """
    Parse a hex color string.

    Accepts an optional leading "#" and exactly six hex digits in any case.

    Returns:
        Color, or None if the string is malformed
    """
    m = _HEX_RE.fullmatch(hex_color)
    if not m:
        return None
    r, g, b = (int(group, 16) for group in m.groups())
    return Color(r, g, b)


def color_distance(c1: Color, c2: Color) -> float:
    """
    Euclidean distance in raw 0-255 RGB space.

    A clustering heuristic only, not a perceptual metric.
    """
    return math.sqrt((c1.r - c2.r) ** 2 + (c1.g - c2.g) ** 2 + (c1.b - c2.b) ** 2)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Negative values would give NaN in the power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)
_M1.setflags(write=False)
_M2.setflags(write=False)
_M1_INV.setflags(write=False)
_M2_INV.setflags(write=False)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Signed cube root keeps out-of-gamut colors finite
    lms_cbrt = np.sign(lms) * np.abs(lms) ** (1.0 / 3.0)

    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    lab = np.asarray(lab, dtype=np.float64)

    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3

    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    # A tiny negative angle can wrap to exactly 360.0 in floating point
    H = np.where(H >= 360.0, 0.0, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H)
        H is in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Full chain: sRGB ↔ OKLCH
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH

    Args:
        srgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        - L: Lightness [0, 1]
        - C: Chroma [0, ~0.4 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    return oklab_to_oklch(linear_rgb_to_oklab(srgb_to_linear(srgb)))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Full chain: OKLCH → OKLab → Linear RGB → sRGB

    Returns:
        Array of shape (..., 3) with sRGB values clipped to [0, 1]
    """
    linear = oklab_to_linear_rgb(oklch_to_oklab(lch))
    return np.clip(linear_to_srgb(linear), 0.0, 1.0)


def srgb_uint8_to_oklch(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert uint8 sRGB pixels [0,255] of shape (..., 3) to OKLCH."""
    srgb_float = np.asarray(pixels).astype(np.float64) / 255.0
    return srgb_to_oklch(srgb_float)


# =============================================================================
# Color ↔ OKLCHColor
# =============================================================================

# Chroma of an sRGB gray is ~1e-8; real colors are orders of magnitude above
_GRAY_CHROMA = 1e-6


def rgb_to_oklch(color: Color) -> OKLCHColor:
    """
    Convert a Color to OKLCH.

    Returns:
        OKLCHColor with L clipped to [0, 1] (white lands a hair above 1.0
        in floating point). Grays (r == g == b) get chroma and hue 0.
    """
    L, C, H = srgb_uint8_to_oklch(np.array(color.rgb, dtype=np.uint8))
    if C < _GRAY_CHROMA:
        # a/b of a gray are rounding noise
        C, H = 0.0, 0.0
    return OKLCHColor(
        L=float(np.clip(L, 0.0, 1.0)),
        C=float(C),
        H=float(H),
    )


def oklch_to_rgb(oklch: OKLCHColor) -> Color:
    """
    Convert OKLCH back to an 8-bit Color.

    Out-of-gamut inputs are clamped channel-wise rather than rejected.
    Round-trips of in-gamut colors are exact up to 8-bit rounding.
    """
    lch = np.array([oklch.L, oklch.C, oklch.H], dtype=np.float64)
    srgb = oklch_to_srgb(lch) * 255.0
    r, g, b = (min(255, max(0, round_channel(v))) for v in srgb)
    return Color(r, g, b)


def oklch_to_hex(L: float, C: float, H: float) -> str:
    """Convert OKLCH values to a hex color string."""
    lch = np.array([L, C, H], dtype=np.float64)
    r, g, b = oklch_to_srgb(lch) * 255.0
    return rgb_to_hex(r, g, b)
