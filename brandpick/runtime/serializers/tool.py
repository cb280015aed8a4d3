# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Tool output serializer.

Formats extracted brand colors (and optionally a theme recommendation) as
structured JSON for programmatic consumers.
"""

from __future__ import annotations

import json
from typing import Optional, Sequence, Union

from brandpick.schema import Algorithm, BrandingRecommendation, Color
from brandpick.runtime.serializers.base import SerializerFormat
from brandpick.measure.colorspace import rgb_to_oklch


def to_tool_output(
    colors: Sequence[Color],
    recommendation: Optional[BrandingRecommendation] = None,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    algorithm: Optional[Union[Algorithm, str]] = None,
    include_oklch: bool = False,
) -> str:
    """Serialize brand colors as tool output JSON.

    Args:
        colors: Brand colors, best first.
        recommendation: Optional light/dark recommendation.
        format: Output format (JSON or JSON_PRETTY).
        algorithm: Algorithm that produced the colors, echoed back.
        include_oklch: Add a compact ``L0.63/C0.22/H20`` string per color.

    Returns:
        JSON string.

    Example::

        {
          "tool": "brandpick_brand_colors",
          "algorithm": "vibrant",
          "colors": [
            { "hex": "#ffd700", "count": 120 },
            { "hex": "#dc143c", "count": 80 }
          ],
          "themes": {
            "light": { "background": "#ffd700", "foreground": "#000000", ... },
            "dark": { "background": "#dc143c", "foreground": "#ffffff", ... }
          }
        }
    """
    data: dict = {"tool": "brandpick_brand_colors"}

    if algorithm is not None:
        data["algorithm"] = algorithm.value if isinstance(algorithm, Algorithm) else algorithm

    data["colors"] = [_format_color(c, include_oklch) for c in colors]

    if recommendation is not None:
        data["themes"] = recommendation.to_dict()

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def _format_oklch(color: Color) -> str:
    """Format as compact OKLCH string."""
    lch = rgb_to_oklch(color)
    h_str = f"/H{lch.H:.0f}" if not lch.is_achromatic else ""
    return f"L{lch.L:.2f}/C{lch.C:.2f}{h_str}"


def _format_color(color: Color, include_oklch: bool) -> dict:
    entry: dict = {"hex": color.hex}
    if include_oklch:
        entry["oklch"] = _format_oklch(color)
    if color.count is not None:
        entry["count"] = color.count
    return entry
