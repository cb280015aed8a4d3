# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Formats a theme recommendation as a block that can be pasted into a
metadata file. The XML form is the AppStream ``<branding>`` element:

https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#tag-branding
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from brandpick.schema import BrandingRecommendation, Color


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_branding_xml(
    light: Optional[Color] = None,
    dark: Optional[Color] = None,
    *,
    indent: str = "  ",
) -> str:
    """Render an AppStream ``<branding>`` element.

    A missing scheme color falls back to the other one.

    Args:
        light: Primary color for the light color scheme.
        dark: Primary color for the dark color scheme.
        indent: Indentation of the ``<branding>`` element itself; the
            ``<color>`` children get one more level.

    Returns:
        XML snippet, e.g.::

              <branding>
                <color type="primary" scheme_preference="light">#ffd700</color>
                <color type="primary" scheme_preference="dark">#dc143c</color>
              </branding>

    Raises:
        ValueError: If neither color is given.
    """
    if light is None and dark is None:
        raise ValueError("At least one of light or dark is required")

    light_hex = (light or dark).hex
    dark_hex = (dark or light).hex
    child = indent + "  "

    return "\n".join([
        f"{indent}<branding>",
        f'{child}<color type="primary" scheme_preference="light">{light_hex}</color>',
        f'{child}<color type="primary" scheme_preference="dark">{dark_hex}</color>',
        f"{indent}</branding>",
    ])


def to_context_block(
    recommendation: BrandingRecommendation,
    *,
    format: BlockFormat = BlockFormat.XML,
    tag_name: str = "branding",
) -> str:
    """Serialize a theme recommendation as a context block.

    Args:
        recommendation: The light/dark recommendation to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        tag_name: Wrapper key (JSON) or comment tag (Markdown). The XML
            form always uses the AppStream ``branding`` element.

    Returns:
        Formatted block string.
    """
    if format == BlockFormat.XML:
        return to_branding_xml(
            recommendation.light.background,
            recommendation.dark.background,
            indent="",
        )
    elif format == BlockFormat.JSON:
        return json.dumps({tag_name: recommendation.to_dict()}, indent=2)
    else:
        return _to_markdown(recommendation, tag_name)


def _to_markdown(recommendation: BrandingRecommendation, tag_name: str) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(recommendation.to_dict(), indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
