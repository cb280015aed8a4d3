# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Brandpick.

Serialization of brand colors and theme recommendations for the caller:

1. Tool Output -- JSON result for programmatic consumers
2. Context Block -- AppStream branding XML, or JSON / Markdown blocks

The delivery layer never modifies the colors it is given.
"""

from brandpick.runtime.serializers import (
    BlockFormat,
    SerializerFormat,
    to_branding_xml,
    to_context_block,
    to_tool_output,
)

__all__ = [
    "to_tool_output",
    "to_context_block",
    "to_branding_xml",
    "SerializerFormat",
    "BlockFormat",
]
