# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Serializers for brand color results.

All serializers preserve the colors exactly -- no modification or inference.
"""

from brandpick.runtime.serializers.base import SerializerFormat
from brandpick.runtime.serializers.block import BlockFormat, to_branding_xml, to_context_block
from brandpick.runtime.serializers.tool import to_tool_output

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "to_tool_output",
    "to_context_block",
    "to_branding_xml",
]
