# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Serializers for palettes.

Each serializer formats a sequence of colors for a specific consumer.
All serializers preserve the colors exactly -- no modification.
"""

from tinct.runtime.serializers.base import PALETTE_VERSION, to_palette_dict
from tinct.runtime.serializers.block import BlockFormat, to_palette_block

__all__ = [
    "PALETTE_VERSION",
    "to_palette_dict",
    "BlockFormat",
    "to_palette_block",
]
