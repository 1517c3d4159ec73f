# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Palette export for Tinct."""

from tinct.runtime.serializers import (
    PALETTE_VERSION,
    BlockFormat,
    to_palette_block,
    to_palette_dict,
)

__all__ = [
    "to_palette_dict",
    "to_palette_block",
    "BlockFormat",
    "PALETTE_VERSION",
]
