# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

from typing import Sequence

from tinct.space.base import ColorSpace

PALETTE_VERSION = "1.0"


def to_palette_dict(colors: Sequence[ColorSpace]) -> dict:
    """
    JSON-ready structure for a palette.

    Each entry keeps the color in its own space and adds the hex of its
    linear RGB export, so consumers that only understand hex still work.
    """
    entries = []
    for color in colors:
        entries.append({
            "space": type(color).__name__,
            "value": color.to_dict(),
            "hex": color.to_rgb().to_hex(),
        })
    return {
        "version": PALETTE_VERSION,
        "count": len(entries),
        "colors": entries,
    }
