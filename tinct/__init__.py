# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Tinct -- Color values as numbers.

Conversions between linear RGB, HSV, sRGB and YCbCr, plus procedural
color generation (complements, triads, analogs, tints, shades, tones).
Colors are small value types; image buffers, channel order and alpha are
out of scope.

Quick start::

    import math

    from tinct import BLUE, GREEN, RED, Hsv, from_rgb

    yellow = RED + GREEN
    blues = from_rgb(BLUE, Hsv).analogs(5, math.radians(30))
    yellows = [c.complement() for c in blues]
    darker_red = Hsv.from_rgb(RED).shade(0.3)
"""

from __future__ import annotations

__version__ = "0.1.0"

from tinct.consts import *  # noqa: F401,F403
from tinct import consts as _consts
from tinct.consts import NAMED_COLORS, lookup
from tinct.space import (
    ColorSpace,
    FrozenRgb,
    Hsv,
    Rgb,
    Srgb,
    YCbCr,
    from_rgb,
    gray,
    grey,
    hsv,
    is_close_to,
    rgb,
    seed_default_rng,
    srgb,
    to_rgb,
    ycbcr,
)

__all__ = [
    # Conversion contract
    "ColorSpace",
    "from_rgb",
    "to_rgb",
    "is_close_to",
    # Types and constructors
    "Rgb",
    "FrozenRgb",
    "rgb",
    "gray",
    "grey",
    "Hsv",
    "hsv",
    "Srgb",
    "srgb",
    "YCbCr",
    "ycbcr",
    # Named colors
    "NAMED_COLORS",
    "lookup",
    # Random source
    "seed_default_rng",
    # Version
    "__version__",
] + [_n for _n in _consts.__all__ if isinstance(getattr(_consts, _n), Rgb)]
