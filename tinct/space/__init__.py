# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Color spaces for Tinct.

Linear RGB is the hub; Hsv, Srgb and YCbCr convert to and from it.
"""

from tinct.space.base import (
    EPSILON,
    TAU,
    ColorSpace,
    default_rng,
    from_rgb,
    is_close_to,
    seed_default_rng,
    to_rgb,
)
from tinct.space.rgb import FrozenRgb, Rgb, gray, grey, rgb
from tinct.space.hsv import Hsv, hsv
from tinct.space.srgb import Srgb, linear_to_srgb, srgb, srgb_to_linear
from tinct.space.ycbcr import YCbCr, ycbcr

__all__ = [
    # Contract
    "ColorSpace",
    "from_rgb",
    "to_rgb",
    "is_close_to",
    "EPSILON",
    "TAU",
    # Random source
    "default_rng",
    "seed_default_rng",
    # Spaces
    "Rgb",
    "FrozenRgb",
    "rgb",
    "gray",
    "grey",
    "Hsv",
    "hsv",
    "Srgb",
    "srgb",
    "srgb_to_linear",
    "linear_to_srgb",
    "YCbCr",
    "ycbcr",
]
