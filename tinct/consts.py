# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Named colors.

The CSS / SVG color keywords as linear ``Rgb`` constants. The values are
the raw 8-bit keyword values scaled to [0, 1]; no gamma decoding is done.
Gray keywords have GREY aliases.

The constants are read-only (``FrozenRgb``): their setters raise. Use
``with_*``, a conversion, or ``lookup`` to get a mutable copy.
"""

from __future__ import annotations

from tinct.space.rgb import FrozenRgb, Rgb

_c = FrozenRgb.from_u8

ALICE_BLUE = _c(240, 248, 255)
ANTIQUE_WHITE = _c(250, 235, 215)
AQUA = _c(0, 255, 255)
AQUA_MARINE = _c(127, 255, 212)
AZURE = _c(240, 255, 255)
BEIGE = _c(245, 245, 220)
BISQUE = _c(255, 228, 196)
BLACK = _c(0, 0, 0)
BLANCHED_ALMOND = _c(255, 235, 205)
BLUE = _c(0, 0, 255)
BLUE_VIOLET = _c(138, 43, 226)
BROWN = _c(165, 42, 42)
BURLY_WOOD = _c(222, 184, 135)
CADET_BLUE = _c(95, 158, 160)
CHARTREUSE = _c(127, 255, 0)
CHOCOLATE = _c(210, 105, 30)
CORAL = _c(255, 127, 80)
CORNFLOWER_BLUE = _c(100, 149, 237)
CORNSILK = _c(255, 248, 220)
CRIMSON = _c(220, 20, 60)
CYAN = _c(0, 255, 255)
DARK_BLUE = _c(0, 0, 139)
DARK_CYAN = _c(0, 139, 139)
DARK_GOLDEN_ROD = _c(184, 134, 11)
DARK_GRAY = _c(169, 169, 169)
DARK_GREEN = _c(0, 100, 0)
DARK_GREY = DARK_GRAY
DARK_KHAKI = _c(189, 183, 107)
DARK_MAGENTA = _c(139, 0, 139)
DARK_OLIVEGREEN = _c(85, 107, 47)
DARK_ORANGE = _c(255, 140, 0)
DARK_ORCHID = _c(153, 50, 204)
DARK_RED = _c(139, 0, 0)
DARK_SALMON = _c(233, 150, 122)
DARK_SEA_GREEN = _c(143, 188, 143)
DARK_SLATE_BLUE = _c(72, 61, 139)
DARK_SLATE_GRAY = _c(47, 79, 79)
DARK_SLATE_GREY = DARK_SLATE_GRAY
DARK_TURQUOISE = _c(0, 206, 209)
DARK_VIOLET = _c(148, 0, 211)
DEEP_PINK = _c(255, 20, 147)
DEEP_SKY_BLUE = _c(0, 191, 255)
DIM_GRAY = _c(105, 105, 105)
DIM_GREY = DIM_GRAY
DODGER_BLUE = _c(30, 144, 255)
FIRE_BRICK = _c(178, 34, 34)
FLORAL_WHITE = _c(255, 250, 240)
FOREST_GREEN = _c(34, 139, 34)
FUCHSIA = _c(255, 0, 255)
GAINSBORO = _c(220, 220, 220)
GHOST_WHITE = _c(248, 248, 255)
GOLD = _c(255, 215, 0)
GOLDEN_ROD = _c(218, 165, 32)
GRAY = _c(128, 128, 128)
GREY = GRAY
GREEN = _c(0, 255, 0)
GREEN_YELLOW = _c(173, 255, 47)
HONEYDEW = _c(240, 255, 240)
HOT_PINK = _c(255, 105, 180)
INDIAN_RED = _c(205, 92, 92)
INDIGO = _c(75, 0, 130)
IVORY = _c(255, 255, 240)
KHAKI = _c(240, 230, 140)
LAVENDER = _c(230, 230, 250)
LAVENDER_BLUSH = _c(255, 240, 245)
LAWN_GREEN = _c(124, 252, 0)
LEMON_CHIFFON = _c(255, 250, 205)
LIGHT_BLUE = _c(173, 216, 230)
LIGHT_CORAL = _c(240, 128, 128)
LIGHT_CYAN = _c(224, 255, 255)
LIGHT_GOLDEN_ROD_YELLOW = _c(250, 250, 210)
LIGHT_GRAY = _c(211, 211, 211)
LIGHT_GREEN = _c(144, 238, 144)
LIGHT_GREY = LIGHT_GRAY
LIGHT_PINK = _c(255, 182, 193)
LIGHT_SALMON = _c(255, 160, 122)
LIGHT_SEA_GREEN = _c(32, 178, 170)
LIGHT_SKY_BLUE = _c(135, 206, 250)
LIGHT_SLATE_GRAY = _c(119, 136, 153)
LIGHT_SLATE_GREY = LIGHT_SLATE_GRAY
LIGHT_STEEL_BLUE = _c(176, 196, 222)
LIGHT_YELLOW = _c(255, 255, 224)
LIME = _c(0, 255, 0)
LIME_GREEN = _c(50, 205, 50)
LINEN = _c(250, 240, 230)
MAGENTA = _c(255, 0, 255)
MAROON = _c(128, 0, 0)
MEDIUM_AQUA_MARINE = _c(102, 205, 170)
MEDIUM_BLUE = _c(0, 0, 205)
MEDIUM_ORCHID = _c(186, 85, 211)
MEDIUM_PURPLE = _c(147, 112, 219)
MEDIUM_SEA_GREEN = _c(60, 179, 113)
MEDIUM_SLATE_BLUE = _c(123, 104, 238)
MEDIUM_SPRING_GREEN = _c(0, 250, 154)
MEDIUM_TURQUOISE = _c(72, 209, 204)
MEDIUM_VIOLET_RED = _c(199, 21, 133)
MIDNIGHT_BLUE = _c(25, 25, 112)
MINT_CREAM = _c(245, 255, 250)
MISTY_ROSE = _c(255, 228, 225)
MOCCASIN = _c(255, 228, 181)
NAVAJO_WHITE = _c(255, 222, 173)
NAVY = _c(0, 0, 128)
OLD_LACE = _c(253, 245, 230)
OLIVE = _c(128, 128, 0)
OLIVE_DRAB = _c(107, 142, 35)
ORANGE = _c(255, 165, 0)
ORANGE_RED = _c(255, 69, 0)
ORCHID = _c(218, 112, 214)
PALE_GOLDEN_ROD = _c(238, 232, 170)
PALE_GREEN = _c(152, 251, 152)
PALE_TURQUOISE = _c(175, 238, 238)
PALE_VIOLET_RED = _c(219, 112, 147)
PAPAYA_WHIP = _c(255, 239, 213)
PEACH_PUFF = _c(255, 218, 185)
PERU = _c(205, 133, 63)
PINK = _c(255, 192, 203)
PLUM = _c(221, 160, 221)
POWDER_BLUE = _c(176, 224, 230)
PURPLE = _c(128, 0, 128)
RED = _c(255, 0, 0)
ROSY_BROWN = _c(188, 143, 143)
ROYAL_BLUE = _c(65, 105, 225)
SADDLE_BROWN = _c(139, 69, 19)
SALMON = _c(250, 128, 114)
SANDY_BROWN = _c(244, 164, 96)
SEA_GREEN = _c(46, 139, 87)
SEA_SHELL = _c(255, 245, 238)
SIENNA = _c(160, 82, 45)
SILVER = _c(192, 192, 192)
SKY_BLUE = _c(135, 206, 235)
SLATE_BLUE = _c(106, 90, 205)
SLATE_GRAY = _c(112, 128, 144)
SLATE_GREY = SLATE_GRAY
SNOW = _c(255, 250, 250)
SPRING_GREEN = _c(0, 255, 127)
STEEL_BLUE = _c(70, 130, 180)
TAN = _c(210, 180, 140)
TEAL = _c(0, 128, 128)
THISTLE = _c(216, 191, 216)
TOMATO = _c(255, 99, 71)
TURQUOISE = _c(64, 224, 208)
VIOLET = _c(238, 130, 238)
WHEAT = _c(245, 222, 179)
WHITE = _c(255, 255, 255)
WHITE_SMOKE = _c(245, 245, 245)
YELLOW = _c(255, 255, 0)
YELLOW_GREEN = _c(154, 205, 50)


def _css_key(name: str) -> str:
    return name.replace("_", "").replace("-", "").replace(" ", "").lower()


NAMED_COLORS: dict[str, Rgb] = {
    _css_key(_name): _value
    for _name, _value in list(globals().items())
    if _name.isupper() and isinstance(_value, Rgb)
}


def lookup(name: str) -> Rgb:
    """
    Find a named color, ignoring case, spaces, hyphens and underscores.

    Returns a copy, so callers may mutate the result freely.

    Raises:
        KeyError: If no color has that name.
    """
    try:
        color = NAMED_COLORS[_css_key(name)]
    except KeyError:
        raise KeyError(f"Unknown color name: {name!r}") from None
    return Rgb(color.r, color.g, color.b)


__all__ = [
    _name for _name in list(globals())
    if _name.isupper() and isinstance(globals()[_name], Rgb)
] + ["NAMED_COLORS", "lookup"]
