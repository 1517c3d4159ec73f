# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
The linear RGB color space.

Rgb is the hub representation: every other color space converts to and
from it. Channel values are clamped into [0, 1] on construction and on
every setter, so arithmetic on colors saturates instead of overflowing:

    RED + GREEN == YELLOW
    RED + RED == RED
"""

from __future__ import annotations

import logging
import re
from dataclasses import FrozenInstanceError, dataclass
from typing import Iterator, Optional, Union

import numpy as np
from numpy.typing import NDArray

from tinct.space.base import EPSILON, clamp, is_approx_eq, is_close_to, resolve_rng

logger = logging.getLogger(__name__)


# ITU-R BT.709 luma coefficients
LUMA_BT709 = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _u8_to_unit(c: int) -> float:
    c = int(c) & 0xFF
    if c == 255:
        return 1.0
    if c == 0:
        return 0.0
    return c / 255.0


@dataclass(slots=True, eq=False)
class Rgb:
    """
    A color in linear RGB.

    Attributes:
        r: Red channel [0, 1]
        g: Green channel [0, 1]
        b: Blue channel [0, 1]

    Out-of-range inputs are clamped, never rejected::

        Rgb(-10.0, 0.0, 1000.0) == BLUE
    """
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        self.r = clamp(self.r, 0.0, 1.0)
        self.g = clamp(self.g, 0.0, 1.0)
        self.b = clamp(self.b, 0.0, 1.0)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> Rgb:
        """Identity conversion; returns an equal, independent value."""
        return Rgb(rgb.r, rgb.g, rgb.b)

    def to_rgb(self) -> Rgb:
        return Rgb(self.r, self.g, self.b)

    @classmethod
    def from_u8(cls, r: int, g: int, b: int) -> Rgb:
        """
        Create from 8-bit channel values.

        0 and 255 map exactly to 0.0 and 1.0.
        """
        return cls(_u8_to_unit(r), _u8_to_unit(g), _u8_to_unit(b))

    @classmethod
    def from_u32(cls, packed: int) -> Rgb:
        """
        Create from a packed integer.

        The lower 24 bits are read as three 8-bit values, from low to
        high, for B, G and R respectively: ``Rgb.from_u32(0x00FFFF) == CYAN``.
        """
        return cls.from_u8((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)

    @classmethod
    def from_hex(cls, hex_color: str) -> Rgb:
        """
        Parse a hex string like ``"#3941C8"``, ``"3941C8"`` or ``"#39C"``.

        Raises:
            ValueError: If the string is not a 3 or 6 digit hex color.
        """
        m = _HEX_RE.match(hex_color.strip())
        if not m:
            raise ValueError(f"Invalid hex color: {hex_color!r}")
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return cls.from_u32(int(digits, 16))

    @classmethod
    def rand(cls, rng: Optional[np.random.Generator] = None) -> Rgb:
        """
        A random color, each channel drawn independently and uniformly.

        Not perceptually uniform: a batch of these rarely looks like a
        coherent palette. Use ``rand_offset`` or the Hsv generators for that.
        """
        r, g, b = resolve_rng(rng).random(3)
        return cls(r, g, b)

    # -------------------------------------------------------------------------
    # Channels
    # -------------------------------------------------------------------------

    @property
    def red(self) -> float:
        return self.r

    @property
    def green(self) -> float:
        return self.g

    @property
    def blue(self) -> float:
        return self.b

    def with_red(self, r: float) -> Rgb:
        return Rgb(r, self.g, self.b)

    def with_green(self, g: float) -> Rgb:
        return Rgb(self.r, g, self.b)

    def with_blue(self, b: float) -> Rgb:
        return Rgb(self.r, self.g, b)

    def set_red(self, r: float) -> None:
        self.r = clamp(r, 0.0, 1.0)

    def set_green(self, g: float) -> None:
        self.g = clamp(g, 0.0, 1.0)

    def set_blue(self, b: float) -> None:
        self.b = clamp(b, 0.0, 1.0)

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rgb):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    __hash__ = None

    def is_close_to(self, other: Rgb, max_diff: float) -> bool:
        return is_close_to(self, other, max_diff)

    # -------------------------------------------------------------------------
    # Derived metrics
    # -------------------------------------------------------------------------

    @property
    def hue(self) -> float:
        """
        Hue in radians, [0, 2π).

        0 for achromatic colors, where hue carries no information.
        """
        r, g, b = self.r, self.g, self.b
        mx = max(r, g, b)
        mn = min(r, g, b)
        if is_approx_eq(mn, mx):
            return 0.0

        c = mx - mn
        if mx == r:
            sector = ((g - b) / c) % 6.0
        elif mx == g:
            sector = (b - r) / c + 2.0
        else:
            sector = (r - g) / c + 4.0
        return float(np.radians((sector * 60.0 + 360.0) % 360.0))

    @property
    def saturation(self) -> float:
        """HSV saturation, 0 for achromatic colors."""
        mx = max(self.r, self.g, self.b)
        mn = min(self.r, self.g, self.b)
        if is_approx_eq(mx, mn):
            return 0.0
        return 1.0 - mn / mx

    @property
    def brightness(self) -> float:
        """HSV value: the largest channel."""
        return float(self.as_array().max())

    @property
    def luminance(self) -> float:
        """Relative luminance with BT.709 weights."""
        return float(np.dot(self.as_array(), LUMA_BT709))

    # Historical spelling, kept for callers that use it.
    lunimance = luminance

    # -------------------------------------------------------------------------
    # Procedural generation
    # -------------------------------------------------------------------------

    def rand_offset(
        self,
        offset: float,
        rng: Optional[np.random.Generator] = None,
    ) -> Rgb:
        """
        A random color similar to self.

        All channels are scaled by one shared random ratio, so the result
        keeps the hue of self while its average moves by at most ``offset``
        (clamped to [0, 1]). Calling this repeatedly on one seed color
        yields a palette of related colors.

        For a (near) black seed there is no average to scale, and the
        result is a flat gray at ``offset``.
        """
        values = self.as_array()
        avg = float(values.sum() / 3.0)
        rnd = float(resolve_rng(rng).random())
        amount = clamp(offset, 0.0, 1.0)
        if is_approx_eq(avg, 0.0, EPSILON):
            logger.debug("rand_offset on black seed, falling back to gray %.3f", amount)
            return Rgb(amount, amount, amount)

        ratio = 1.0 + (2.0 * rnd * amount - amount) / avg
        r, g, b = values * ratio
        return Rgb(r, g, b)

    # -------------------------------------------------------------------------
    # Arithmetic (results saturate into [0, 1])
    # -------------------------------------------------------------------------

    def __add__(self, other: Rgb) -> Rgb:
        if not isinstance(other, Rgb):
            return NotImplemented
        return Rgb(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Rgb) -> Rgb:
        if not isinstance(other, Rgb):
            return NotImplemented
        return Rgb(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Union[Rgb, float]) -> Rgb:
        if isinstance(other, Rgb):
            return Rgb(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float, np.floating, np.integer)):
            k = abs(float(other))
            return Rgb(self.r * k, self.g * k, self.b * k)
        return NotImplemented

    def __rmul__(self, other: float) -> Rgb:
        return self.__mul__(other)

    # -------------------------------------------------------------------------
    # Packing / serialization
    # -------------------------------------------------------------------------

    def to_u8(self) -> tuple[int, int, int]:
        r, g, b = (self.as_array() * 255.0).round().astype(int)
        return int(r), int(g), int(b)

    def to_u32(self) -> int:
        """Inverse of ``from_u32``: ``0xRRGGBB``."""
        r, g, b = self.to_u8()
        return (r << 16) | (g << 8) | b

    def to_hex(self) -> str:
        """Hex string like ``"#3941C8"``."""
        r, g, b = self.to_u8()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> Rgb:
        return cls(data["r"], data["g"], data["b"])


class FrozenRgb(Rgb):
    """
    A read-only Rgb, used for the named color constants.

    Setters raise ``FrozenInstanceError``. Conversions, ``with_*`` and
    arithmetic on it return plain, mutable ``Rgb`` values.
    """
    __slots__ = ("_locked",)

    def __post_init__(self) -> None:
        Rgb.__post_init__(self)
        object.__setattr__(self, "_locked", True)

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "_locked", False):
            raise FrozenInstanceError(f"cannot assign to field {name!r} of a named color")
        object.__setattr__(self, name, value)

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))


def rgb(r: int, g: int, b: int) -> Rgb:
    """Shorthand for ``Rgb.from_u8``: ``rgb(255, 0, 0) == RED``."""
    return Rgb.from_u8(r, g, b)


def gray(x: int) -> Rgb:
    """An 8-bit gray level."""
    return rgb(x, x, x)


grey = gray
