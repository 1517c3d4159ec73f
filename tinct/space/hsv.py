# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
The HSV color space, and procedural color generation.

Hue is an angle in radians, [0, 2π). Saturation and brightness are in
[0, 1]. The generators follow classic color theory: complements, split
complements, triads, analogous spreads, and tints/shades/tones.

All generators are pure: they return new colors and leave self untouched.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from tinct.space.base import TAU, clamp, is_approx_eq, is_close_to, resolve_rng
from tinct.space.rgb import Rgb


_D120 = math.radians(120.0)
_D150 = math.radians(150.0)
_D210 = math.radians(210.0)


def _normalize_hue(h: float) -> float:
    """Clamp into [0, 2π], then map 2π onto 0: hue is a point on a circle."""
    h = clamp(h, 0.0, TAU)
    if h == TAU:
        h = 0.0
    return h


def _rotate(h: float, delta: float) -> float:
    return (h + delta) % TAU


@dataclass(slots=True)
class Hsv:
    """
    A color in HSV.

    Attributes:
        h: Hue in radians, [0, 2π) (0 = red, 2π/3 = green, 4π/3 = blue)
        s: Saturation [0, 1], 0 = gray
        v: Brightness (value) [0, 1]
    """
    h: float
    s: float
    v: float

    def __post_init__(self) -> None:
        self.h = _normalize_hue(self.h)
        self.s = clamp(self.s, 0.0, 1.0)
        self.v = clamp(self.v, 0.0, 1.0)

    @classmethod
    def from_hue(cls, h: float) -> Hsv:
        """A fully saturated, fully bright color at hue ``h``."""
        return cls(h, 1.0, 1.0)

    @classmethod
    def rand(cls, rng: Optional[np.random.Generator] = None) -> Hsv:
        h, s, v = resolve_rng(rng).random(3)
        return cls(h * TAU, s, v)

    # -------------------------------------------------------------------------
    # Channels
    # -------------------------------------------------------------------------

    @property
    def hue(self) -> float:
        return self.h

    @property
    def saturation(self) -> float:
        return self.s

    @property
    def brightness(self) -> float:
        return self.v

    def set_hue(self, h: float) -> None:
        self.h = _normalize_hue(h)

    def set_saturation(self, s: float) -> None:
        self.s = clamp(s, 0.0, 1.0)

    def set_brightness(self, v: float) -> None:
        self.v = clamp(v, 0.0, 1.0)

    def with_hue(self, h: float) -> Hsv:
        return replace(self, h=h)

    def with_saturation(self, s: float) -> Hsv:
        return replace(self, s=s)

    def with_brightness(self, v: float) -> Hsv:
        return replace(self, v=v)

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.h, self.s, self.v], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.h, self.s, self.v))

    def is_close_to(self, other: Hsv, max_diff: float) -> bool:
        return is_close_to(self, other, max_diff)

    # -------------------------------------------------------------------------
    # Harmonies
    # -------------------------------------------------------------------------

    def complement(self) -> Hsv:
        """The color opposite on the wheel (hue + π)."""
        return self.with_hue(_rotate(self.h, math.pi))

    def split_complement(self) -> tuple[Hsv, Hsv]:
        """The two colors 30° either side of the complement."""
        return (
            self.with_hue(_rotate(self.h, _D150)),
            self.with_hue(_rotate(self.h, _D210)),
        )

    def double_complement(self) -> tuple[tuple[Hsv, Hsv], tuple[Hsv, Hsv]]:
        """
        Two complementary pairs built on the split complement.

        Returns ``((c1.complement(), c1), (c2.complement(), c2))`` where
        ``(c1, c2) = self.split_complement()``.
        """
        c1, c2 = self.split_complement()
        return (c1.complement(), c1), (c2.complement(), c2)

    def triad(self) -> tuple[Hsv, Hsv]:
        """The two colors 120° and 240° away from self."""
        return (
            self.with_hue(_rotate(self.h, _D120)),
            self.with_hue(_rotate(self.h, 2.0 * _D120)),
        )

    def analogs(self, n: int, span: float) -> list[Hsv]:
        """
        ``n`` colors with hues evenly spaced over ``span`` radians.

        The first color has the hue of self; saturation and brightness are
        kept. Empty when ``n`` or ``span`` is zero.
        """
        if n <= 0 or span == 0.0:
            return []
        d = span / n
        return [Hsv(_rotate(self.h, d * i), self.s, self.v) for i in range(n)]

    @classmethod
    def color_wheel(cls, n: int) -> list[Hsv]:
        """``n`` fully saturated colors evenly spread around the wheel from red."""
        return cls.from_hue(0.0).analogs(n, TAU)

    # -------------------------------------------------------------------------
    # Tints, shades and tones
    # -------------------------------------------------------------------------

    def tint(self, amt: float) -> Hsv:
        """Brighter by ``amt`` (clamped to [0, 1])."""
        return self.with_brightness(self.v + clamp(amt, 0.0, 1.0))

    def tints(self, n: int) -> list[Hsv]:
        """``n`` colors stepping brightness from self towards 1."""
        if n <= 0:
            return []
        b = self.v
        d = (1.0 - b) / n
        return [self.with_brightness(b + d * i) for i in range(n)]

    def shade(self, amt: float) -> Hsv:
        """Darker by ``amt`` (clamped to [0, 1])."""
        return self.with_brightness(self.v - clamp(amt, 0.0, 1.0))

    def shades(self, n: int) -> list[Hsv]:
        """``n`` colors stepping brightness from self towards 0."""
        if n <= 0:
            return []
        b = self.v
        d = b / n
        return [self.with_brightness(b - d * i) for i in range(n)]

    def tone(self, amt: float) -> Hsv:
        """Less saturated by ``amt`` (clamped to [0, 1])."""
        return self.with_saturation(self.s - clamp(amt, 0.0, 1.0))

    def tones(self, n: int) -> list[Hsv]:
        """
        ``n`` colors derived from the saturation of self.

        Note: the stepped value is written to brightness, not saturation,
        so saturation of the results equals that of self. Existing callers
        depend on this output; do not change it without a version bump.
        """
        if n <= 0:
            return []
        s = self.s
        d = (1.0 - s) / n
        return [self.with_brightness(s + d * i) for i in range(n)]

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> Hsv:
        return cls(rgb.hue, rgb.saturation, rgb.brightness)

    def to_rgb(self) -> Rgb:
        h, s, v = self.h, self.s, self.v
        if is_approx_eq(s, 0.0):
            return Rgb(v, v, v)

        hv = math.degrees(h) / 60.0
        sector = math.floor(hv)
        f = hv - sector
        p = v * (1.0 - s)
        q = v * (1.0 - f * s)
        t = v * (1.0 - (1.0 - f) * s)

        hi = sector % 6
        if hi == 0:
            return Rgb(v, t, p)
        elif hi == 1:
            return Rgb(q, v, p)
        elif hi == 2:
            return Rgb(p, v, t)
        elif hi == 3:
            return Rgb(p, q, v)
        elif hi == 4:
            return Rgb(t, p, v)
        else:
            return Rgb(v, p, q)

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "v": self.v}

    @classmethod
    def from_dict(cls, data: dict) -> Hsv:
        return cls(data["h"], data["s"], data["v"])


def hsv(h: float, s: float, v: float) -> Hsv:
    """Shorthand for ``Hsv(h, s, v)``; ``h`` in radians."""
    return Hsv(h, s, v)
