# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
The sRGB color space (gamma encoded).

sRGB uses a piecewise transfer function: a linear segment near black and
a 2.4 power curve above it. Constants from IEC 61966-2-1.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from tinct.space.base import clamp, is_close_to, resolve_rng
from tinct.space.rgb import Rgb


# Break point on the encoded side
DECODE_THRESHOLD = 0.04045
# Break point on the linear side
ENCODE_THRESHOLD = 0.0031308
LINEAR_SLOPE = 12.92
GAMMA = 2.4
OFFSET = 0.055


def srgb_to_linear(encoded: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Decode gamma-encoded channels into linear light, elementwise.

    Inputs are clipped to [0, 1] first; the power branch is only defined
    for non-negative bases.
    """
    v = np.clip(np.asarray(encoded, dtype=np.float64), 0.0, 1.0)
    near_black = v / LINEAR_SLOPE
    curve = ((v + OFFSET) / (1.0 + OFFSET)) ** GAMMA
    return np.where(v <= DECODE_THRESHOLD, near_black, curve)


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """Encode linear-light channels with the sRGB curve. Output is in [0, 1]."""
    v = np.clip(np.asarray(linear, dtype=np.float64), 0.0, 1.0)
    near_black = v * LINEAR_SLOPE
    curve = (1.0 + OFFSET) * v ** (1.0 / GAMMA) - OFFSET
    return np.clip(np.where(v <= ENCODE_THRESHOLD, near_black, curve), 0.0, 1.0)


@dataclass(slots=True)
class Srgb:
    """
    A gamma-encoded sRGB color.

    Attributes:
        r, g, b: Encoded channels [0, 1]
    """
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        self.r = clamp(self.r, 0.0, 1.0)
        self.g = clamp(self.g, 0.0, 1.0)
        self.b = clamp(self.b, 0.0, 1.0)

    @classmethod
    def rand(cls, rng: Optional[np.random.Generator] = None) -> Srgb:
        return cls.from_rgb(Rgb.rand(resolve_rng(rng)))

    @property
    def red(self) -> float:
        return self.r

    @property
    def green(self) -> float:
        return self.g

    @property
    def blue(self) -> float:
        return self.b

    def with_red(self, r: float) -> Srgb:
        return replace(self, r=r)

    def with_green(self, g: float) -> Srgb:
        return replace(self, g=g)

    def with_blue(self, b: float) -> Srgb:
        return replace(self, b=b)

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

    def is_close_to(self, other: Srgb, max_diff: float) -> bool:
        return is_close_to(self, other, max_diff)

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> Srgb:
        r, g, b = linear_to_srgb(rgb.as_array())
        return cls(r, g, b)

    def to_rgb(self) -> Rgb:
        r, g, b = srgb_to_linear(self.as_array())
        return Rgb(r, g, b)

    def to_hex(self) -> str:
        """Hex of the encoded channels, as used by CSS."""
        r, g, b = (self.as_array() * 255.0).round().astype(int)
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> Srgb:
        return cls(data["r"], data["g"], data["b"])


def srgb(r: float, g: float, b: float) -> Srgb:
    return Srgb(r, g, b)
