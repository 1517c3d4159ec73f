# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
The YCbCr color space (ITU-R BT.709).

Luma Y matches ``Rgb.luminance``. Cb and Cr are the blue and red
difference signals in [-0.5, 0.5].

The two matrices below are the published rounded coefficients. The
decode matrix is not the exact inverse of the encode matrix, so a round
trip through YCbCr carries an error of up to ~1e-4 per channel. Both are
kept as published so that output matches other BT.709 implementations.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Optional

import numpy as np
from numpy.typing import NDArray

from tinct.space.base import clamp, is_close_to, resolve_rng
from tinct.space.rgb import Rgb


# RGB -> YCbCr
_ENCODE = np.array([
    [0.2126, 0.7152, 0.0722],
    [-0.1146, -0.3854, 0.5],
    [0.5, -0.4542, -0.0458],
], dtype=np.float64)

# YCbCr -> RGB
_DECODE = np.array([
    [1.0, 0.0, 1.5748],
    [1.0, -0.1873, -0.4682],
    [1.0, 1.8556, 0.0],
], dtype=np.float64)


@dataclass(slots=True)
class YCbCr:
    """
    A color in YCbCr.

    Attributes:
        y: Luma [0, 1]
        cb: Blue difference [-0.5, 0.5]
        cr: Red difference [-0.5, 0.5]
    """
    y: float
    cb: float
    cr: float

    def __post_init__(self) -> None:
        self.y = clamp(self.y, 0.0, 1.0)
        self.cb = clamp(self.cb, -0.5, 0.5)
        self.cr = clamp(self.cr, -0.5, 0.5)

    @classmethod
    def rand(cls, rng: Optional[np.random.Generator] = None) -> YCbCr:
        y, cb, cr = resolve_rng(rng).random(3)
        return cls(y, cb - 0.5, cr - 0.5)

    def with_y(self, y: float) -> YCbCr:
        return replace(self, y=y)

    def with_cb(self, cb: float) -> YCbCr:
        return replace(self, cb=cb)

    def with_cr(self, cr: float) -> YCbCr:
        return replace(self, cr=cr)

    def set_y(self, y: float) -> None:
        self.y = clamp(y, 0.0, 1.0)

    def set_cb(self, cb: float) -> None:
        self.cb = clamp(cb, -0.5, 0.5)

    def set_cr(self, cr: float) -> None:
        self.cr = clamp(cr, -0.5, 0.5)

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.y, self.cb, self.cr], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.y, self.cb, self.cr))

    def is_close_to(self, other: YCbCr, max_diff: float) -> bool:
        return is_close_to(self, other, max_diff)

    @classmethod
    def from_rgb(cls, rgb: Rgb) -> YCbCr:
        y, cb, cr = _ENCODE @ rgb.as_array()
        return cls(y, cb, cr)

    def to_rgb(self) -> Rgb:
        r, g, b = _DECODE @ self.as_array()
        return Rgb(r, g, b)

    def to_dict(self) -> dict:
        return {"y": self.y, "cb": self.cb, "cr": self.cr}

    @classmethod
    def from_dict(cls, data: dict) -> YCbCr:
        return cls(data["y"], data["cb"], data["cr"])


def ycbcr(y: float, cb: float, cr: float) -> YCbCr:
    return YCbCr(y, cb, cr)
