# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
The color space contract.

Every color representation is a small value type with three components
that can be converted to and from linear RGB. Linear RGB is the hub:
converting between two other spaces always goes through it.

Numerics are plain NumPy. Components are viewed as float64 arrays of
shape (3,), built explicitly from the fields of each type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, TypeVar, runtime_checkable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from tinct.space.rgb import Rgb


# Tolerance for "approximately zero" / "approximately equal" decisions
# (achromatic detection, zero saturation, zero average).
EPSILON = 1e-6

TAU = 2.0 * np.pi

T = TypeVar("T", bound="ColorSpace")


@runtime_checkable
class ColorSpace(Protocol):
    """
    Protocol for color representations.

    The only requirement is a lossless (or documented lossy) mapping
    to and from linear RGB.
    """

    @classmethod
    def from_rgb(cls: type[T], rgb: Rgb) -> T:
        """Construct from a color value in linear RGB."""
        ...

    def to_rgb(self) -> Rgb:
        """Convert to a color value in linear RGB."""
        ...

    def as_array(self) -> NDArray[np.float64]:
        """Components as a float64 array of shape (3,)."""
        ...


def from_rgb(rgb: Rgb, space: type[T]) -> T:
    """Convert ``rgb`` in linear RGB to color space ``space``."""
    return space.from_rgb(rgb)


def to_rgb(color: ColorSpace) -> Rgb:
    """Convert ``color`` in any color space to linear RGB."""
    return color.to_rgb()


def is_approx_eq(a: float, b: float, eps: float = EPSILON) -> bool:
    return abs(a - b) <= eps


def clamp(x: float, lo: float, hi: float) -> float:
    return float(np.clip(x, lo, hi))


def is_close_to(a: ColorSpace, b: ColorSpace, max_diff: float) -> bool:
    """Component-wise approximate equality of two colors of the same space."""
    return bool(np.all(np.abs(a.as_array() - b.as_array()) <= max_diff))


# =============================================================================
# Random source
# =============================================================================

_default_rng: np.random.Generator = np.random.default_rng()


def default_rng() -> np.random.Generator:
    """Process-wide generator used when no ``rng`` is passed explicitly."""
    return _default_rng


def seed_default_rng(seed: Optional[int]) -> None:
    """Reseed the process-wide generator (None for fresh OS entropy)."""
    global _default_rng
    _default_rng = np.random.default_rng(seed)


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else _default_rng
