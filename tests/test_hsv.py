# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for the HSV space and the procedural color generators."""

import math

import numpy as np
import pytest

from tinct import BLUE, RED, WHITE, Hsv, Rgb, from_rgb, hsv
from tinct.space import TAU


def _hues(colors):
    return [c.hue for c in colors]


class TestConstruction:

    def test_hue_past_tau_wraps_to_zero(self):
        c = Hsv(7.0, 2.0, 1.0)
        assert c.hue == 0.0
        assert c.saturation == 1.0

    def test_hue_exactly_tau_is_zero(self):
        assert Hsv(TAU, 1.0, 1.0).hue == 0.0

    def test_negative_hue_lands_on_zero(self):
        assert Hsv(-1.0, 0.5, 0.5).hue == 0.0

    def test_saturation_and_brightness_clamp(self):
        c = Hsv(1.0, -0.5, 3.0)
        assert c.saturation == 0.0
        assert c.brightness == 1.0

    def test_from_hue(self):
        c = Hsv.from_hue(math.pi)
        assert (c.hue, c.saturation, c.brightness) == (math.pi, 1.0, 1.0)

    def test_shorthand(self):
        assert hsv(1.0, 0.5, 0.5) == Hsv(1.0, 0.5, 0.5)

    def test_set_hue_wraps(self):
        c = Hsv(1.0, 1.0, 1.0)
        c.set_hue(TAU)
        assert c.hue == 0.0

    def test_setters_clamp(self):
        c = Hsv(1.0, 0.5, 0.5)
        c.set_saturation(1.5)
        c.set_brightness(-0.2)
        assert (c.saturation, c.brightness) == (1.0, 0.0)
        c.set_saturation(-3.0)
        c.set_brightness(9.0)
        assert (c.saturation, c.brightness) == (0.0, 1.0)

    def test_with_clamps(self):
        c = Hsv(1.0, 0.5, 0.5)
        assert c.with_saturation(2.0).saturation == 1.0
        assert c.with_brightness(-1.0).brightness == 0.0
        assert c.with_hue(-1.0).hue == 0.0

    def test_with_does_not_mutate(self):
        c = Hsv(1.0, 0.5, 0.5)
        d = c.with_saturation(0.9)
        assert c.saturation == 0.5
        assert d.saturation == 0.9

    def test_rand_in_range(self):
        rng = np.random.default_rng(0)
        for _ in range(100):
            c = Hsv.rand(rng)
            assert 0.0 <= c.hue < TAU
            assert 0.0 <= c.saturation <= 1.0
            assert 0.0 <= c.brightness <= 1.0


class TestConversion:

    def test_rgb_roundtrip(self):
        rng = np.random.default_rng(42)
        for _ in range(500):
            x = Rgb(*rng.random(3))
            assert from_rgb(x, Hsv).to_rgb().is_close_to(x, 1e-6)

    def test_achromatic_has_zero_saturation(self):
        for v in np.linspace(0.0, 1.0, 11):
            gray = Rgb(v, v, v)
            c = Hsv.from_rgb(gray)
            assert c.saturation == 0.0
            assert c.to_rgb().is_close_to(gray, 1e-6)

    def test_zero_saturation_short_circuits_to_gray(self):
        assert Hsv(2.5, 0.0, 0.4).to_rgb() == Rgb(0.4, 0.4, 0.4)

    def test_primaries(self):
        assert Hsv.from_rgb(RED) == Hsv(0.0, 1.0, 1.0)
        assert Hsv.from_rgb(BLUE).hue == pytest.approx(math.radians(240.0))
        assert Hsv.from_hue(math.radians(240.0)).to_rgb().is_close_to(BLUE, 1e-9)

    def test_every_sector(self):
        for deg, expected in [
            (0, (1.0, 0.0, 0.0)),
            (60, (1.0, 1.0, 0.0)),
            (120, (0.0, 1.0, 0.0)),
            (180, (0.0, 1.0, 1.0)),
            (240, (0.0, 0.0, 1.0)),
            (300, (1.0, 0.0, 1.0)),
        ]:
            c = Hsv.from_hue(math.radians(deg)).to_rgb()
            np.testing.assert_allclose(c.as_array(), expected, atol=1e-9)


class TestHarmonies:

    def test_complement(self):
        assert Hsv.from_hue(0.0).complement() == Hsv.from_hue(math.pi)

    def test_complement_wraps(self):
        c = Hsv.from_hue(math.radians(270.0)).complement()
        assert c.hue == pytest.approx(math.radians(90.0))

    def test_complement_keeps_saturation_and_brightness(self):
        c = Hsv(1.0, 0.3, 0.6).complement()
        assert (c.saturation, c.brightness) == (0.3, 0.6)

    def test_split_complement(self):
        c1, c2 = Hsv.from_hue(0.0).split_complement()
        assert c1.hue == pytest.approx(math.radians(150.0))
        assert c2.hue == pytest.approx(math.radians(210.0))

    def test_double_complement(self):
        (a1, c1), (a2, c2) = Hsv.from_hue(0.0).double_complement()
        assert c1.hue == pytest.approx(math.radians(150.0))
        assert a1.hue == pytest.approx(math.radians(330.0))
        assert c2.hue == pytest.approx(math.radians(210.0))
        assert a2.hue == pytest.approx(math.radians(30.0))

    def test_triad(self):
        c1, c2 = Hsv.from_hue(math.radians(200.0)).triad()
        assert c1.hue == pytest.approx(math.radians(320.0))
        assert c2.hue == pytest.approx(math.radians(80.0))

    def test_analogs_spacing(self):
        colors = Hsv(0.5, 0.4, 0.3).analogs(3, math.radians(30.0))
        assert len(colors) == 3
        assert _hues(colors) == pytest.approx(
            [0.5, 0.5 + math.radians(10.0), 0.5 + math.radians(20.0)]
        )
        assert all(c.saturation == 0.4 and c.brightness == 0.3 for c in colors)

    def test_analogs_empty(self):
        assert Hsv.from_hue(1.0).analogs(0, 1.0) == []
        assert Hsv.from_hue(1.0).analogs(5, 0.0) == []

    def test_analogs_negative_span_wraps(self):
        colors = Hsv.from_hue(0.0).analogs(2, -1.0)
        assert _hues(colors) == pytest.approx([0.0, TAU - 0.5])


class TestColorWheel:

    def test_empty(self):
        assert len(Hsv.color_wheel(0)) == 0

    def test_first_is_red(self):
        assert Hsv.color_wheel(1)[0] == Hsv.from_hue(0.0)

    def test_length(self):
        assert len(Hsv.color_wheel(3)) == 3

    def test_evenly_spaced(self):
        wheel = Hsv.color_wheel(4)
        assert _hues(wheel) == pytest.approx([0.0, math.pi / 2, math.pi, 3 * math.pi / 2])
        assert all(0.0 <= h < TAU for h in _hues(Hsv.color_wheel(360)))


class TestTintsShadesTones:

    def test_tint(self):
        assert Hsv(1.0, 1.0, 0.5).tint(0.3).brightness == pytest.approx(0.8)

    def test_tint_clamps(self):
        assert Hsv(1.0, 1.0, 0.5).tint(5.0).brightness == 1.0
        assert Hsv(1.0, 1.0, 0.5).tint(-1.0).brightness == 0.5

    def test_tints(self):
        colors = Hsv(1.0, 1.0, 0.2).tints(4)
        assert [c.brightness for c in colors] == pytest.approx([0.2, 0.4, 0.6, 0.8])
        assert Hsv(1.0, 1.0, 0.2).tints(0) == []

    def test_shade(self):
        assert Hsv(1.0, 1.0, 0.5).shade(0.2).brightness == pytest.approx(0.3)
        assert Hsv(1.0, 1.0, 0.5).shade(0.9).brightness == 0.0

    def test_shades(self):
        colors = Hsv(1.0, 1.0, 0.8).shades(4)
        assert [c.brightness for c in colors] == pytest.approx([0.8, 0.6, 0.4, 0.2])
        assert Hsv(1.0, 1.0, 0.8).shades(0) == []

    def test_tone(self):
        assert Hsv(1.0, 1.0, 0.5).tone(0.3).saturation == pytest.approx(0.7)
        assert Hsv(1.0, 0.2, 0.5).tone(0.3).saturation == 0.0

    def test_tones_steps_brightness_from_saturation(self):
        colors = Hsv(1.0, 0.5, 0.2).tones(2)
        assert [c.brightness for c in colors] == pytest.approx([0.5, 0.75])
        assert all(c.saturation == 0.5 for c in colors)
        assert Hsv(1.0, 0.5, 0.2).tones(0) == []

    def test_generators_leave_self_untouched(self):
        c = Hsv(1.0, 0.5, 0.5)
        c.tints(3)
        c.shades(3)
        c.complement()
        c.analogs(4, 1.0)
        assert c == Hsv(1.0, 0.5, 0.5)

    def test_white_tints_are_white(self):
        white = Hsv.from_rgb(WHITE)
        assert all(c.brightness == 1.0 for c in white.tints(3))
