# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for the sRGB transfer function and the Srgb type."""

import numpy as np
import pytest

from tinct import BLACK, WHITE, Rgb, Srgb, from_rgb, srgb
from tinct.space import linear_to_srgb, srgb_to_linear


class TestTransferFunction:

    def test_linear_segment_below_threshold(self):
        val = 0.03
        linear = srgb_to_linear(np.array([val]))
        assert float(linear[0]) == pytest.approx(val / 12.92, abs=1e-12)

    def test_power_segment(self):
        linear = srgb_to_linear(np.array([0.5]))
        assert float(linear[0]) == pytest.approx(((0.5 + 0.055) / 1.055) ** 2.4)

    def test_mid_gray(self):
        # 50% linear is about 73.5% encoded
        encoded = linear_to_srgb(np.array([0.5]))
        assert float(encoded[0]) == pytest.approx(0.7354, abs=1e-4)

    def test_negative_input_does_not_nan(self):
        encoded = linear_to_srgb(np.array([-0.2]))
        assert float(encoded[0]) == 0.0

    def test_decode_clips_out_of_range(self):
        linear = srgb_to_linear(np.array([-0.5, 1.5]))
        assert not np.isnan(linear).any()
        np.testing.assert_allclose(linear, [0.0, 1.0], atol=1e-12)

    def test_batch_roundtrip(self):
        values = np.random.default_rng(42).random((100, 3))
        recovered = srgb_to_linear(linear_to_srgb(values))
        np.testing.assert_allclose(recovered, values, atol=1e-10)


class TestSrgb:

    def test_rgb_roundtrip(self):
        rng = np.random.default_rng(42)
        for _ in range(500):
            x = Rgb(*rng.random(3))
            assert from_rgb(x, Srgb).to_rgb().is_close_to(x, 1e-4)

    def test_black_and_white_are_fixed_points(self):
        assert Srgb.from_rgb(BLACK) == Srgb(0.0, 0.0, 0.0)
        assert Srgb.from_rgb(WHITE).is_close_to(Srgb(1.0, 1.0, 1.0), 1e-12)

    def test_constructor_clamps(self):
        assert srgb(-1.0, 0.5, 2.0) == Srgb(0.0, 0.5, 1.0)

    def test_encoding_brightens_midtones(self):
        c = Srgb.from_rgb(Rgb(0.2, 0.2, 0.2))
        assert c.red > 0.2

    def test_hex_uses_encoded_channels(self):
        assert Srgb(1.0, 0.0, 0.0).to_hex() == "#FF0000"
        assert Srgb.from_rgb(Rgb(0.5, 0.5, 0.5)).to_hex() == "#BCBCBC"

    def test_setters(self):
        c = Srgb(0.1, 0.2, 0.3)
        c.set_green(7.0)
        assert c.green == 1.0
        assert c.with_red(0.9).red == 0.9

    def test_rand_in_range(self):
        rng = np.random.default_rng(1)
        for _ in range(50):
            assert all(0.0 <= x <= 1.0 for x in Srgb.rand(rng))
