# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""
Benchmark color space conversions through the RGB hub.

Times to_rgb / from_rgb for every color space over a fixed set of
random samples, cycling through them the way a palette generator would.

Usage:
    python benchmarks/benchmark_conversions.py
"""

import time

import numpy as np

from tinct import Hsv, Rgb, Srgb, YCbCr

# Test configurations
NUM_SAMPLES = 1 << 13
NUM_ITERATIONS = 5
WARMUP_ITERATIONS = 1

print("=" * 80)
print("COLOR SPACE CONVERSION BENCHMARK")
print("=" * 80)
print(f"Samples: {NUM_SAMPLES}, iterations: {NUM_ITERATIONS}")


def _time(fn, items) -> float:
    """Mean seconds per call of fn over items."""
    for _ in range(WARMUP_ITERATIONS):
        for item in items:
            fn(item)
    start = time.perf_counter()
    for _ in range(NUM_ITERATIONS):
        for item in items:
            fn(item)
    elapsed = time.perf_counter() - start
    return elapsed / (NUM_ITERATIONS * len(items))


def main() -> None:
    rng = np.random.default_rng(0)
    rgbs = [Rgb.rand(rng) for _ in range(NUM_SAMPLES)]

    print(f"\n{'conversion':<20} {'us/call':>10}")
    print("-" * 32)
    for space in (Hsv, Srgb, YCbCr):
        name = space.__name__.lower()
        converted = [space.from_rgb(c) for c in rgbs]

        t_from = _time(space.from_rgb, rgbs)
        t_to = _time(lambda c: c.to_rgb(), converted)

        print(f"{'rgb -> ' + name:<20} {t_from * 1e6:>10.2f}")
        print(f"{name + ' -> rgb':<20} {t_to * 1e6:>10.2f}")


if __name__ == "__main__":
    main()
