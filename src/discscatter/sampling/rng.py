"""Seeded random draws used by the disc sampler."""
from __future__ import annotations

import math

import numpy as np

TAU = 2.0 * math.pi
_U64_MASK = (1 << 64) - 1


def make_rng(seed: int) -> np.random.Generator:
    """Return a fresh generator for ``seed``.

    ``seed`` is treated as a signed 64-bit value; negative seeds are folded
    onto their two's complement so every int64 maps to a distinct stream.
    """
    return np.random.default_rng(int(seed) & _U64_MASK)


def point_in_disc(rng: np.random.Generator, radius: float) -> tuple[float, float]:
    """Uniform-by-area point inside the disc of ``radius`` centred at the origin."""
    u = rng.random()
    ang = rng.random() * TAU
    rr = math.sqrt(u) * radius
    return rr * math.cos(ang), rr * math.sin(ang)


def annulus_offset(
    rng: np.random.Generator, r_min: float, r_max: float
) -> tuple[float, float]:
    """Offset drawn uniformly over the area of the ring ``[r_min, r_max]``."""
    u = rng.random()
    ang = rng.random() * TAU
    a2 = r_min * r_min
    rr = math.sqrt(a2 + (r_max * r_max - a2) * u)
    return rr * math.cos(ang), rr * math.sin(ang)


__all__ = ["make_rng", "point_in_disc", "annulus_offset", "TAU"]
