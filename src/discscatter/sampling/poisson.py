"""Poisson-disc sampling inside a disc."""
from __future__ import annotations

import logging
import math
from typing import List

import numpy as np

from ..contracts.domain import Domain
from .grid import DiscGrid
from .rng import annulus_offset, make_rng, point_in_disc

logger = logging.getLogger(__name__)


def poisson_disc_circle(
    rng: np.random.Generator,
    radius: float,
    r_min: float,
    k: int = 30,
) -> np.ndarray:
    """Generate 2D Poisson-disc samples inside a disc centred at the origin.

    Parameters
    ----------
    rng : np.random.Generator
        Random number generator; the only source of randomness for the run.
    radius : float
        Radius of the sampling disc.
    r_min : float
        Minimum distance between samples.
    k : int, optional
        Candidates per active point, by default ``30``.

    Returns
    -------
    np.ndarray
        Read-only ``(N, 2)`` array in acceptance order, ``N >= 1``.
    """
    grid = DiscGrid(radius, r_min / math.sqrt(2.0))
    r2 = r_min * r_min
    R2 = radius * radius
    samples: List[tuple[float, float]] = []
    active: List[int] = []

    def ok(cx: float, cy: float, row: int, col: int) -> bool:
        for si in grid.around(row, col):
            qx, qy = samples[si]
            if (cx - qx) ** 2 + (cy - qy) ** 2 < r2:
                return False
        return True

    p0 = point_in_disc(rng, radius)
    samples.append(p0)
    active.append(0)
    grid.put(p0[0], p0[1], 0)

    while active:
        slot = int(rng.integers(len(active)))
        bx, by = samples[active[slot]]
        found = False
        for _ in range(k):
            dx, dy = annulus_offset(rng, r_min, 2.0 * r_min)
            cx, cy = bx + dx, by + dy
            if cx * cx + cy * cy > R2:
                continue
            row, col = grid.locate(cx, cy)
            if ok(cx, cy, row, col):
                samples.append((cx, cy))
                active.append(len(samples) - 1)
                grid.store(row, col, len(samples) - 1)
                found = True
                break
        if not found:
            # swap-remove keeps the active list dense
            active[slot] = active[-1]
            active.pop()

    out = np.asarray(samples, dtype=float).reshape(-1, 2)
    out.setflags(write=False)
    logger.debug(
        "poisson_disc_circle: radius=%g r_min=%g k=%d grid=%dx%d -> %d samples",
        radius, r_min, k, grid.height, grid.width, out.shape[0],
    )
    return out


def sample_domain(domain: Domain) -> np.ndarray:
    """Run the sampler for ``domain`` with a generator seeded from ``domain.seed``."""
    rng = make_rng(domain.seed)
    return poisson_disc_circle(
        rng, domain.radius, domain.min_distance, domain.max_attempts_per_point
    )


__all__ = ["poisson_disc_circle", "sample_domain"]
