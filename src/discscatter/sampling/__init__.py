"""Disc sampling core."""

from .grid import DiscGrid
from .poisson import poisson_disc_circle, sample_domain
from .rng import annulus_offset, make_rng, point_in_disc

__all__ = [
    "DiscGrid",
    "poisson_disc_circle",
    "sample_domain",
    "make_rng",
    "point_in_disc",
    "annulus_offset",
]
