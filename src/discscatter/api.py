from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

import numpy as np

from .config.loader import validate_config
from .contracts.domain import Domain
from .sampling.poisson import sample_domain

logger = logging.getLogger(__name__)


@dataclass
class SampleResult:
    points: np.ndarray            # (N, 2), read-only
    domain: Domain
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return int(self.points.shape[0])


def generate(
    radius: float,
    min_distance: float,
    max_attempts_per_point: int = 30,
    seed: int = 12345,
) -> np.ndarray:
    """High level entry: ``from discscatter import generate``.

    Returns the Poisson-disc samples of the disc of ``radius`` centred at the
    origin as a read-only ``(N, 2)`` array in acceptance order.  Identical
    arguments always give an identical array.  Raises
    :class:`~discscatter.contracts.InvalidParameter` before doing any work if
    a parameter is out of range.
    """
    return generate_domain(Domain(radius, min_distance, max_attempts_per_point, seed))


def generate_domain(domain: Domain) -> np.ndarray:
    return sample_domain(domain)


def generate_from_config(cfg: Mapping[str, Any]) -> SampleResult:
    """Validate ``cfg`` and sample the domain described by ``cfg['sampler']``."""
    cfg = validate_config(cfg)
    domain = Domain.from_mapping(cfg["sampler"])
    t0 = time.perf_counter()
    pts = sample_domain(domain)
    elapsed = time.perf_counter() - t0
    logger.info("sampled %d points in %.3fs (%s)", pts.shape[0], elapsed, domain)
    return SampleResult(
        points=pts,
        domain=domain,
        meta={"count": int(pts.shape[0]), "elapsed_s": elapsed},
    )


__all__ = ["generate", "generate_domain", "generate_from_config", "SampleResult"]
