"""Consumer-side helpers for previewing a sample set.

Truncation and caching live on the caller's side of the sampler: neither
changes how points are generated.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import numpy as np

from .contracts.domain import Domain, InvalidParameter
from .sampling.poisson import sample_domain

logger = logging.getLogger(__name__)


def take(points: np.ndarray, k: int) -> np.ndarray:
    """Return the first ``min(k, N)`` points of ``points`` as a view."""
    if k < 0:
        raise InvalidParameter(f"k must be >= 0, got {k}")
    return points[:k]


class PreviewCache:
    """Regenerate samples only when the domain changes."""

    def __init__(self, max_samples: int = 5000) -> None:
        self.max_samples = max_samples
        self._domain: Optional[Domain] = None
        self._points: Optional[np.ndarray] = None
        self.hits = 0
        self.misses = 0

    def points(self, domain: Domain) -> np.ndarray:
        if self._points is not None and domain == self._domain:
            self.hits += 1
            return self._points
        self.misses += 1
        logger.debug("preview cache miss: %s", domain)
        self._points = sample_domain(domain)
        self._domain = domain
        return self._points

    def preview(self, domain: Domain, max_samples: Optional[int] = None) -> np.ndarray:
        """Leading points of the cached set, capped at ``self.max_samples`` by default."""
        k = self.max_samples if max_samples is None else max_samples
        return take(self.points(domain), k)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "PreviewCache":
        return cls(max_samples=int(cfg["preview"]["max_samples"]))

    def clear(self) -> None:
        self._domain = None
        self._points = None


__all__ = ["take", "PreviewCache"]
