"""Sampling domain contract.

A :class:`Domain` fixes every input of one sampling run: the disc radius, the
minimum spacing between samples, the per-point retry budget and the seed.  It
is validated eagerly so that a bad parameter fails before any grid or list is
allocated.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping


class InvalidParameter(ValueError):
    """Raised when a sampling parameter is outside its valid range."""


def _finite_positive(name: str, v: Any) -> float:
    if isinstance(v, bool) or not isinstance(v, numbers.Real):
        raise InvalidParameter(f"{name} must be a real number, got {type(v).__name__}")
    f = float(v)
    if not math.isfinite(f) or f <= 0.0:
        raise InvalidParameter(f"{name} must be finite and > 0, got {v!r}")
    return f


def _integer(name: str, v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        raise InvalidParameter(f"{name} must be an integer, got {type(v).__name__}")
    return int(v)


@dataclass(frozen=True)
class Domain:
    """Immutable parameters of a disc sampling run."""

    radius: float
    min_distance: float
    max_attempts_per_point: int = 30
    seed: int = 12345

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "radius", _finite_positive("radius", self.radius))
        object.__setattr__(
            self, "min_distance", _finite_positive("min_distance", self.min_distance)
        )
        k = _integer("max_attempts_per_point", self.max_attempts_per_point)
        if k < 1:
            raise InvalidParameter(f"max_attempts_per_point must be >= 1, got {k}")
        object.__setattr__(self, "max_attempts_per_point", k)
        seed = _integer("seed", self.seed)
        if not -(2**63) <= seed < 2**63:
            raise InvalidParameter(f"seed must fit in int64, got {seed}")
        object.__setattr__(self, "seed", seed)

    @property
    def cell_size(self) -> float:
        return self.min_distance / math.sqrt(2.0)

    @property
    def is_degenerate(self) -> bool:
        """``True`` when no second sample can fit inside the disc."""
        return self.min_distance >= 2.0 * self.radius

    @classmethod
    def from_mapping(cls, d: Mapping[str, Any]) -> "Domain":
        extra = set(d) - {"radius", "min_distance", "max_attempts_per_point", "seed"}
        if extra:
            raise InvalidParameter(f"unexpected domain keys: {sorted(extra)}")
        try:
            return cls(**dict(d))
        except TypeError as e:
            raise InvalidParameter(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["Domain", "InvalidParameter"]
