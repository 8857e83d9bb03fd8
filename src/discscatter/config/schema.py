"""Pydantic models for sampler, preview and logging configuration."""
from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SamplerConfig(BaseModel):
    radius: float = Field(default=10.0, gt=0)
    min_distance: float = Field(default=1.5, gt=0)
    max_attempts_per_point: int = Field(default=30, ge=1)
    seed: int = Field(default=12345, ge=-(2**63), le=2**63 - 1)

    model_config = ConfigDict(extra="forbid")

    @field_validator("radius", "min_distance")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("must be finite")
        return v


class PreviewConfig(BaseModel):
    max_samples: int = Field(default=5000, ge=0)

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    level: Literal["none", "info", "debug"] = "none"

    model_config = ConfigDict(extra="forbid")


class DiscScatterConfig(BaseModel):
    sampler: SamplerConfig = Field(default_factory=SamplerConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = ["SamplerConfig", "PreviewConfig", "LoggingConfig", "DiscScatterConfig"]
