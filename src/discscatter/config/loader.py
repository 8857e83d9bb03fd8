"""YAML configuration loader."""
from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from .schema import DiscScatterConfig

__all__ = ["load_config", "validate_config", "default_config", "deep_update"]


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"config not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML at {path} must be a mapping")
    return data


def deep_update(base: Dict[str, Any], layer: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``base`` with nested mappings of ``layer`` merged in."""
    out = deepcopy(base)
    for k, v in layer.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = deepcopy(v)
    return out


def validate_config(cfg: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate ``cfg`` and return it with defaults filled in.

    Schema errors are re-raised as ``ValueError`` naming the dotted key path.
    """
    try:
        model = DiscScatterConfig.model_validate(dict(cfg))
    except ValidationError as e:
        lines = []
        for err in e.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()))
            lines.append(f"{loc}: {err.get('msg')}")
        raise ValueError("invalid config:\n  " + "\n  ".join(lines)) from e
    return model.model_dump()


def default_config() -> Dict[str, Any]:
    return DiscScatterConfig().model_dump()


def load_config(
    path: Optional[str | Path] = None,
    *,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Load defaults, then the YAML at ``path``, then ``overrides``; validate."""
    cfg = default_config()
    if path is not None:
        cfg = deep_update(cfg, _read_yaml(path))
    if overrides:
        cfg = deep_update(cfg, overrides)
    return validate_config(cfg)
