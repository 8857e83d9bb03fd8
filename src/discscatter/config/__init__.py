"""Configuration loading utilities."""
from .loader import deep_update, default_config, load_config, validate_config

__all__ = ["load_config", "validate_config", "default_config", "deep_update"]
