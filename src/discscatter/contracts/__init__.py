"""Contracts exposed by discscatter."""

from .domain import Domain, InvalidParameter

__all__ = ["Domain", "InvalidParameter"]
