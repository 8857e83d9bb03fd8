"""Logging setup for the ``discscatter`` namespace.

Library modules log through ``logging.getLogger(__name__)``; nothing is
printed until an application calls :func:`init_logging`.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

logger = logging.getLogger("discscatter")
logger.addHandler(logging.NullHandler())

ENV_LEVEL = "DISCSCATTER_LOG_LEVEL"

_HANDLER_NAME = "discscatter.stream"
_FMT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"

_LEVEL_MAP = {
    "none": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _normalize(level: Optional[str]) -> int:
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().lower(), logging.WARNING)


def level_from_cfg(cfg: Optional[Mapping[str, Any]]) -> int:
    """Return the level named by ``cfg['logging']['level']``, env var first."""
    env = os.getenv(ENV_LEVEL)
    if env:
        return _normalize(env)
    if not cfg:
        return logging.WARNING
    lg = cfg.get("logging") or {}
    return _normalize(lg.get("level"))


def _stream_handler() -> logging.Handler | None:
    for h in logger.handlers:
        if h.get_name() == _HANDLER_NAME:
            return h
    return None


def init_logging(level: int | str | None = None, stream=None) -> logging.Handler:
    """Attach one stream handler to the ``discscatter`` logger and set its level.

    The handler is tagged by name, so later calls only change the level.
    Records still propagate to the root logger.
    """
    lvl = _normalize(level) if isinstance(level, str) or level is None else int(level)

    h = _stream_handler()
    if h is None:
        h = logging.StreamHandler(stream)
        h.set_name(_HANDLER_NAME)
        h.setFormatter(logging.Formatter(fmt=_FMT, datefmt=_DATEFMT))
        logger.addHandler(h)
    h.setLevel(lvl)
    logger.setLevel(lvl)
    return h


def init_logging_from_cfg(cfg: Optional[Mapping[str, Any]]) -> None:
    init_logging(level_from_cfg(cfg))


__all__ = ["logger", "init_logging", "init_logging_from_cfg", "level_from_cfg"]
