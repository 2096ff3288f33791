"""Logging setup."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once; later calls only adjust the level."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT)
    else:
        root.setLevel(level)


__all__ = ["configure_logging"]
