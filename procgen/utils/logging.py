"""Logging setup shared by the CLI and the API server."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"

# Loggers that drown generator output at DEBUG.
_NOISY_LOGGERS = ("uvicorn.access", "httpx")


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Route all procgen logging to one handler.

    ``stream`` defaults to stdout; the ``inspect`` command passes stderr so
    its JSON on stdout stays machine-readable.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
