"""Logging setup driven by ArenaConfig."""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from tilearena.config import ArenaConfig

DEFAULT_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# Third-party loggers that drown out arena output below WARNING.
_NOISY_LOGGERS = ("uvicorn.access", "httpx")


def setup_logging(
    level: str = "INFO",
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Replace the root handlers with a single stream handler; return it.

    Unknown level names fall back to INFO.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))
    return handler


def configure_logging(config: ArenaConfig, stream: IO[str] | None = None) -> logging.Handler:
    """Apply the logging fields of *config*."""
    return setup_logging(config.log_level, config.log_format, config.log_datefmt, stream)
