"""Logging configuration for the API process.

Call ``configure_logging()`` once at startup, before the app handles requests.
"""

from __future__ import annotations

import logging
import sys

_CONFIGURED = False


def configure_logging(
    level: str = "INFO",
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # uvicorn may already have installed handlers
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
        root.addHandler(handler)

    _CONFIGURED = True
