"""Logging utilities for the treasury_fx package."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "treasury_fx") -> logging.Logger:
    """Return a named logger, configuring the root handler on first use."""
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger("treasury_fx")
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    """Switch the package logger between INFO and DEBUG."""

    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
