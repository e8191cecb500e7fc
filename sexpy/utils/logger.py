"""Logging helpers.

The library installs no handlers; drivers configure logging themselves.

Example:
    >>> from sexpy.utils.logger import get_logger
    >>> logger = get_logger(__name__)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under ``sexpy.``."""
    if not (name == "sexpy" or name.startswith("sexpy.")):
        name = f"sexpy.{name}"
    return logging.getLogger(name)
