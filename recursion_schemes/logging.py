# recursion_schemes/logging.py
"""
Unified logging setup for recursion_schemes.

All modules use:
    from recursion_schemes.logging import get_logger
    logger = get_logger(__name__)

Library code only creates loggers. Applications call configure_logging()
(or leave logging alone entirely).
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level=logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stdout,
    name: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the root logging handler (or the handler of logger ``name``).

    Safe to call multiple times; a handler is only installed once.
    ``level`` may be an int or a level name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    target = logging.getLogger(name)
    if not target.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        target.addHandler(handler)

    target.setLevel(level)
    return target


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Example:
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
