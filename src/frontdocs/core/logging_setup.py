#!/usr/bin/env python3
"""
Applies the ``logging`` section of the frontdocs configuration.
"""

import logging
from typing import Any, Dict, Final, Optional

LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(config: Optional[Dict[str, Any]] = None) -> int:
    """
    Configure the ``frontdocs`` logger from ``config['logging']['level']``.

    Unknown level names fall back to INFO. Returns the numeric level applied.
    """
    name = str(((config or {}).get("logging") or {}).get("level", "INFO")).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger("frontdocs")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return level
