from __future__ import annotations

import logging
from typing import Optional

from prepcards import config


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Create or reuse a module-level logger with a simple stream handler."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else config.get_log_level())
    return logger


__all__ = ["get_logger"]
