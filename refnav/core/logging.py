from __future__ import annotations
import os
import sys
from typing import Optional
from loguru import logger

_CONFIGURED = False

DEFAULT_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[tag]}</cyan> - <level>{message}</level>"
)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None, *, force: bool = False) -> None:
    """Configure loguru logger once based on arguments and environment variables.

    Env vars:
    - REFNAV_LOG_LEVEL: log level (DEBUG/INFO/SUCCESS/WARNING/ERROR), default INFO
    - REFNAV_LOG_FILE: optional path to write logs in addition to stderr
    - REFNAV_LOG_FORMAT: optional log format string for loguru

    Explicit arguments win over the environment.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    level = (level or os.getenv("REFNAV_LOG_LEVEL", "INFO")).upper()
    fmt = os.getenv("REFNAV_LOG_FORMAT", DEFAULT_FORMAT)
    # records logged without a bound tag still need extra[tag] for the format
    logger.configure(extra={"tag": "refnav"})
    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    log_file = log_file or os.getenv("REFNAV_LOG_FILE")
    if log_file:
        logger.add(log_file, level=level, format=fmt, rotation="10 MB", retention=3, encoding="utf-8")

    _CONFIGURED = True


def get_logger(tag: str = "refnav"):
    return logger.bind(tag=tag)


__all__ = ["setup_logging", "get_logger"]
