"""Centralized logger configuration.

Usage:
    from moodlens.logger import get_logger
    logger = get_logger(__name__)

User-facing output is printed by the CLI; loggers carry diagnostics only.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
