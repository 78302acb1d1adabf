"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR


def setup_logging(level: str = "INFO", to_file: bool = True, log_dir: Path | None = None):
    """Configure console logging and, optionally, a daily rotated log file."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        target = log_dir or LOG_DIR
        target.mkdir(parents=True, exist_ok=True)
        logger.add(
            target / "visits_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
            diagnose=False,
        )
        logger.info("Logging to {}", target)

    return logger
