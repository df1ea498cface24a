"""Loguru logging setup."""

import sys
from pathlib import Path

from loguru import logger

from monerokit.config import get_settings


def setup_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    """Configure loguru logging.

    Args:
        level: Minimum level for the stderr handler.
        log_file: Optional file receiving DEBUG and above, rotated.
    """
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )
    if log_file is not None:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )


def setup_logging_from_settings() -> None:
    """Configure loguru from MONEROKIT_LOG_LEVEL and MONEROKIT_LOG_FILE."""
    config = get_settings().monerokit
    setup_logging(config.log_level, config.log_file)
