"""Loguru logging configuration.

Call setup_logging() once at application startup to configure sinks.
All other modules simply do `from loguru import logger` and log normally.
Demo output is printed to stdout, so every sink here writes elsewhere.
"""

import sys

from loguru import logger

from .config import PROJECT_ROOT

# Log directory at project root
LOG_DIR = PROJECT_ROOT / "logs"


def setup_logging(level: str = "INFO", log_to_file: bool = False) -> None:
    """Configure loguru with a stderr sink and an optional rotating file sink.

    Args:
        level: Minimum log level (default INFO).
        log_to_file: Also write to logs/kitchen_patterns.log when True.
    """
    # Remove the default stderr handler so we can reconfigure it
    logger.remove()

    # Sink 1: stderr, human-readable, colored
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    if not log_to_file:
        return

    # Sink 2: rotating log file, rotate every 3 hours, delete after 1 day
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logger.add(
        LOG_DIR / "kitchen_patterns.log",
        level=level,
        rotation="3 hours",
        retention="1 day",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
    )
