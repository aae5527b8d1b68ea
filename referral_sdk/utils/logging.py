"""
Logging setup.

Configures loguru sinks for applications embedding the SDK.
The SDK itself only emits records; it never adds sinks on import.
"""

import sys

from loguru import logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configure loguru with a stderr sink and optional rotating file.

    Args:
        level: Minimum level for all sinks
        log_file: Path of a log file; rotated daily, kept 7 days
    """
    logger.remove()
    logger.add(sys.stderr, level=level)

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            level=level,
            encoding="utf-8",
        )

    logger.debug(f"Logging configured: level={level}, file={log_file or 'none'}")
