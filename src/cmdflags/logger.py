"""Logging configuration for cmdflags using loguru.

The library logs through loguru but stays disabled until a host application
calls ``setup_logger``; importing cmdflags never adds a sink or a log file.
"""

import sys
from typing import Optional

from loguru import logger

PACKAGE_NAME = "cmdflags"

# Store the configured log file path so repeated setups reuse it
_log_file_path: Optional[str] = None


def setup_logger(
    log_level: str = "INFO",
    console_output: bool = True,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
) -> None:
    """
    Configure loguru sinks and enable cmdflags log records.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to output to stderr
        log_file: Optional path of a log file (if None, the previously configured
            path is reused; no file is written if none was ever given)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
    """
    global _log_file_path

    if log_file is not None:
        _log_file_path = log_file

    # Remove default handler
    logger.remove()

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if _log_file_path is not None:
        logger.add(
            _log_file_path,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )

    logger.enable(PACKAGE_NAME)


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger


def disable_logging() -> None:
    """Silence cmdflags log records again (the import-time default)."""
    logger.disable(PACKAGE_NAME)
