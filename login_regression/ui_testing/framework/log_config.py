"""
================================================================================
Logging Configuration
================================================================================

Centralized Loguru setup for the harness.

Features:
    - One stderr sink with a consistent format
    - Level from configuration (logging.level / LOGGING_LEVEL)
    - Optional rotating file sink (logging.file)
    - Secret masking helper for log lines and Allure step titles

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "{name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(level: Optional[str] = None, config: Optional[ConfigLoader] = None) -> None:
    """
    Initialize the global Loguru logger.

    Safe to call repeatedly; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        config: Configuration source. Defaults to the ConfigLoader singleton.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = config or ConfigLoader()
    log_level = (level or config.get("logging.level", "INFO")).upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=DEFAULT_LOG_FORMAT,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = config.get("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=DEFAULT_LOG_FORMAT.replace("{level: <8}", "{level}"),
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def mask(value: str) -> str:
    """Render a secret as asterisks of the same length."""
    return "*" * len(value)


__all__ = [
    "init_logger",
    "mask",
    "DEFAULT_LOG_FORMAT",
]
