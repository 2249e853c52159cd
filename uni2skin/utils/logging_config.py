"""Logging configuration for uni2skin"""
from __future__ import annotations

import logging
import os
from pathlib import Path

LOGGER_NAME = "uni2skin"
DEBUG_ENV_VAR = "UNI2SKIN_DEBUG"


def setup_logging(
    level: str = "INFO", log_file: str | Path | None = None
) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to also write logs to

    Returns:
        Configured logger instance
    """
    # Check for debug mode from environment
    if os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes"):
        level = "DEBUG"

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    # Console handler goes to stderr so stdout stays clean for command output
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
                )
            )
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not create log file {log_file}: {e}")

    logger.debug(f"Log level: {logging.getLevelName(numeric_level)}")
    return logger


def get_logger(module_name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        module_name: Name of the module requesting the logger

    Returns:
        Logger instance for the module
    """
    if module_name.startswith(f"{LOGGER_NAME}."):
        module_name = module_name[len(LOGGER_NAME) + 1 :]
    return logging.getLogger(f"{LOGGER_NAME}.{module_name}")
