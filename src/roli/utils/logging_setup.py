"""Logging configuration with optional file rotation.

roli never installs handlers on import; applications that want roli's
log output call ``setup_logging`` once.

Log Level Precedence (deterministic resolution order):
1. Explicit parameter (log_level argument to setup_logging)
2. Environment variable (ROLI_LOG_LEVEL)
3. Config defaults (config.roli.log_level)
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from roli.utils.config import get_config
from roli.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ROOT_LOGGER_NAME = "roli"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 7
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(log_level: str | None = None) -> str:
    """Resolve the effective log level name using the precedence order.

    Args:
        log_level: Explicit logging level override (highest priority).

    Returns:
        Upper-case level name.

    Raises:
        ConfigurationError: If the resolved name is not a logging level.
    """
    if log_level is None:
        log_level = os.environ.get("ROLI_LOG_LEVEL") or get_config().roli.log_level

    level_name = log_level.strip().upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {log_level!r}")
    return level_name


def setup_logging(
    log_level: str | None = None,
    log_file: str | Path | None = None,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> logging.Logger:
    """Configure the ``roli`` logger with console and optional file output.

    Args:
        log_level: Explicit logging level override (highest priority).
        log_file: Optional path of a rotating log file.
        backup_count: Number of rotated log files to keep.

    Returns:
        The configured ``roli`` logger.
    """
    resolved_level = resolve_log_level(log_level)
    numeric_level = logging.getLevelName(resolved_level)

    roli_logger = logging.getLogger(ROOT_LOGGER_NAME)
    roli_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    for handler in list(roli_logger.handlers):
        roli_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    roli_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_LOG_BYTES,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        roli_logger.addHandler(file_handler)
        logger.info("Logging to file: %s", log_path)

    logger.info("Logging configured with level: %s", resolved_level)
    return roli_logger
