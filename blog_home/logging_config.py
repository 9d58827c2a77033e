"""Structured logging configuration for the blog home view.

JSON records go to blog_home.log in the configured log directory (10MB
rotation, 5 backups); a human-readable copy goes to the console. Level and
directory come from Settings (BLOG_LOG_LEVEL, BLOG_LOG_DIR) unless given.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pythonjsonlogger.json import JsonFormatter

if TYPE_CHECKING:
    from blog_home.config import Settings

LOG_FILE_NAME = "blog_home.log"


def setup_logging(
    log_level: str | None = None,
    log_dir: Path | None = None,
    settings: "Settings | None" = None,
) -> logging.Logger:
    """Configure structured logging with JSON file output and console output.

    Args:
        log_level: Logging level name; defaults to settings.log_level
        log_dir: Directory for the JSON log file; defaults to settings.log_dir,
            then ./logs
        settings: Settings instance (defaults to singleton)

    Returns:
        Configured root logger instance
    """
    if log_level is None or log_dir is None:
        # config imports this module, so resolve settings lazily
        from blog_home.config import get_settings

        settings = settings or get_settings()
        log_level = log_level or settings.log_level
        log_dir = log_dir or settings.log_dir or Path.cwd() / "logs"

    level = getattr(logging, log_level.upper())
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers
    root_logger.handlers.clear()

    json_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    json_handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    json_handler.setLevel(logging.DEBUG)  # File keeps everything
    root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    log_with_context(
        get_logger(__name__),
        "debug",
        "Logging configured",
        log_level=log_level.upper(),
        log_file=str(log_dir / LOG_FILE_NAME),
        event_type="logging_configured",
    )
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance configured for structured logging
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in JSON log (e.g., page_num, entry_count)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
