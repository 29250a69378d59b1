"""Structured JSON logging for kvedit.

The terminal is owned by curses and stdout may carry the emitted mapping, so
log records only ever go to a rotating file.
"""

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


LOGGER_NAME = "kvedit"


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_path: str,
    level: int | str = logging.INFO,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
) -> logging.Logger:
    """Configure the kvedit logger with a rotating JSON file handler.

    Args:
        log_path: Path to the log file. Parent directories are created.
        level: Logging level, as an int or a level name.
        max_bytes: Maximum log file size before rotation.
        backup_count: Number of rotated files to keep.

    Returns:
        The configured "kvedit" logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger

    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    except OSError:
        disable_logging()
        raise

    file_handler.setLevel(level)
    file_handler.setFormatter(JsonFormatter())
    logger.addHandler(file_handler)
    # Keep records away from the root logger's stderr handler
    logger.propagate = False

    return logger


def disable_logging() -> logging.Logger:
    """Drop kvedit records without falling back to logging.lastResort on stderr."""
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the kvedit logger, or a named child of it."""
    base_logger = logging.getLogger(LOGGER_NAME)
    if name:
        return base_logger.getChild(name)
    return base_logger
