# shiftcal/core/logging_config.py
"""
Logging configuration for the shift calendar service.

JSON logs to rotating files in production, colored console output in
development.
"""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

IS_PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))

APP_LOG_FILE = LOG_DIR / "app.log"
ERROR_LOG_FILE = LOG_DIR / "error.log"


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    One object per line, for log aggregation (Loki, CloudWatch, ...).
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output in development.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy, the record is shared with the file handler
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def _rotating_handler(path: Path, level: int, max_bytes: int, backups: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=max_bytes,
        backupCount=backups,
        encoding='utf-8',
    )
    handler.setLevel(level)
    return handler


def setup_logging() -> None:
    """
    Configure logging for the application.

    In production:
    - JSON format
    - Logs to rotating files (app + separate error log)
    - INFO level

    In development:
    - Colored console output
    - DEBUG level
    - Plain rotating file alongside
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if not IS_PRODUCTION else logging.INFO)
    root_logger.handlers.clear()

    if IS_PRODUCTION:
        app_handler = _rotating_handler(APP_LOG_FILE, logging.INFO, 10_000_000, 5)
        app_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(app_handler)

        error_handler = _rotating_handler(ERROR_LOG_FILE, logging.ERROR, 10_000_000, 10)
        error_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(error_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(console_handler)

    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(ColoredFormatter(
            fmt='%(levelname)-8s %(asctime)s [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(console_handler)

        file_handler = _rotating_handler(APP_LOG_FILE, logging.DEBUG, 5_000_000, 2)
        file_handler.setFormatter(logging.Formatter(
            '%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s'
        ))
        root_logger.addHandler(file_handler)

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("watchfiles").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured (production={IS_PRODUCTION})",
        extra={
            "extra_fields": {
                "log_dir": str(LOG_DIR.absolute()),
                "production": IS_PRODUCTION
            }
        }
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
