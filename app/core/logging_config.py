"""
Logging setup for the API process and the migration CLI.

Both entry points resolve an AppConfig first and hand it here, so the level,
the log directory and the development switch come from one place.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Any, Dict

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from app.core.config import AppConfig

LOG_FILE_NAME = "content_platform.log"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = ("password", "token", "secret", "api_key")


def setup_logging(app_config: AppConfig) -> None:
    """
    Install console and rotating-file handlers on the root logger.

    Handlers carry no level of their own: the root level comes from
    ``app_config.log_level`` and loggers that opt into more detail (the
    development AppLogger) are still written out.
    """
    level = getattr(logging, app_config.log_level.upper(), logging.INFO)

    log_path = Path(app_config.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))

    file_handler = RotatingFileHandler(
        log_path / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))

    root.addHandler(console_handler)
    root.addHandler(file_handler)

    # Per-statement SQL is only useful while developing
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if app_config.is_development else logging.WARNING
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("alembic").setLevel(logging.INFO)


def _mask_url(value: str) -> str:
    try:
        return make_url(value).render_as_string(hide_password=True)
    except ArgumentError:
        return REDACTED


def sanitize_log_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy of ``data`` that is safe to log.

    Secret-looking keys are redacted outright. Values under ``*_url`` keys
    keep their driver, host and database but lose the password.
    """
    sanitized = dict(data)
    for key, value in sanitized.items():
        lowered = key.lower()
        if any(sensitive in lowered for sensitive in SENSITIVE_KEYS):
            sanitized[key] = REDACTED
        elif lowered.endswith("url") and isinstance(value, str):
            sanitized[key] = _mask_url(value)
    return sanitized
