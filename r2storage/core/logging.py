"""Logging configuration helpers.

The library only obtains loggers. Nothing here runs on import; applications
call ``LoggerConfig.setup_logging`` (or ``setup_from_settings``) themselves.
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from r2storage.core.config.settings import R2Settings

# Chatty transport loggers kept at WARNING regardless of the root level
QUIET_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "[%(asctime)s][%(levelname)s] %(name)s: %(message)s"
COLORED_FORMAT = "%(log_color)s[%(asctime)s][%(levelname)s] %(name)s: %(reset)s%(message)s"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# Rotation for the optional log file
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _console_formatter(log_format: str, use_colors: bool) -> Dict[str, Any]:
    if not use_colors:
        return {"format": log_format, "datefmt": DATE_FORMAT}
    return {
        "()": "colorlog.ColoredFormatter",
        "fmt": COLORED_FORMAT,
        "datefmt": DATE_FORMAT,
        "log_colors": LOG_COLORS,
    }


class LoggerConfig:
    """Global logger configuration manager."""

    _initialized = False

    @classmethod
    def setup_logging(
        cls,
        log_level: str = "INFO",
        log_file: Optional[str] = None,
        log_format: Optional[str] = None,
        use_colors: bool = True,
    ) -> None:
        """
        Configure the root logger once per process.

        Transport loggers stay at WARNING and propagate to the root handlers,
        so they reach the log file as well as the console.

        Args:
            log_level: Root level name
            log_file: Optional path of a rotating log file
            log_format: Console format used when colors are off
            use_colors: Use the colorlog console formatter
        """
        if cls._initialized:
            return

        formatters: Dict[str, Any] = {
            "console": _console_formatter(log_format or PLAIN_FORMAT, use_colors),
        }
        handlers: Dict[str, Any] = {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": sys.stdout,
            }
        }

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            formatters["file"] = {"format": PLAIN_FORMAT, "datefmt": DATE_FORMAT}
            handlers["file"] = {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "file",
                "filename": log_file,
                "maxBytes": LOG_FILE_MAX_BYTES,
                "backupCount": LOG_FILE_BACKUPS,
            }

        logging.config.dictConfig(
            {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": formatters,
                "handlers": handlers,
                "root": {"level": log_level, "handlers": list(handlers)},
                "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
            }
        )
        cls._initialized = True

    @classmethod
    def setup_from_settings(cls, settings: R2Settings) -> None:
        """Setup logging from the ``log_*`` fields of the given settings."""
        cls.setup_logging(
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            use_colors=settings.log_colors,
        )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
