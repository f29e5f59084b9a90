"""
Logging configuration for structured logging.

This module configures JSON logging that works well with Loki.
"""

import logging
import logging.config
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from SoftwareLicenseProviders.settings import base

SERVICE_NAME = "software-license-providers"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds service context."""

    def __init__(self, *args, environment: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.environment = environment or base.ENVIRONMENT

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["service"] = SERVICE_NAME
        log_record["environment"] = self.environment


def _default_level(environment: str) -> str:
    if environment == "development":
        return "DEBUG"
    if environment == "test":
        return "WARNING"
    return "INFO"


def get_logging_config(
    environment: str = "development",
    log_level: Optional[str] = None,
    log_format: str = "json",
    log_file: Optional[str] = None,
) -> dict:
    """
    Get logging configuration for the application.

    Args:
        environment: Environment name (development, production, test)
        log_level: Explicit level overriding the environment default
        log_format: Console formatter name (json, verbose, simple)
        log_file: Optional path for a rotating file handler

    Returns:
        logging.config.dictConfig dictionary
    """
    level = (log_level or _default_level(environment)).upper()
    handlers = ["console"]

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d",
                "environment": environment,
            },
            "verbose": {
                "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
                "style": "{",
            },
            "simple": {
                "format": "{levelname} {message}",
                "style": "{",
            },
        },
        "filters": {},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": log_format,
                "stream": sys.stdout,
            },
        },
        "root": {
            "handlers": handlers,
            "level": level,
        },
        "loggers": {
            "urllib3": {
                "handlers": handlers,
                "level": "WARNING",
                "propagate": False,
            },
        },
    }

    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
        handlers.append("file")

    for name in ("SoftwareLicenseProviders", "core", "licenses"):
        config["loggers"][name] = {
            "handlers": handlers,
            "level": level,
            "propagate": False,
        }

    return config


def configure_logging(environment: Optional[str] = None) -> None:
    """Apply the logging configuration built from the current settings."""
    logging.config.dictConfig(
        get_logging_config(
            environment=environment or base.ENVIRONMENT,
            log_level=base.LOG_LEVEL,
            log_format=base.LOG_FORMAT,
            log_file=base.LOG_FILE,
        )
    )
