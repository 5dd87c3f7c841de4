"""Logging configuration for schemaloom entry points."""

import logging
import logging.config
import sys
from typing import Any


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: If True, output JSON logs; otherwise plain text
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter: dict[str, Any] = {
            "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        }
    else:
        formatter = {
            "format": "%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }

    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                # stdout carries generated output
                "stream": sys.stderr,
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
        "loggers": {
            "loom_core": {"level": log_level},
            "loom_rules": {"level": log_level},
            "loom_cli": {"level": log_level},
        },
    }

    logging.config.dictConfig(logging_config)
