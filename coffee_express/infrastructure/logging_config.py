"""Process-wide logging setup.

Library modules only ever call logging.getLogger(__name__); the hosting
process calls configure_logging() once at startup.
"""

from __future__ import annotations

import logging.config

from coffee_express.infrastructure.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def build_logging_config(level: str | int) -> dict:
    if isinstance(level, str):
        level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            # SQL echo is controlled by DATABASE_ECHO, not by the app level.
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    }


def configure_logging(level: str | int | None = None) -> None:
    """Install a console handler at the given level (default: settings.log_level)."""
    logging.config.dictConfig(build_logging_config(level or settings.log_level))
