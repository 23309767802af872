"""Central logging configuration for the exam archive server and CLI."""

from __future__ import annotations

import logging.config
import os
from typing import Any, Optional


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONFIGURED = False


def resolve_level(default_level: Optional[str] = None) -> str:
    return (default_level or os.getenv("LOG_LEVEL") or "INFO").upper()


def build_logging_config(level: Optional[str] = None) -> dict[str, Any]:
    """Return the dictConfig schema shared by the app and uvicorn.

    uvicorn re-applies its ``log_config`` on startup, so ``api.server.main``
    passes this same schema to keep request logs on our formatter.
    """
    level_name = resolve_level(level)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level_name, "handlers": ["stdout"]},
        "loggers": {
            "uvicorn": {"level": level_name, "handlers": ["stdout"], "propagate": False},
            "uvicorn.access": {"level": level_name, "handlers": ["stdout"], "propagate": False},
        },
    }


def configure_logging(default_level: Optional[str] = None) -> None:
    """Route application logs to stdout; repeated calls are no-ops."""

    global _CONFIGURED
    if _CONFIGURED:
        return

    logging.config.dictConfig(build_logging_config(default_level))
    _CONFIGURED = True
