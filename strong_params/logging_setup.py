"""Central logging configuration for strong params applications.

Installs a single stdout handler on the root logger so the guard and error
handler loggers (`strong_params.*`) emit their structured events without
per-module setup. The level comes from `STRONG_PARAMS_LOG_LEVEL` (default
INFO). Reloaders that already configured the root logger are left alone.
"""
from __future__ import annotations

import logging
import os
from logging.config import dictConfig
from typing import Optional


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "strong_params": {"level": level},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging once; a root logger with handlers is left alone."""
    root = logging.getLogger()
    if root.handlers:
        return
    chosen = (level or os.environ.get("STRONG_PARAMS_LOG_LEVEL") or "INFO").strip().upper()
    dictConfig(_dict_config(chosen))


__all__ = ["configure_logging"]
