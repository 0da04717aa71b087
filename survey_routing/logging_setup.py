"""Central logging configuration for the survey routing service.

Applies a root stdout handler so module loggers emit INFO-level logs
without per-module setup. Keeps uvicorn loggers on the same handler and
avoids duplicate handlers on reloads.
"""
from __future__ import annotations
import logging
from logging.config import dictConfig

_DICT_CONFIG = {
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
            "level": "DEBUG",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        }
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    "loggers": {
        "survey_routing.logic": {"level": "INFO"},
        "uvicorn": {"level": "INFO", "handlers": ["console"], "propagate": False},
        "uvicorn.error": {"level": "INFO", "handlers": ["console"], "propagate": False},
        "uvicorn.access": {"level": "INFO", "handlers": ["console"], "propagate": False},
    },
}

def configure_logging(engine_debug: bool = False) -> None:
    """Configure application-wide logging once.

    If the root logger already has handlers, return to prevent duplicate output.
    `engine_debug` lowers the routing engine loggers to DEBUG.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    dictConfig(_DICT_CONFIG)
    if engine_debug:
        logging.getLogger("survey_routing.logic").setLevel(logging.DEBUG)
