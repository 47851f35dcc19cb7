"""Structured JSON logging configuration.

Configures Python stdlib logging to emit one JSON object per line on stdout
with GCP-compatible field names (`severity`, `timestamp`, `logger`).

Usage:
    from swarm_linker.logging_config import configure_logging
    configure_logging("DEBUG")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "swarm-linker",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration at the given root level.

    Call once at application startup (the FastAPI lifespan does this).
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)
