"""Structured JSON logging configuration.

Configures Python stdlib logging to emit JSON on stdout. Cloud log collectors
(CloudWatch, Cloud Logging) pick up `severity`, `message`, and the other
fields without extra parsing.

Usage:
    from bitbucket_relay.logging_config import configure_logging
    configure_logging()
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
                "service": "bitbucket-relay",
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
    """Apply structured JSON logging configuration.

    Call once at process startup (FastAPI lifespan or Lambda cold start).
    All subsequent ``logging.getLogger()`` calls emit JSON to stdout with a
    ``severity`` field mapped from Python's ``levelname``.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)
