import logging
import os
from logging.config import dictConfig

# Database logs are quiet unless DB_LOG_LEVEL asks for statements and pool events.
DEFAULT_DB_LOG_LEVEL = "WARNING"


def configure_logging() -> None:
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    app_log_level = os.environ.get("STATUS_LOG_LEVEL", log_level).upper()
    db_log_level = os.environ.get("DB_LOG_LEVEL", DEFAULT_DB_LOG_LEVEL).upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "service": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S%z",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "service",
                }
            },
            "loggers": {
                # [config] and [db] lines
                "status_api": {"level": app_log_level},
                "sqlalchemy.engine": {"level": db_log_level},
                "sqlalchemy.pool": {"level": db_log_level},
                "asyncpg": {"level": db_log_level},
                "uvicorn": {"level": log_level},
                "uvicorn.access": {"handlers": ["console"], "level": log_level, "propagate": False},
            },
            "root": {"handlers": ["console"], "level": log_level},
        }
    )
    logging.getLogger(__name__).debug("Logging configured at %s (service %s)", log_level, app_log_level)


__all__ = ["configure_logging"]
