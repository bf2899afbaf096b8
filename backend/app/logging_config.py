# backend/app/logging_config.py
import logging
from typing import Any, Dict, Optional


class RequestIdFilter(logging.Filter):
    def filter(self, record):
        # Provide a default request_id if not already set
        if not hasattr(record, "request_id"):
            record.request_id = "no-request-id"
        return True


def build_logging_config(
    level: str = "INFO",
    log_file: Optional[str] = None,
    file_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> Dict[str, Any]:
    """
    dictConfig for the service and uvicorn.

    Only the root logger and uvicorn.access own handlers; "backend" and
    "supervision_engine" carry a level and propagate to root, so every record
    is written once.
    """
    level = level.upper()
    root_handlers = ["default", "error"]

    handlers: Dict[str, Any] = {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "filters": ["request_id_filter"],
        },
        "access": {
            "formatter": "access",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "filters": ["request_id_filter"],
        },
        # Errors go to stderr with module/line information
        "error": {
            "formatter": "detailed",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "level": "ERROR",
            "filters": ["request_id_filter"],
        },
    }
    if log_file:
        handlers["file"] = {
            "formatter": "file",
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
            "encoding": "utf-8",
        }
        root_handlers.append("file")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_id_filter": {"()": RequestIdFilter},
        },
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s %(asctime)s [%(name)s] [%(request_id)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(asctime)s [%(name)s] [%(request_id)s] %(client_addr)s - "%(request_line)s" %(status_code)s',
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(levelname)s %(asctime)s [%(name)s] [%(module)s:%(lineno)d] - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "file": {"format": file_format},
        },
        "handlers": handlers,
        "loggers": {
            "": {"handlers": root_handlers, "level": level},
            "uvicorn.access": {
                "handlers": ["access"],
                "level": "INFO",
                "propagate": False,
            },
            "backend": {"level": level},
            "supervision_engine": {"level": level},
            # Reduce noise from third-party libraries
            "sqlalchemy.engine": {"level": "WARNING"},
            "asyncpg": {"level": "WARNING"},
        },
    }
