# kbsearch/logging_setup.py
import logging
from logging.config import dictConfig
from logging import LogRecord
from pathlib import Path
import contextvars
import os

# ---- Correlation ID (set per request by RequestContextMiddleware) ----
request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")

class RequestIdFilter(logging.Filter):
    def filter(self, record: LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True

# ---- Paths & levels ----
BASE_DIR = Path(__file__).resolve().parents[1]  # project root (folder that contains 'kbsearch/')
LOG_DIR  = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))
LOG_FILE = LOG_DIR / "kb_search.log"
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").strip().lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

def _handlers(*names: str) -> list:
    return [n for n in names if LOG_TO_FILE or n != "file"]

def setup_logging() -> Path:
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "filters": ["request_id"],
        },
        "uvicorn_console": {
            "class": "logging.StreamHandler",
            "formatter": "uvicorn_access",
        },
    }
    if LOG_TO_FILE:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "formatter": "standard",
            "filters": ["request_id"],
            "filename": str(LOG_FILE),
            "when": "midnight",
            "backupCount": 14,
            "encoding": "utf-8",
        }

    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,

        "filters": {
            "request_id": {"()": RequestIdFilter},
        },

        "formatters": {
            "standard": {
                "format": (
                    "%(asctime)s | %(levelname)s | %(name)s | req=%(request_id)s | "
                    "%(message)s (%(filename)s:%(lineno)d)"
                )
            },
            "uvicorn_access": {
                "format": "%(asctime)s | %(levelname)s | %(message)s"
            },
        },

        "handlers": handlers,

        "loggers": {
            # kb_search.search, kb_search.store, ... all land here
            "kb_search": {"handlers": _handlers("console", "file"), "level": LOG_LEVEL, "propagate": False},

            "uvicorn.error":  {"handlers": _handlers("uvicorn_console", "file"), "level": "INFO", "propagate": False},
            "uvicorn.access": {"handlers": _handlers("uvicorn_console", "file"), "level": "INFO", "propagate": False},
        },

        "root": {"handlers": _handlers("console", "file"), "level": LOG_LEVEL},
    })

    logging.getLogger("kb_search").info(f"Logging to: {LOG_FILE if LOG_TO_FILE else 'console only'}")
    return LOG_FILE

def get_logger(name: str = "kb_search") -> logging.Logger:
    return logging.getLogger(name)
