"""
Logging setup for the TaxPadi API.
init_logging() runs once when app.main is imported; modules log through
logging.getLogger(__name__).

LOG_FORMAT=json emits one object per line tagged with the service name and
version, with any `extra=` fields nested under "extra". The HTTP client
libraries used for receipt extraction log every request at INFO, so they
are held at WARNING unless LOG_LEVEL is DEBUG.
"""

import json
import logging
import sys

from app.config import get_settings

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Chatty on every receipt extraction call
QUIET_LOGGERS = ("httpx", "httpcore", "openai")

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def __init__(self, service: str, version: str):
        super().__init__()
        self.service = service
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record),
            "service": self.service,
            "version": self.version,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS and not k.startswith("_")}
        if extra:
            entry["extra"] = extra
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def build_handler(log_format: str) -> logging.Handler:
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    if log_format.lower() == "json":
        handler.setFormatter(JsonFormatter(settings.APP_NAME, settings.APP_VERSION))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    return handler


def configure_logger(logger: logging.Logger, level: int, log_format: str) -> None:
    logger.setLevel(level)
    logger.addHandler(build_handler(log_format))

    if level > logging.DEBUG:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def init_logging(level: int | None = None) -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    settings = get_settings()
    effective_level = level or getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    configure_logger(root, effective_level, settings.LOG_FORMAT)
