from __future__ import annotations

import json
import logging
import os
import socket
import time
import traceback
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from typing import override

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

LOGGER_NAME = "fluxreader"

EXTRA_KEYS = frozenset(
    {
        "event_type",
        "src_ip",
        "user_id",
        "method",
        "path",
        "status",
        "latency_ms",
        "user_agent",
        "error_type",
        "error_code",
        "data",
    }
)

# form fields that must never reach a log line
REDACTED_DATA_KEYS = frozenset({"password", "confirmation"})


def _utc_ts(created: float) -> str:
    """ISO8601 UTC with milliseconds, e.g. 2026-02-12T12:01:02.123Z"""
    sec = int(created)
    ms = int((created - sec) * 1000)
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(sec)) + f".{ms:03d}Z"


def new_request_id() -> str:
    return str(uuid.uuid4())


def _safe_data(value: object) -> dict[str, object] | None:
    if not isinstance(value, dict) or not value:
        return None
    return {
        str(k): "***" if str(k) in REDACTED_DATA_KEYS else v for k, v in value.items()
    }


class JsonLineFormatter(logging.Formatter):
    """One JSON object per line, tagged with the current request id."""

    app_name: str
    host: str
    include_stacktrace: bool

    def __init__(self, app_name: str | None = None) -> None:
        super().__init__()
        self.app_name = app_name or os.getenv("APP_NAME", "FluxReader")
        self.host = socket.gethostname()
        self.include_stacktrace = os.getenv("LOG_INCLUDE_STACKTRACE", "0") == "1"

    def _extras(self, record: logging.LogRecord) -> dict[str, object]:
        extras: dict[str, object] = {}
        for key in EXTRA_KEYS:
            value = getattr(record, key, None)
            if value is None:
                continue
            if key == "data":
                data = _safe_data(value)
                if data is not None:
                    extras["data"] = data
                continue
            extras[key] = value
        return extras

    def _exception(self, record: logging.LogRecord) -> dict[str, object]:
        if not record.exc_info:
            return {}

        exc_type, exc_val, exc_tb = record.exc_info
        out: dict[str, object] = {}
        if exc_type is not None:
            out["error_type"] = getattr(exc_type, "__name__", "Exception")
        if exc_val is not None:
            out["error_msg"] = str(exc_val)
        if self.include_stacktrace and exc_type and exc_val and exc_tb:
            out["traceback"] = "".join(
                traceback.format_exception(exc_type, exc_val, exc_tb)
            )
        return out

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": _utc_ts(record.created),
            "app": self.app_name,
            "host": self.host,
            "level": record.levelname,
            "event_type": "log",
            "request_id": request_id_ctx.get(),
            "msg": record.getMessage(),
        }
        payload.update(self._extras(record))
        for key, value in self._exception(record).items():
            _ = payload.setdefault(key, value)

        return json.dumps(
            payload, ensure_ascii=False, separators=(",", ":"), default=str
        )


def _file_handler(formatter: logging.Formatter) -> RotatingFileHandler | None:
    log_path = os.getenv("LOG_PATH")
    if not log_path:
        return None

    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    fh = RotatingFileHandler(
        log_path,
        maxBytes=int(os.getenv("LOG_MAX_BYTES", "10000000")),  # 10 MB
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        encoding="utf-8",
    )
    fh.setFormatter(formatter)
    return fh


def setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    logger.propagate = False

    if logger.handlers:
        return logger

    formatter = JsonLineFormatter()

    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    fh = _file_handler(formatter)
    if fh is not None:
        logger.addHandler(fh)

    return logger
