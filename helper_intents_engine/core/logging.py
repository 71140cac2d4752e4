"""JSON logging for fulfillment turns.

Every record carries the turn's correlation id (``cid``) and the caller's IP,
read from context variables the HTTP middleware or the CLI bind. Handlers are
installed once on the root logger; module loggers only set their level and
propagate.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, Optional

from pythonjsonlogger import jsonlogger

from helper_intents_engine.core.config import settings

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
_client_ip: ContextVar[Optional[str]] = ContextVar("client_ip", default=None)

LOG_LEVEL = getattr(logging, str(settings.HELPER_INTENTS_LOG_LEVEL).upper(), logging.INFO)
LOG_SCHEMA_VERSION = str(settings.HELPER_INTENTS_LOG_SCHEMA_VERSION)
LOG_TO_FILE = bool(settings.HELPER_INTENTS_LOG_TO_FILE)
LOG_FILE_NAME = "helper_intents.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5

# Placeholder for records emitted outside a turn.
UNBOUND = "-"

BASE_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = BASE_DIR.parent


def _resolve_logs_dir() -> Path:
    """First creatable directory of: configured dir, ``<repo>/logs``, ``<package>/logs``."""
    candidates = [ROOT_DIR / "logs", BASE_DIR / "logs"]
    if settings.HELPER_INTENTS_LOG_DIR:
        candidates.insert(0, Path(settings.HELPER_INTENTS_LOG_DIR))
    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
        except OSError:
            continue
        return candidate
    raise PermissionError("Unable to create a writable logs directory")


LOGS_DIR = _resolve_logs_dir() if LOG_TO_FILE else None
LOG_FILE_PATH = LOGS_DIR / LOG_FILE_NAME if LOGS_DIR else None


class VersionedJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter stamping ``schema_version`` on every entry."""

    def __init__(self, *args, schema_version: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._schema_version = schema_version

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("schema_version", self._schema_version)


class CorrelationIdFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Copy the bound correlation id and client IP onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = _correlation_id.get() or UNBOUND
        record.client_ip = _client_ip.get() or UNBOUND
        return True


def bind_correlation_id(value: Optional[str]) -> Token[Optional[str]]:
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[Optional[str]]) -> None:
    _correlation_id.reset(token)


def get_correlation_id() -> Optional[str]:
    return _correlation_id.get()


def bind_client_ip(value: Optional[str]) -> Token[Optional[str]]:
    return _client_ip.set(value)


def reset_client_ip(token: Token[Optional[str]]) -> None:
    _client_ip.reset(token)


def get_client_ip() -> Optional[str]:
    return _client_ip.get()


@contextmanager
def correlation_id_context(value: Optional[str]) -> Iterator[None]:
    """Bind ``value`` as the correlation id for the duration of the block."""
    token = bind_correlation_id(value)
    try:
        yield
    finally:
        reset_correlation_id(token)


def _build_formatter() -> VersionedJsonFormatter:
    fields = ("asctime", "levelname", "name", "message", "correlation_id", "client_ip")
    return VersionedJsonFormatter(
        " ".join(f"%({field})s" for field in fields),
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
            "correlation_id": "cid",
        },
        datefmt="%Y-%m-%d %H:%M:%S",
        json_ensure_ascii=False,
        schema_version=LOG_SCHEMA_VERSION,
    )


def _build_handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if LOG_FILE_PATH is not None:
        handlers.append(
            RotatingFileHandler(
                LOG_FILE_PATH,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    formatter = _build_formatter()
    correlation_filter = CorrelationIdFilter()
    for handler in handlers:
        handler.addFilter(correlation_filter)
        handler.setFormatter(formatter)
    return handlers


def _installed(root: logging.Logger) -> bool:
    return any(
        isinstance(flt, CorrelationIdFilter) for handler in root.handlers for flt in handler.filters
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger that emits through the shared JSON handlers."""
    root = logging.getLogger()
    if not _installed(root):
        for handler in _build_handlers():
            root.addHandler(handler)
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    return logger


__all__ = [
    "CorrelationIdFilter",
    "VersionedJsonFormatter",
    "bind_correlation_id",
    "bind_client_ip",
    "reset_correlation_id",
    "reset_client_ip",
    "get_correlation_id",
    "get_client_ip",
    "correlation_id_context",
    "get_logger",
    "LOG_FILE_PATH",
    "LOG_SCHEMA_VERSION",
]
