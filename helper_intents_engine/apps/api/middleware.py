"""Request-scoped correlation middleware for the webhook app."""

from __future__ import annotations

import time
import uuid
from typing import Iterable, Optional

from helper_intents_engine.core.logging import (
    bind_client_ip,
    bind_correlation_id,
    get_logger,
    reset_client_ip,
    reset_correlation_id,
)

logger = get_logger(__name__)

CORRELATION_HEADERS = ("x-request-id", "x-correlation-id")

# ASGI carries header names and values as latin-1 bytes.
HEADER_ENCODING = "latin-1"

RawHeaders = Iterable[tuple[bytes, bytes]]


def _decode_headers(raw: RawHeaders) -> dict[str, str]:
    return {
        name.decode(HEADER_ENCODING).lower(): value.decode(HEADER_ENCODING)
        for name, value in raw
    }


def incoming_correlation_id(raw: RawHeaders) -> str:
    """First correlation header the caller sent, or a fresh id."""
    headers = _decode_headers(raw)
    for name in CORRELATION_HEADERS:
        if headers.get(name):
            return headers[name]
    return uuid.uuid4().hex


def echo_correlation_headers(raw: RawHeaders, correlation_id: str) -> list[tuple[bytes, bytes]]:
    """Append correlation headers the response does not already set."""
    headers = list(raw)
    present = set(_decode_headers(headers))
    value = correlation_id.encode(HEADER_ENCODING)
    for name in CORRELATION_HEADERS:
        if name not in present:
            headers.append((name.encode(HEADER_ENCODING), value))
    return headers


class CorrelationIdMiddleware:  # pylint: disable=too-few-public-methods
    """Tag every webhook turn's log lines with a correlation id and client IP."""

    def __init__(self, app) -> None:  # type: ignore[no-untyped-def]
        self.app = app

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = incoming_correlation_id(scope.get("headers", []))
        client = scope.get("client")
        cid_token = bind_correlation_id(correlation_id)
        ip_token = bind_client_ip(client[0] if client else None)
        started = time.perf_counter()
        status_code: Optional[int] = None

        async def send_with_correlation(message):  # type: ignore[no-untyped-def]
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = message.get("status")
                message["headers"] = echo_correlation_headers(
                    message.get("headers", []), correlation_id
                )
            await send(message)

        try:
            await self.app(scope, receive, send_with_correlation)
        finally:
            logger.info(
                "request completed",
                extra={
                    "event": "http_request",
                    "path": scope.get("path", ""),
                    "method": scope.get("method", ""),
                    "status_code": status_code or 500,
                    "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                },
            )
            reset_client_ip(ip_token)
            reset_correlation_id(cid_token)


__all__ = [
    "CorrelationIdMiddleware",
    "incoming_correlation_id",
    "echo_correlation_headers",
]
