"""Infrastructure adapter exports."""

from helper_intents_engine.core.exceptions import (  # noqa: F401
    ResourceNotFoundError,
    WebhookPayloadError,
)

from .dialogflow import parse_webhook_request, render_webhook_response
from .string_table import JsonStringTable

__all__ = [
    "JsonStringTable",
    "parse_webhook_request",
    "render_webhook_response",
    "ResourceNotFoundError",
    "WebhookPayloadError",
]
