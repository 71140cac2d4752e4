"""Dialogflow fulfillment webhook route."""

from __future__ import annotations

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from helper_intents_engine.adapters.dialogflow import (
    parse_webhook_request,
    render_webhook_response,
)
from helper_intents_engine.core.exceptions import ResourceNotFoundError, WebhookPayloadError
from helper_intents_engine.core.logging import get_logger
from helper_intents_engine.services import ServiceContainer
from helper_intents_engine.services.intent_router import IntentHandlerNotFoundError

from ..dependencies import get_service_container, require_webhook_token

router = APIRouter()
logger = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/webhook", dependencies=[Depends(require_webhook_token)])
async def handle_webhook(
    request: Request,
    services: Annotated[ServiceContainer, Depends(get_service_container)],
) -> Any:
    """Parse the Dialogflow envelope, run the intent handler, render the reply."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error("Invalid JSON received", exc_info=True)
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON")
    if not isinstance(payload, dict):
        return _error(status.HTTP_400_BAD_REQUEST, "Webhook body must be a JSON object")

    try:
        intent_name, incoming = parse_webhook_request(payload)
    except WebhookPayloadError as exc:
        logger.error("Rejected webhook payload: %s", exc)
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    logger.info(
        "webhook turn received",
        extra={"intent": intent_name, "locale": incoming.locale},
    )
    try:
        response = await services.require_router().dispatch(intent_name, incoming, services)
    except IntentHandlerNotFoundError as exc:
        logger.warning("Unknown intent %s", exc.intent_name)
        return _error(status.HTTP_404_NOT_FOUND, str(exc))
    except ResourceNotFoundError as exc:
        logger.error("Missing string resource: %s", exc, exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    return render_webhook_response(response)


__all__ = ["router"]
