"""FastAPI dependencies: shared-secret guards and the service container."""

import hmac
from typing import Annotated, Optional

from fastapi import Header, HTTPException, status

from helper_intents_engine.core.config import config
from helper_intents_engine.services import ServiceContainer, runtime

BEARER_PREFIX = "bearer "


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def presented_token(authorization: Optional[str], header_token: Optional[str]) -> Optional[str]:
    """Token from ``Authorization: Bearer``, else from the dedicated header."""
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX) :].strip() or None
    if header_token:
        return header_token.strip() or None
    return None


def check_shared_secret(expected: Optional[str], presented: Optional[str]) -> None:
    """Raise 401 unless ``presented`` matches the configured secret.

    Guards are inert while ``ENABLE_WEBHOOK_AUTH`` is off.
    """
    if not config.ENABLE_WEBHOOK_AUTH:
        return
    if not expected:
        raise _unauthorized("Token not configured")
    if presented is None:
        raise _unauthorized("Missing credentials")
    if not hmac.compare_digest(presented, expected):
        raise _unauthorized("Invalid credentials")


async def require_webhook_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_webhook_token: Annotated[Optional[str], Header(alias="X-Webhook-Token")] = None,
) -> None:
    """Dialogflow sends the secret as a custom header configured on the agent."""
    check_shared_secret(
        config.WEBHOOK_AUTH_TOKEN, presented_token(authorization, x_webhook_token)
    )


async def require_healthcheck_token(
    authorization: Annotated[Optional[str], Header(alias="Authorization")] = None,
    x_admin_token: Annotated[Optional[str], Header(alias="X-Admin-Token")] = None,
) -> None:
    check_shared_secret(
        config.HEALTHCHECK_API_TOKEN, presented_token(authorization, x_admin_token)
    )


def get_service_container() -> ServiceContainer:
    """Container registered by the app factory; 500 when wiring was skipped."""
    try:
        return runtime.get_services()
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Service container not configured",
        ) from exc


__all__ = [
    "check_shared_secret",
    "get_service_container",
    "presented_token",
    "require_healthcheck_token",
    "require_webhook_token",
]
