"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from helper_intents_engine import HELPER_INTENTS_VERSION
from helper_intents_engine.apps.api.middleware import CorrelationIdMiddleware
from helper_intents_engine.core.logging import get_logger
from helper_intents_engine.services import ServiceContainer
from helper_intents_engine.services import runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the wiring at startup so a missing string table shows up early."""
    logger.info("Initializing helper intents engine %s...", HELPER_INTENTS_VERSION)
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
        if services.strings is None:
            logger.warning("No string table configured; every intent will fail.")
        else:
            logger.info("String tables available: %s", services.strings.locales())
        if services.intent_router is not None:
            logger.info("Registered intents: %s", sorted(services.intent_router.handlers()))
    yield
    logger.info("helper intents engine stopped.")


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan, title="Helper Intents Engine", version=HELPER_INTENTS_VERSION)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)

    from .routes import health, webhooks  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(webhooks.router)
    return app


__all__ = ["create_app", "lifespan"]
