"""Unit tests for the intent router."""

from __future__ import annotations

import asyncio

import pytest

from helper_intents_engine.core.intents import IntentType
from helper_intents_engine.core.models import IncomingRequest
from helper_intents_engine.core.responses import OutgoingResponse
from helper_intents_engine.services import ServiceContainer, build_default_services
from helper_intents_engine.services.intent_router import (
    IntentHandlerNotFoundError,
    IntentRouter,
)
from helper_intents_engine.services.response_builder import ResponseBuilder


def echo_handler(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    """Simple echo handler used for router tests."""

    return services.new_response_builder().add(f"You reached {request.intent}").build()


def test_handle_invokes_registered_handler():
    """Router calls the registered handler and returns its response."""
    router = IntentRouter({IntentType.WELCOME: echo_handler})
    container = ServiceContainer(intent_router=router)
    request = IncomingRequest(intent=IntentType.WELCOME.value)

    response = router.handle(IntentType.WELCOME, request, container)

    assert response.texts == ["You reached Default Welcome Intent"]


def test_enum_and_plain_name_share_registration():
    """Handlers registered by enum are reachable by their display name."""
    router = IntentRouter()
    router.register(IntentType.ASK_PLACE, echo_handler)
    container = ServiceContainer(intent_router=router)

    response = router.handle("askForPlace", IncomingRequest(intent="askForPlace"), container)

    assert response.texts == ["You reached askForPlace"]
    assert "askForPlace" in router.handlers()


def test_unknown_intent_raises():
    """Router raises when no handler matches the requested intent."""
    router = IntentRouter()
    container = ServiceContainer(intent_router=router)

    with pytest.raises(IntentHandlerNotFoundError) as excinfo:
        router.handle("actions_intent_option", IncomingRequest(intent="x"), container)
    assert excinfo.value.intent_name == "actions_intent_option"


def test_unregister_removes_handler():
    router = IntentRouter({IntentType.WELCOME: echo_handler})
    router.unregister(IntentType.WELCOME)
    router.unregister(IntentType.WELCOME)
    assert router.handlers() == {}


def test_dispatch_returns_completed_result():
    """The async entry point yields the same response as the sync one."""
    router = IntentRouter({IntentType.WELCOME: echo_handler})
    container = ServiceContainer(intent_router=router)
    request = IncomingRequest(intent=IntentType.WELCOME.value)

    response = asyncio.run(router.dispatch(IntentType.WELCOME, request, container))

    assert response == router.handle(IntentType.WELCOME, request, container)


def test_build_default_services_registers_every_intent():
    """Default service container includes a router covering every intent."""
    services = build_default_services()

    assert services.intent_router is not None
    assert set(services.intent_router.handlers()) == {intent.value for intent in IntentType}
    assert isinstance(services.new_response_builder(), ResponseBuilder)
