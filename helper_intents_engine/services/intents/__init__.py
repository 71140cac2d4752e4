"""Intent handler registry."""

from __future__ import annotations

from helper_intents_engine.core.intents import IntentType
from helper_intents_engine.services.intent_router import IntentHandler, IntentRouter

from .helper_intents import (
    ask_for_confirmation,
    ask_for_date_time,
    ask_for_permission,
    ask_for_place,
    ask_for_sign_in,
    handle_confirmation,
    handle_date_time,
    handle_permission,
    handle_place,
    handle_sign_in,
)
from .system_intents import handle_no_input, welcome

INTENT_HANDLERS: dict[IntentType, IntentHandler] = {
    IntentType.WELCOME: welcome,
    IntentType.NO_INPUT: handle_no_input,
    IntentType.ASK_CONFIRMATION: ask_for_confirmation,
    IntentType.HANDLE_CONFIRMATION: handle_confirmation,
    IntentType.ASK_DATE_TIME: ask_for_date_time,
    IntentType.HANDLE_DATE_TIME: handle_date_time,
    IntentType.ASK_PERMISSION: ask_for_permission,
    IntentType.HANDLE_PERMISSION: handle_permission,
    IntentType.ASK_PLACE: ask_for_place,
    IntentType.HANDLE_PLACE: handle_place,
    IntentType.ASK_SIGN_IN: ask_for_sign_in,
    IntentType.HANDLE_SIGN_IN: handle_sign_in,
}


def build_default_router() -> IntentRouter:
    """Return a router with every supported intent registered."""
    return IntentRouter(INTENT_HANDLERS)


__all__ = ["INTENT_HANDLERS", "build_default_router"]
