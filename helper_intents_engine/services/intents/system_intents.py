"""Welcome and no-input handlers."""

from __future__ import annotations

from enum import Enum

from helper_intents_engine.core.logging import get_logger
from helper_intents_engine.core.models import IncomingRequest
from helper_intents_engine.core.responses import OutgoingResponse, SimpleResponse
from helper_intents_engine.services import ServiceContainer
from helper_intents_engine.services import messages

logger = get_logger(__name__)


class NoInputReply(str, Enum):
    """What to say after the user stayed silent."""

    WHAT_WAS_THAT = "what-was-that"
    PLEASE_REPEAT = "please-repeat"
    GIVE_UP = "give-up"
    NOTHING = "nothing"


def no_input_reply(reprompt_count: int | None, is_final_prompt: bool) -> NoInputReply:
    """Back-off policy keyed by the platform's reprompt counter.

    From the third silence on, only the final reprompt says anything; earlier
    ones produce no text at all.
    """
    count = reprompt_count or 0
    if count == 0:
        return NoInputReply.WHAT_WAS_THAT
    if count == 1:
        return NoInputReply.PLEASE_REPEAT
    if is_final_prompt:
        return NoInputReply.GIVE_UP
    return NoInputReply.NOTHING


def welcome(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    """Greet the user and list what the action can demonstrate."""
    strings = services.require_strings()
    locale = request.locale
    logger.info("welcome intent handled", extra={"locale": locale})
    return (
        services.new_response_builder()
        .add(
            SimpleResponse(
                text_to_speech=strings.get_string(locale, messages.WELCOME_SPEECH),
                display_text=strings.get_string(locale, messages.WELCOME_DISPLAY),
            )
        )
        .add(
            SimpleResponse(
                text_to_speech=strings.get_string(locale, messages.WELCOME_FEATURES_SPEECH),
                display_text=strings.get_string(locale, messages.WELCOME_FEATURES_DISPLAY),
            )
        )
        .add_suggestions(messages.SUGGESTIONS)
        .build()
    )


def handle_no_input(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    """Reprompt on silence, then close the conversation on the final reprompt."""
    strings = services.require_strings()
    locale = request.locale
    builder = services.new_response_builder()
    reply = no_input_reply(request.reprompt_count, request.is_final_prompt)
    logger.info(
        "no-input intent handled",
        extra={"reprompt_count": request.reprompt_count_or_default, "reply": reply.value},
    )
    if reply is NoInputReply.WHAT_WAS_THAT:
        builder.add(strings.get_string(locale, messages.NO_INPUT_FIRST))
    elif reply is NoInputReply.PLEASE_REPEAT:
        builder.add(strings.get_string(locale, messages.NO_INPUT_SECOND))
    elif reply is NoInputReply.GIVE_UP:
        builder.add(strings.get_string(locale, messages.NO_INPUT_FINAL)).end_conversation()
    else:
        # TODO: decide with the conversation designers whether a silent non-final
        # reprompt should say something; the platform may treat this as an error.
        logger.warning(
            "no-input reprompt %s is not final; returning an empty response",
            request.reprompt_count_or_default,
        )
    return builder.build()


__all__ = ["NoInputReply", "no_input_reply", "welcome", "handle_no_input"]
