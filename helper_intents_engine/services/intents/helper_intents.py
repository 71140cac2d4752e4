"""Handlers that request a platform helper and handle the user's answer.

Every ``ask_*`` handler attaches exactly one helper prompt; the platform renders
it and triggers the matching ``handle_*`` intent with the result. ``handle_*``
handlers only speak and offer suggestions.
"""

from __future__ import annotations

from helper_intents_engine.core.intents import PERMISSION_DEVICE_PRECISE_LOCATION, PERMISSION_NAME
from helper_intents_engine.core.logging import get_logger
from helper_intents_engine.core.models import IncomingRequest
from helper_intents_engine.core.responses import (
    Confirmation,
    DateTimePrompt,
    OutgoingResponse,
    PermissionPrompt,
    PlacePrompt,
    SignInPrompt,
)
from helper_intents_engine.services import ServiceContainer
from helper_intents_engine.services import messages
from helper_intents_engine.services.location import format_location

logger = get_logger(__name__)


def ask_for_confirmation(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    strings = services.require_strings()
    locale = request.locale
    return (
        services.new_response_builder()
        .add(strings.get_string(locale, messages.CONFIRMATION_PLACEHOLDER))
        .add_suggestions(messages.SUGGESTIONS)
        .add_prompt(Confirmation(text=strings.get_string(locale, messages.CONFIRMATION_PROMPT)))
        .build()
    )


def handle_confirmation(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    """Acknowledge a yes/no answer; a missing answer counts as no."""
    strings = services.require_strings()
    key = messages.CONFIRMATION_SUCCESS if request.is_confirmed else messages.CONFIRMATION_FAILURE
    logger.info("confirmation answered", extra={"confirmed": request.is_confirmed})
    return (
        services.new_response_builder()
        .add(strings.get_string(request.locale, key))
        .add_suggestions(messages.SUGGESTIONS)
        .build()
    )


def ask_for_date_time(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    strings = services.require_strings()
    locale = request.locale
    prompt = DateTimePrompt(
        initial_prompt=strings.get_string(locale, messages.DATE_TIME_INITIAL_PROMPT),
        date_prompt=strings.get_string(locale, messages.DATE_TIME_DATE_PROMPT),
        time_prompt=strings.get_string(locale, messages.DATE_TIME_TIME_PROMPT),
    )
    return (
        services.new_response_builder()
        .add(strings.get_string(locale, messages.DATE_TIME_PLACEHOLDER))
        .add_prompt(prompt)
        .build()
    )


def handle_date_time(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    """Repeat the chosen day, month, hour and minute back to the user."""
    strings = services.require_strings()
    locale = request.locale
    value = request.date_time
    if value is not None:
        date = value.date
        time = value.time
        response = strings.get_string(
            locale,
            messages.DATE_TIME_SUCCESS,
            (date.day if date else None) or 0,
            (date.month if date else None) or 0,
            (time.hours if time else None) or 0,
            (time.minutes if time else None) or 0,
        )
    else:
        response = strings.get_string(locale, messages.DATE_TIME_FAILURE)
    logger.info("date time answered", extra={"has_value": value is not None})
    return (
        services.new_response_builder()
        .add(response)
        .add_suggestions(messages.SUGGESTIONS)
        .build()
    )


def permissions_for(request: IncomingRequest) -> tuple[str, ...]:
    """Guests may only share their name; verified users may also share location."""
    if request.is_verified:
        return (PERMISSION_NAME, PERMISSION_DEVICE_PRECISE_LOCATION)
    return (PERMISSION_NAME,)


def ask_for_permission(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    strings = services.require_strings()
    locale = request.locale
    prompt = PermissionPrompt(
        permissions=permissions_for(request),
        context=strings.get_string(locale, messages.PERMISSION_CONTEXT),
    )
    logger.info(
        "requesting permissions",
        extra={"permissions": list(prompt.permissions), "verified": request.is_verified},
    )
    return (
        services.new_response_builder()
        .add(strings.get_string(locale, messages.PERMISSION_PLACEHOLDER))
        .add_prompt(prompt)
        .build()
    )


def handle_permission(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    """Thank the user by name and mention their location when it was shared."""
    strings = services.require_strings()
    locale = request.locale
    if request.is_permission_granted:
        profile = request.user_profile
        if profile is not None and profile.display_name:
            response = strings.get_string(
                locale, messages.PERMISSION_SUCCESS_NAME, profile.display_name
            )
        else:
            response = strings.get_string(locale, messages.PERMISSION_SUCCESS)
        if request.device_location is not None:
            response += strings.get_string(
                locale, messages.PERMISSION_LOCATION, format_location(request.device_location)
            )
    else:
        response = strings.get_string(locale, messages.PERMISSION_DENIED)
    logger.info("permission answered", extra={"granted": request.is_permission_granted})
    return (
        services.new_response_builder()
        .add(response)
        .add_suggestions(messages.SUGGESTIONS)
        .build()
    )


def ask_for_place(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    strings = services.require_strings()
    locale = request.locale
    prompt = PlacePrompt(
        request_prompt=strings.get_string(locale, messages.PLACE_REQUEST),
        permission_context=strings.get_string(locale, messages.PLACE_CONTEXT),
    )
    return (
        services.new_response_builder()
        .add(strings.get_string(locale, messages.PLACE_PLACEHOLDER))
        .add_prompt(prompt)
        .build()
    )


def handle_place(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    strings = services.require_strings()
    locale = request.locale
    if request.place is not None:
        response = strings.get_string(
            locale, messages.PLACE_SUCCESS, format_location(request.place)
        )
    else:
        response = strings.get_string(locale, messages.PLACE_FAILURE)
    logger.info("place answered", extra={"has_place": request.place is not None})
    return (
        services.new_response_builder()
        .add(response)
        .add_suggestions(messages.SUGGESTIONS)
        .build()
    )


def ask_for_sign_in(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    """Start account linking; only screen devices and verified users qualify."""
    strings = services.require_strings()
    locale = request.locale
    builder = services.new_response_builder()
    if not request.has_screen():
        logger.info("sign in refused: no screen output")
        builder.add(strings.get_string(locale, messages.SIGN_IN_NO_SCREEN))
    elif not request.is_verified:
        logger.info("sign in refused: guest user")
        builder.add(strings.get_string(locale, messages.SIGN_IN_GUEST))
    else:
        builder.add(strings.get_string(locale, messages.SIGN_IN_PLACEHOLDER)).add_prompt(
            SignInPrompt(context=strings.get_string(locale, messages.SIGN_IN_CONTEXT))
        )
    return builder.build()


def handle_sign_in(request: IncomingRequest, services: ServiceContainer) -> OutgoingResponse:
    strings = services.require_strings()
    key = messages.SIGN_IN_SUCCESS if request.is_signed_in else messages.SIGN_IN_FAILURE
    logger.info("sign in answered", extra={"signed_in": request.is_signed_in})
    return (
        services.new_response_builder()
        .add(strings.get_string(request.locale, key))
        .add_suggestions(messages.SUGGESTIONS)
        .build()
    )


__all__ = [
    "ask_for_confirmation",
    "handle_confirmation",
    "ask_for_date_time",
    "handle_date_time",
    "permissions_for",
    "ask_for_permission",
    "handle_permission",
    "ask_for_place",
    "handle_place",
    "ask_for_sign_in",
    "handle_sign_in",
]
