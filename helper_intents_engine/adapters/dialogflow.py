"""Translate between the Dialogflow webhook envelope and domain records."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from helper_intents_engine.core.api_models import (
    AppRequestModel,
    ArgumentModel,
    LocationModel,
    WebhookRequest,
)
from helper_intents_engine.core.config import config
from helper_intents_engine.core.exceptions import WebhookPayloadError
from helper_intents_engine.core.intents import (
    PLACE_DIALOG_SPEC_TYPE,
    SIGN_IN_STATUS_OK,
    VALUE_SPEC_TYPES,
    VerificationStatus,
)
from helper_intents_engine.core.language import normalize_locale
from helper_intents_engine.core.models import (
    Coordinates,
    DateTimeValue,
    DateValue,
    IncomingRequest,
    Location,
    TimeValue,
    UserProfile,
)
from helper_intents_engine.core.responses import (
    Confirmation,
    DateTimePrompt,
    OutgoingResponse,
    PermissionPrompt,
    PlacePrompt,
    PromptPayload,
    SignInPrompt,
)

# Argument names the platform uses for helper results and reprompts.
ARG_REPROMPT_COUNT = "REPROMPT_COUNT"
ARG_IS_FINAL_REPROMPT = "IS_FINAL_REPROMPT"
ARG_CONFIRMATION = "CONFIRMATION"
ARG_DATETIME = "DATETIME"
ARG_PERMISSION = "PERMISSION"
ARG_PLACE = "PLACE"
ARG_SIGN_IN = "SIGN_IN"


def _arguments(app_request: AppRequestModel) -> dict[str, ArgumentModel]:
    args: dict[str, ArgumentModel] = {}
    for app_input in app_request.inputs:
        for argument in app_input.arguments:
            args.setdefault(argument.name, argument)
    return args


def _to_location(model: Optional[LocationModel]) -> Optional[Location]:
    if model is None:
        return None
    coordinates = None
    point = model.coordinates
    # A partial coordinate pair is not a location.
    if point is not None and point.latitude is not None and point.longitude is not None:
        coordinates = Coordinates(latitude=point.latitude, longitude=point.longitude)
    return Location(
        formatted_address=model.formatted_address,
        city=model.city,
        coordinates=coordinates,
        name=model.name,
        zip_code=model.zip_code,
    )


def _to_date_time(argument: Optional[ArgumentModel]) -> Optional[DateTimeValue]:
    if argument is None or argument.datetime_value is None:
        return None
    value = argument.datetime_value
    date = None
    if value.date is not None:
        date = DateValue(year=value.date.year, month=value.date.month, day=value.date.day)
    time = None
    if value.time is not None:
        time = TimeValue(
            hours=value.time.hours, minutes=value.time.minutes, seconds=value.time.seconds
        )
    return DateTimeValue(date=date, time=time)


def _bool_arg(args: Mapping[str, ArgumentModel], name: str) -> Optional[bool]:
    argument = args.get(name)
    return argument.bool_value if argument is not None else None


def _signed_in(args: Mapping[str, ArgumentModel]) -> Optional[bool]:
    argument = args.get(ARG_SIGN_IN)
    if argument is None or argument.extension is None:
        return None
    return argument.extension.get("status") == SIGN_IN_STATUS_OK


def _verification_status(raw: Optional[str]) -> VerificationStatus:
    try:
        return VerificationStatus(str(raw).upper())
    except ValueError:
        return VerificationStatus.GUEST


def _resolve_locale(*candidates: Optional[str]) -> str:
    for candidate in candidates:
        normalized = normalize_locale(candidate)
        if normalized:
            return normalized
    return normalize_locale(config.DEFAULT_LOCALE) or config.DEFAULT_LOCALE


def to_incoming_request(envelope: WebhookRequest) -> IncomingRequest:
    """Flatten a validated envelope into the fields handlers consume."""
    app_request = envelope.original_detect_intent_request.payload
    args = _arguments(app_request)
    reprompt = args.get(ARG_REPROMPT_COUNT)
    profile_model = app_request.user.profile
    profile = None
    if profile_model is not None:
        profile = UserProfile(
            display_name=profile_model.display_name,
            given_name=profile_model.given_name,
            family_name=profile_model.family_name,
        )
    return IncomingRequest(
        intent=envelope.query_result.intent.display_name,
        locale=_resolve_locale(app_request.user.locale, envelope.query_result.language_code),
        reprompt_count=reprompt.int_value if reprompt is not None else None,
        is_final_prompt=bool(_bool_arg(args, ARG_IS_FINAL_REPROMPT)),
        user_confirmation=_bool_arg(args, ARG_CONFIRMATION),
        date_time=_to_date_time(args.get(ARG_DATETIME)),
        permission_granted=_bool_arg(args, ARG_PERMISSION),
        user_profile=profile,
        device_location=_to_location(app_request.device.location),
        place=_to_location(args[ARG_PLACE].place_value) if ARG_PLACE in args else None,
        signed_in=_signed_in(args),
        capabilities=frozenset(cap.name for cap in app_request.surface.capabilities),
        verification_status=_verification_status(app_request.user.user_verification_status),
    )


def parse_webhook_request(payload: Mapping[str, Any]) -> tuple[str, IncomingRequest]:
    """Validate a raw webhook body and return ``(intent name, request)``."""
    try:
        envelope = WebhookRequest.model_validate(payload)
    except ValidationError as exc:
        raise WebhookPayloadError(f"malformed webhook request: {exc.error_count()} error(s)") from exc
    request = to_incoming_request(envelope)
    return request.intent, request


def _prompt_data(prompt: PromptPayload) -> dict[str, Any]:
    data: dict[str, Any] = {"@type": VALUE_SPEC_TYPES[prompt.helper]}
    if isinstance(prompt, Confirmation):
        data["dialogSpec"] = {"requestConfirmationText": prompt.text}
    elif isinstance(prompt, DateTimePrompt):
        data["dialogSpec"] = {
            "requestDatetimeText": prompt.initial_prompt,
            "requestDateText": prompt.date_prompt,
            "requestTimeText": prompt.time_prompt,
        }
    elif isinstance(prompt, PermissionPrompt):
        data["optContext"] = prompt.context
        data["permissions"] = list(prompt.permissions)
    elif isinstance(prompt, PlacePrompt):
        data["dialogSpec"] = {
            "extension": {
                "@type": PLACE_DIALOG_SPEC_TYPE,
                "permissionContext": prompt.permission_context,
                "requestPrompt": prompt.request_prompt,
            }
        }
    elif isinstance(prompt, SignInPrompt):
        if prompt.context:
            data["optContext"] = prompt.context
    return data


def render_webhook_response(response: OutgoingResponse) -> dict[str, Any]:
    """Return the Dialogflow webhook response body for ``response``."""
    items = []
    for item in response.items:
        simple: dict[str, str] = {"textToSpeech": item.text_to_speech}
        if item.display_text is not None:
            simple["displayText"] = item.display_text
        items.append({"simpleResponse": simple})

    google: dict[str, Any] = {
        "expectUserResponse": response.expect_user_response,
        "richResponse": {"items": items},
    }
    if response.suggestions:
        google["richResponse"]["suggestions"] = [{"title": label} for label in response.suggestions]
    if response.prompt is not None:
        google["systemIntent"] = {
            "intent": response.prompt.helper.value,
            "data": _prompt_data(response.prompt),
        }
    return {"payload": {"google": google}}


__all__ = [
    "parse_webhook_request",
    "render_webhook_response",
    "to_incoming_request",
]
