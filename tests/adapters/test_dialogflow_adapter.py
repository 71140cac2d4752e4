"""Tests for Dialogflow envelope parsing and rendering."""

from __future__ import annotations

import pytest

from helper_intents_engine.adapters.dialogflow import (
    parse_webhook_request,
    render_webhook_response,
)
from helper_intents_engine.core.exceptions import WebhookPayloadError
from helper_intents_engine.core.intents import CAPABILITY_SCREEN_OUTPUT, VerificationStatus
from helper_intents_engine.core.models import Coordinates, Location
from helper_intents_engine.core.responses import (
    Confirmation,
    DateTimePrompt,
    PermissionPrompt,
    PlacePrompt,
    SignInPrompt,
    SimpleResponse,
)
from helper_intents_engine.services.location import format_location
from helper_intents_engine.services.response_builder import ResponseBuilder

# pylint: disable=missing-function-docstring


def test_parse_minimal_request_defaults(webhook_payload) -> None:
    intent, request = parse_webhook_request(webhook_payload("Default Welcome Intent"))

    assert intent == "Default Welcome Intent"
    assert request.intent == intent
    assert request.locale == "en-US"
    assert request.reprompt_count is None
    assert request.is_final_prompt is False
    assert request.user_confirmation is None
    assert request.permission_granted is None
    assert request.signed_in is None
    assert request.place is None
    assert request.device_location is None
    assert request.verification_status is VerificationStatus.VERIFIED
    assert CAPABILITY_SCREEN_OUTPUT in request.capabilities


def test_parse_reprompt_arguments(webhook_payload) -> None:
    payload = webhook_payload(
        "actions_intent_no_input",
        arguments=[
            {"name": "REPROMPT_COUNT", "intValue": "2"},
            {"name": "IS_FINAL_REPROMPT", "boolValue": True},
        ],
    )
    _, request = parse_webhook_request(payload)
    assert request.reprompt_count == 2
    assert request.is_final_prompt is True


def test_parse_helper_results(webhook_payload) -> None:
    payload = webhook_payload(
        "actions_intent_permission",
        arguments=[
            {"name": "PERMISSION", "boolValue": True, "textValue": "true"},
            {"name": "CONFIRMATION", "boolValue": False},
            {
                "name": "DATETIME",
                "datetimeValue": {
                    "date": {"year": 2026, "month": 11, "day": 3},
                    "time": {"hours": 14, "minutes": 5},
                },
            },
            {
                "name": "PLACE",
                "placeValue": {
                    "coordinates": {"latitude": 45.76, "longitude": 4.84},
                    "formattedAddress": "1 Rue de la République, Lyon",
                    "name": "Café",
                },
            },
            {"name": "SIGN_IN", "extension": {"@type": "x", "status": "OK"}},
        ],
        user={
            "locale": "fr-FR",
            "userVerificationStatus": "GUEST",
            "profile": {"displayName": "Ana Silva", "givenName": "Ana"},
        },
        device={"location": {"city": "Lyon", "zipCode": "69001"}},
    )
    _, request = parse_webhook_request(payload)

    assert request.permission_granted is True
    assert request.user_confirmation is False
    assert request.date_time is not None
    assert request.date_time.date is not None and request.date_time.date.day == 3
    assert request.date_time.time is not None and request.date_time.time.minutes == 5
    assert request.place == Location(
        formatted_address="1 Rue de la République, Lyon",
        coordinates=Coordinates(45.76, 4.84),
        name="Café",
    )
    assert request.signed_in is True
    assert request.user_profile is not None
    assert request.user_profile.display_name == "Ana Silva"
    assert request.device_location == Location(city="Lyon", zip_code="69001")
    assert request.verification_status is VerificationStatus.GUEST
    assert request.locale == "fr-FR"


@pytest.mark.parametrize("coordinates", [{}, {"latitude": 45.76}, {"longitude": 4.84}])
def test_partial_coordinates_are_dropped(webhook_payload, coordinates) -> None:
    payload = webhook_payload(
        "actions_intent_place",
        arguments=[{"name": "PLACE", "placeValue": {"coordinates": coordinates}}],
        device={"location": {"coordinates": coordinates}},
    )
    _, request = parse_webhook_request(payload)

    assert request.place == Location()
    assert request.device_location == Location()
    assert format_location(request.place) == ""


def test_sign_in_status_other_than_ok_is_not_signed_in(webhook_payload) -> None:
    payload = webhook_payload(
        "actions_intent_sign_in",
        arguments=[{"name": "SIGN_IN", "extension": {"status": "CANCELLED"}}],
    )
    _, request = parse_webhook_request(payload)
    assert request.signed_in is False


def test_locale_falls_back_to_query_language_then_default(webhook_payload) -> None:
    payload = webhook_payload("Default Welcome Intent", user={}, language_code="es-es")
    _, request = parse_webhook_request(payload)
    assert request.locale == "es-ES"
    assert request.verification_status is VerificationStatus.GUEST

    payload = webhook_payload("Default Welcome Intent", user={}, language_code="")
    _, request = parse_webhook_request(payload)
    assert request.locale == "en-US"


def test_malformed_payload_raises() -> None:
    with pytest.raises(WebhookPayloadError):
        parse_webhook_request({"queryResult": {"languageCode": "en"}})


def test_render_text_and_suggestions() -> None:
    response = (
        ResponseBuilder()
        .add(SimpleResponse(text_to_speech="Hi there!", display_text="Hello there"))
        .add("plain")
        .add_suggestions(["place", "sign in"])
        .build()
    )
    body = render_webhook_response(response)
    google = body["payload"]["google"]
    assert google["expectUserResponse"] is True
    assert google["richResponse"]["items"] == [
        {"simpleResponse": {"textToSpeech": "Hi there!", "displayText": "Hello there"}},
        {"simpleResponse": {"textToSpeech": "plain"}},
    ]
    assert google["richResponse"]["suggestions"] == [{"title": "place"}, {"title": "sign in"}]
    assert "systemIntent" not in google


def test_render_end_conversation() -> None:
    body = render_webhook_response(ResponseBuilder().add("bye").end_conversation().build())
    assert body["payload"]["google"]["expectUserResponse"] is False
    assert "suggestions" not in body["payload"]["google"]["richResponse"]


@pytest.mark.parametrize(
    ("prompt", "intent", "data"),
    [
        (
            Confirmation(text="Sure?"),
            "actions.intent.CONFIRMATION",
            {
                "@type": "type.googleapis.com/google.actions.v2.ConfirmationValueSpec",
                "dialogSpec": {"requestConfirmationText": "Sure?"},
            },
        ),
        (
            DateTimePrompt(initial_prompt="When?", date_prompt="Date?", time_prompt="Time?"),
            "actions.intent.DATETIME",
            {
                "@type": "type.googleapis.com/google.actions.v2.DateTimeValueSpec",
                "dialogSpec": {
                    "requestDatetimeText": "When?",
                    "requestDateText": "Date?",
                    "requestTimeText": "Time?",
                },
            },
        ),
        (
            PermissionPrompt(permissions=("NAME",), context="Because"),
            "actions.intent.PERMISSION",
            {
                "@type": "type.googleapis.com/google.actions.v2.PermissionValueSpec",
                "optContext": "Because",
                "permissions": ["NAME"],
            },
        ),
        (
            PlacePrompt(request_prompt="Where?", permission_context="To find"),
            "actions.intent.PLACE",
            {
                "@type": "type.googleapis.com/google.actions.v2.PlaceValueSpec",
                "dialogSpec": {
                    "extension": {
                        "@type": (
                            "type.googleapis.com/google.actions.v2.PlaceValueSpec.PlaceDialogSpec"
                        ),
                        "permissionContext": "To find",
                        "requestPrompt": "Where?",
                    }
                },
            },
        ),
        (
            SignInPrompt(),
            "actions.intent.SIGN_IN",
            {"@type": "type.googleapis.com/google.actions.v2.SignInValueSpec"},
        ),
    ],
)
def test_render_system_intent(prompt, intent, data) -> None:
    body = render_webhook_response(ResponseBuilder().add("x").add_prompt(prompt).build())
    assert body["payload"]["google"]["systemIntent"] == {"intent": intent, "data": data}
