"""Pydantic models for the Dialogflow v2 webhook envelope.

Only the fields the fulfillment reads are modelled; everything else the
platform sends is ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _EnvelopeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class CoordinatesModel(_EnvelopeModel):
    latitude: float | None = None
    longitude: float | None = None


class LocationModel(_EnvelopeModel):
    coordinates: CoordinatesModel | None = None
    formatted_address: str | None = None
    city: str | None = None
    zip_code: str | None = None
    name: str | None = None


class UserProfileModel(_EnvelopeModel):
    display_name: str | None = None
    given_name: str | None = None
    family_name: str | None = None


class UserModel(_EnvelopeModel):
    profile: UserProfileModel | None = None
    locale: str | None = None
    user_verification_status: str | None = None


class DeviceModel(_EnvelopeModel):
    location: LocationModel | None = None


class CapabilityModel(_EnvelopeModel):
    name: str


class SurfaceModel(_EnvelopeModel):
    capabilities: list[CapabilityModel] = Field(default_factory=list)


class DateModel(_EnvelopeModel):
    year: int | None = None
    month: int | None = None
    day: int | None = None


class TimeModel(_EnvelopeModel):
    hours: int | None = None
    minutes: int | None = None
    seconds: int | None = None
    nanos: int | None = None


class DateTimeModel(_EnvelopeModel):
    date: DateModel | None = None
    time: TimeModel | None = None


class ArgumentModel(_EnvelopeModel):
    """One argument of an Actions on Google input."""

    name: str
    raw_text: str | None = None
    text_value: str | None = None
    bool_value: bool | None = None
    # Platform encodes int64 as a JSON string
    int_value: int | None = None
    datetime_value: DateTimeModel | None = Field(default=None, alias="datetimeValue")
    place_value: LocationModel | None = None
    extension: dict[str, Any] | None = None


class InputModel(_EnvelopeModel):
    intent: str | None = None
    arguments: list[ArgumentModel] = Field(default_factory=list)


class AppRequestModel(_EnvelopeModel):
    """Actions on Google request carried inside the Dialogflow envelope."""

    user: UserModel = Field(default_factory=UserModel)
    device: DeviceModel = Field(default_factory=DeviceModel)
    surface: SurfaceModel = Field(default_factory=SurfaceModel)
    inputs: list[InputModel] = Field(default_factory=list)
    is_in_sandbox: bool = False


class OriginalDetectIntentRequestModel(_EnvelopeModel):
    source: str | None = None
    version: str | None = None
    payload: AppRequestModel = Field(default_factory=AppRequestModel)


class IntentModel(_EnvelopeModel):
    name: str | None = None
    display_name: str = Field(..., description="Dialogflow intent display name")


class QueryResultModel(_EnvelopeModel):
    query_text: str | None = None
    language_code: str | None = None
    intent: IntentModel


class WebhookRequest(_EnvelopeModel):
    """Request body Dialogflow POSTs to the fulfillment webhook."""

    response_id: str | None = None
    session: str | None = None
    query_result: QueryResultModel
    original_detect_intent_request: OriginalDetectIntentRequestModel = Field(
        default_factory=OriginalDetectIntentRequestModel
    )


__all__ = [
    "WebhookRequest",
    "QueryResultModel",
    "IntentModel",
    "OriginalDetectIntentRequestModel",
    "AppRequestModel",
    "InputModel",
    "ArgumentModel",
    "LocationModel",
    "CoordinatesModel",
    "UserModel",
    "UserProfileModel",
    "DeviceModel",
    "SurfaceModel",
    "CapabilityModel",
    "DateTimeModel",
    "DateModel",
    "TimeModel",
]
