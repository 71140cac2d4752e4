"""Typed per-turn request record consumed by intent handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from helper_intents_engine.core.intents import CAPABILITY_SCREEN_OUTPUT, VerificationStatus


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Location:
    """A device or place location; any representation may be missing."""

    formatted_address: Optional[str] = None
    city: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    name: Optional[str] = None
    zip_code: Optional[str] = None


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Profile fields released by the NAME permission."""

    display_name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DateValue:
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None


@dataclass(frozen=True, slots=True)
class TimeValue:
    hours: Optional[int] = None
    minutes: Optional[int] = None
    seconds: Optional[int] = None


@dataclass(frozen=True, slots=True)
class DateTimeValue:
    """Date and time answered through the DATETIME helper."""

    date: Optional[DateValue] = None
    time: Optional[TimeValue] = None


@dataclass(frozen=True, slots=True)
class IncomingRequest:  # pylint: disable=too-many-instance-attributes
    """Fields of one conversational turn that handlers read.

    Nullable flags are kept as ``None`` when the platform omits them; the
    ``*_or_default`` accessors apply the neutral value (``0`` / ``False``).
    """

    intent: str
    locale: str = "en-US"
    reprompt_count: Optional[int] = None
    is_final_prompt: bool = False
    user_confirmation: Optional[bool] = None
    date_time: Optional[DateTimeValue] = None
    permission_granted: Optional[bool] = None
    user_profile: Optional[UserProfile] = None
    device_location: Optional[Location] = None
    place: Optional[Location] = None
    signed_in: Optional[bool] = None
    capabilities: frozenset[str] = field(default_factory=frozenset)
    verification_status: VerificationStatus = VerificationStatus.GUEST

    @property
    def reprompt_count_or_default(self) -> int:
        return self.reprompt_count or 0

    @property
    def is_confirmed(self) -> bool:
        return bool(self.user_confirmation)

    @property
    def is_permission_granted(self) -> bool:
        return bool(self.permission_granted)

    @property
    def is_signed_in(self) -> bool:
        return bool(self.signed_in)

    @property
    def is_verified(self) -> bool:
        return self.verification_status is VerificationStatus.VERIFIED

    def has_capability(self, capability: str) -> bool:
        """True when the surface declared ``capability``."""
        return capability in self.capabilities

    def has_screen(self) -> bool:
        return self.has_capability(CAPABILITY_SCREEN_OUTPUT)


__all__ = [
    "Coordinates",
    "Location",
    "UserProfile",
    "DateValue",
    "TimeValue",
    "DateTimeValue",
    "IncomingRequest",
]
