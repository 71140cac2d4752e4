"""Outgoing response records and the helper prompt payloads they may carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from helper_intents_engine.core.intents import HelperIntent


@dataclass(frozen=True, slots=True)
class SimpleResponse:
    """One spoken chunk with an optional different on-screen text."""

    text_to_speech: str
    display_text: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Confirmation:
    helper: ClassVar[HelperIntent] = HelperIntent.CONFIRMATION

    text: str


@dataclass(frozen=True, slots=True)
class DateTimePrompt:
    helper: ClassVar[HelperIntent] = HelperIntent.DATETIME

    initial_prompt: str
    date_prompt: str
    time_prompt: str


@dataclass(frozen=True, slots=True)
class PermissionPrompt:
    helper: ClassVar[HelperIntent] = HelperIntent.PERMISSION

    permissions: tuple[str, ...]
    context: str


@dataclass(frozen=True, slots=True)
class PlacePrompt:
    helper: ClassVar[HelperIntent] = HelperIntent.PLACE

    request_prompt: str
    permission_context: str


@dataclass(frozen=True, slots=True)
class SignInPrompt:
    helper: ClassVar[HelperIntent] = HelperIntent.SIGN_IN

    context: Optional[str] = None


PromptPayload = Union[Confirmation, DateTimePrompt, PermissionPrompt, PlacePrompt, SignInPrompt]


@dataclass(frozen=True, slots=True)
class OutgoingResponse:
    """Immutable result of a single turn."""

    items: tuple[SimpleResponse, ...] = ()
    suggestions: tuple[str, ...] = ()
    prompt: Optional[PromptPayload] = None
    expect_user_response: bool = True

    @property
    def texts(self) -> list[str]:
        """Spoken text of every chunk, in order."""
        return [item.text_to_speech for item in self.items]

    def is_empty(self) -> bool:
        return not self.items and not self.suggestions and self.prompt is None


__all__ = [
    "SimpleResponse",
    "Confirmation",
    "DateTimePrompt",
    "PermissionPrompt",
    "PlacePrompt",
    "SignInPrompt",
    "PromptPayload",
    "OutgoingResponse",
]
