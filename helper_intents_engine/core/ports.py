"""Protocol definitions for the collaborators intent handlers depend on."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Iterable, Protocol

from helper_intents_engine.core.responses import OutgoingResponse, PromptPayload, SimpleResponse


class StringTablePort(Protocol):
    """Port exposing locale-indexed, strictly looked-up message templates."""

    def get_string(self, locale: str, key: str, *args: object) -> str:
        """Return the template for ``(locale, key)`` formatted with ``args``.

        Raises :class:`~helper_intents_engine.core.exceptions.ResourceNotFoundError`
        when the locale or key is missing.
        """
        ...

    def locales(self) -> list[str]:
        """Return the locale identifiers with a loaded table."""
        ...

    def keys(self, locale: str) -> set[str]:
        """Return the message keys defined for ``locale``."""
        ...


class ResponseBuilderPort(Protocol):
    """Port for incrementally assembling a single-turn response."""

    def add(self, item: str | SimpleResponse) -> "ResponseBuilderPort":
        """Append a text chunk."""
        ...

    def add_suggestions(self, labels: Iterable[str]) -> "ResponseBuilderPort":
        """Append suggestion chips, ignoring labels already present."""
        ...

    def add_prompt(self, prompt: PromptPayload) -> "ResponseBuilderPort":
        """Attach the single structured helper prompt."""
        ...

    def end_conversation(self) -> "ResponseBuilderPort":
        """Mark the response as closing the conversation."""
        ...

    def build(self) -> OutgoingResponse:
        """Return the immutable response."""
        ...


__all__ = ["StringTablePort", "ResponseBuilderPort"]
