"""Incremental builder implementing the response builder port."""

from __future__ import annotations

from typing import Iterable, Optional

from helper_intents_engine.core.exceptions import ResponseBuildError
from helper_intents_engine.core.ports import ResponseBuilderPort
from helper_intents_engine.core.responses import OutgoingResponse, PromptPayload, SimpleResponse


class ResponseBuilder(ResponseBuilderPort):
    """Collect chunks, chips and at most one helper prompt for a turn.

    Methods return ``self`` so handlers can chain calls the way the platform
    client libraries do.
    """

    def __init__(self) -> None:
        self._items: list[SimpleResponse] = []
        self._suggestions: list[str] = []
        self._prompt: Optional[PromptPayload] = None
        self._expect_user_response = True

    def add(self, item: str | SimpleResponse) -> "ResponseBuilder":
        if isinstance(item, str):
            item = SimpleResponse(text_to_speech=item)
        self._items.append(item)
        return self

    def add_suggestions(self, labels: Iterable[str]) -> "ResponseBuilder":
        for label in labels:
            if label not in self._suggestions:
                self._suggestions.append(label)
        return self

    def add_prompt(self, prompt: PromptPayload) -> "ResponseBuilder":
        if self._prompt is not None:
            raise ResponseBuildError(
                f"response already carries {self._prompt.helper.value}; "
                f"cannot also attach {prompt.helper.value}"
            )
        self._prompt = prompt
        return self

    def end_conversation(self) -> "ResponseBuilder":
        self._expect_user_response = False
        return self

    def build(self) -> OutgoingResponse:
        return OutgoingResponse(
            items=tuple(self._items),
            suggestions=tuple(self._suggestions),
            prompt=self._prompt,
            expect_user_response=self._expect_user_response,
        )


__all__ = ["ResponseBuilder"]
