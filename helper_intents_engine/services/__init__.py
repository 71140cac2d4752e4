"""Application service layer: container of collaborators handlers rely on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from helper_intents_engine.core.ports import ResponseBuilderPort, StringTablePort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_router import IntentRouter


def _default_builder_factory() -> ResponseBuilderPort:
    from .response_builder import ResponseBuilder  # pylint: disable=import-outside-toplevel

    return ResponseBuilder()


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers."""

    strings: Optional[StringTablePort] = None
    intent_router: Optional["IntentRouter"] = None
    response_builder_factory: Callable[[], ResponseBuilderPort] = field(
        default=_default_builder_factory
    )

    def require_strings(self) -> StringTablePort:
        """Return the string table or raise if it was never wired."""
        if self.strings is None:
            raise RuntimeError("StringTablePort has not been configured.")
        return self.strings

    def require_router(self) -> "IntentRouter":
        """Return the intent router or raise if it was never wired."""
        if self.intent_router is None:
            raise RuntimeError("IntentRouter has not been configured.")
        return self.intent_router

    def new_response_builder(self) -> ResponseBuilderPort:
        """Construct a fresh builder for one turn."""
        return self.response_builder_factory()


def build_default_services(
    *,
    strings_port: Optional[StringTablePort] = None,
    response_builder_factory: Optional[Callable[[], ResponseBuilderPort]] = None,
) -> ServiceContainer:
    """Return a service container with the default intent router wiring."""

    from .intents import build_default_router  # pylint: disable=import-outside-toplevel

    container = ServiceContainer(strings=strings_port, intent_router=build_default_router())
    if response_builder_factory is not None:
        container.response_builder_factory = response_builder_factory
    return container


__all__ = ["ServiceContainer", "build_default_services"]
