"""Intent router dispatching a turn to its registered handler."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Mapping, MutableMapping, Union

from helper_intents_engine.core.logging import get_logger
from helper_intents_engine.core.models import IncomingRequest
from helper_intents_engine.core.responses import OutgoingResponse

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer

logger = get_logger(__name__)

IntentHandler = Callable[[IncomingRequest, "ServiceContainer"], OutgoingResponse]
IntentName = Union[str, Enum]


class IntentRouterError(RuntimeError):
    """Base error for router failures."""


class IntentHandlerNotFoundError(IntentRouterError):
    """Raised when no handler is registered for the requested intent."""

    def __init__(self, intent_name: str) -> None:
        self.intent_name = intent_name
        super().__init__(f"No handler registered for intent {intent_name!r}")


def _key(intent: IntentName) -> str:
    return str(intent.value) if isinstance(intent, Enum) else str(intent)


class IntentRouter:
    """Dispatch intents to registered handlers."""

    def __init__(self, handlers: Mapping[IntentName, IntentHandler] | None = None) -> None:
        self._handlers: MutableMapping[str, IntentHandler] = {
            _key(intent): handler for intent, handler in (handlers or {}).items()
        }

    def register(self, intent: IntentName, handler: IntentHandler) -> None:
        """Register or replace a handler for ``intent``."""

        self._handlers[_key(intent)] = handler

    def unregister(self, intent: IntentName) -> None:
        """Remove a handler if present."""

        self._handlers.pop(_key(intent), None)

    def handle(
        self, intent: IntentName, request: IncomingRequest, services: "ServiceContainer"
    ) -> OutgoingResponse:
        """Run the handler for ``intent`` and return its response."""

        name = _key(intent)
        try:
            handler = self._handlers[name]
        except KeyError as exc:
            raise IntentHandlerNotFoundError(name) from exc
        logger.debug("dispatching intent %s to %s", name, getattr(handler, "__name__", handler))
        return handler(request, services)

    async def dispatch(
        self, intent: IntentName, request: IncomingRequest, services: "ServiceContainer"
    ) -> OutgoingResponse:
        """Async transport entry point; handlers never suspend."""

        return self.handle(intent, request, services)

    def handlers(self) -> Mapping[str, IntentHandler]:
        """Return a shallow copy of the current intent handler registry."""

        return dict(self._handlers)


__all__ = [
    "IntentRouter",
    "IntentRouterError",
    "IntentHandlerNotFoundError",
    "IntentHandler",
]
