"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from helper_intents_engine.adapters.string_table import JsonStringTable
from helper_intents_engine.core.config import config
from helper_intents_engine.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    return build_default_services(
        strings_port=JsonStringTable.from_directory(config.STRINGS_DIR),
    )


__all__ = ["build_default_service_container"]
