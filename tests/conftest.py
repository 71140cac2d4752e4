"""Pytest configuration: ensure env vars and import path are set early.

Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Iterator

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

os.environ.setdefault("DEFAULT_LOCALE", "en-US")
os.environ.setdefault("ENABLE_WEBHOOK_AUTH", "false")

# pylint: disable=wrong-import-position
from helper_intents_engine.adapters.string_table import JsonStringTable  # noqa: E402
from helper_intents_engine.services import ServiceContainer, build_default_services  # noqa: E402
from helper_intents_engine.services import runtime  # noqa: E402


@pytest.fixture(scope="session")
def string_table() -> JsonStringTable:
    """Packaged locale tables."""
    return JsonStringTable.from_directory()


@pytest.fixture
def services(string_table: JsonStringTable) -> Iterator[ServiceContainer]:
    """Default container registered in the runtime registry for the test."""
    container = build_default_services(strings_port=string_table)
    runtime.set_services(container)
    yield container
    runtime.clear_services()


def make_webhook_payload(
    intent: str,
    *,
    arguments: list[dict[str, Any]] | None = None,
    user: dict[str, Any] | None = None,
    device: dict[str, Any] | None = None,
    capabilities: list[str] | None = None,
    language_code: str = "en",
) -> dict[str, Any]:
    """Build a minimal Dialogflow v2 webhook request body."""
    return {
        "responseId": "resp-1",
        "session": "projects/demo/agent/sessions/abc",
        "queryResult": {
            "queryText": "GOOGLE_ASSISTANT_WELCOME",
            "languageCode": language_code,
            "intent": {"name": "projects/demo/agent/intents/1", "displayName": intent},
        },
        "originalDetectIntentRequest": {
            "source": "google",
            "version": "2",
            "payload": {
                "user": (
                    user
                    if user is not None
                    else {"locale": "en-US", "userVerificationStatus": "VERIFIED"}
                ),
                "device": device if device is not None else {},
                "surface": {
                    "capabilities": [
                        {"name": name}
                        for name in (
                            capabilities
                            if capabilities is not None
                            else [
                                "actions.capability.SCREEN_OUTPUT",
                                "actions.capability.AUDIO_OUTPUT",
                            ]
                        )
                    ]
                },
                "inputs": [
                    {"intent": "actions.intent.TEXT", "arguments": arguments or []},
                ],
                "isInSandbox": True,
            },
        },
    }


@pytest.fixture
def webhook_payload():
    """Factory for Dialogflow webhook request bodies."""
    return make_webhook_payload
