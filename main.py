"""ASGI entrypoint: ``uvicorn main:app``."""

from helper_intents_engine.api_factory import create_app

app = create_app()
