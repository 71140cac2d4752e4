"""Fulfillment webhook for Actions on Google helper intents."""

HELPER_INTENTS_VERSION = "0.3.0"

__all__ = ["HELPER_INTENTS_VERSION"]
