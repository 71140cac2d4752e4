"""Human-readable rendering of platform locations."""

from __future__ import annotations

from helper_intents_engine.core.models import Location


def format_location(location: Location) -> str:
    """Return the most specific readable form of ``location``.

    Precedence: formatted address, then city, then ``"lat / lon"``. An empty
    string is returned when none of them is present.
    """
    if location.formatted_address:
        return location.formatted_address
    if location.city:
        return location.city
    if location.coordinates is not None:
        return f"{location.coordinates.latitude} / {location.coordinates.longitude}"
    return ""


__all__ = ["format_location"]
