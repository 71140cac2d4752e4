"""Locale identifier helpers."""

import re
from typing import Optional

_LOCALE_PATTERN = re.compile(r"^([a-zA-Z]{2,3})(?:[-_]([a-zA-Z]{2}|[0-9]{3}))?$")


def normalize_locale(value: Optional[str]) -> Optional[str]:
    """Normalize ``en_us`` / ``EN-us`` style identifiers to ``en-US``.

    Returns ``None`` for empty or unparseable input so callers can apply their
    own default.
    """
    if value is None:
        return None
    match = _LOCALE_PATTERN.match(value.strip())
    if not match:
        return None
    language, region = match.groups()
    if region:
        return f"{language.lower()}-{region.upper()}"
    return language.lower()


__all__ = ["normalize_locale"]
