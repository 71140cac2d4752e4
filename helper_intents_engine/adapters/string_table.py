"""JSON-backed locale string table implementing the string table port."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Optional

from helper_intents_engine.core.exceptions import ResourceNotFoundError
from helper_intents_engine.core.language import normalize_locale
from helper_intents_engine.core.logging import get_logger
from helper_intents_engine.core.ports import StringTablePort

logger = get_logger(__name__)

PACKAGED_STRINGS_DIR = Path(__file__).resolve().parent.parent / "resources" / "strings"


class JsonStringTable(StringTablePort):
    """Strict ``(locale, key) -> template`` lookup.

    Tables are loaded once; a missing locale or key raises
    :class:`ResourceNotFoundError` instead of falling back to another locale.
    """

    def __init__(self, tables: Mapping[str, Mapping[str, str]]) -> None:
        self._tables: dict[str, dict[str, str]] = {}
        for locale, table in tables.items():
            normalized = normalize_locale(locale)
            if normalized is None:
                raise ValueError(f"invalid locale identifier: {locale!r}")
            self._tables[normalized] = dict(table)

    @classmethod
    def from_directory(cls, directory: Optional[Path] = None) -> "JsonStringTable":
        """Load every ``<locale>.json`` file in ``directory``."""
        directory = Path(directory) if directory is not None else PACKAGED_STRINGS_DIR
        tables: dict[str, dict[str, str]] = {}
        for path in sorted(directory.glob("*.json")):
            with open(path, encoding="utf-8") as json_file:
                data = json.load(json_file)
            if not isinstance(data, dict) or not all(
                isinstance(value, str) for value in data.values()
            ):
                raise ValueError(f"string table {path.name} must map keys to strings")
            tables[path.stem] = data
        if not tables:
            logger.warning("No string tables found in %s", directory)
        else:
            logger.info("Loaded string tables %s from %s", sorted(tables), directory)
        return cls(tables)

    def _table(self, locale: str) -> dict[str, str]:
        normalized = normalize_locale(locale) or locale
        try:
            return self._tables[normalized]
        except KeyError as exc:
            raise ResourceNotFoundError(locale) from exc

    def get_string(self, locale: str, key: str, *args: object) -> str:
        table = self._table(locale)
        try:
            template = table[key]
        except KeyError as exc:
            raise ResourceNotFoundError(locale, key) from exc
        return template.format(*args) if args else template

    def locales(self) -> list[str]:
        return sorted(self._tables)

    def keys(self, locale: str) -> set[str]:
        return set(self._table(locale))


__all__ = ["JsonStringTable", "PACKAGED_STRINGS_DIR"]
