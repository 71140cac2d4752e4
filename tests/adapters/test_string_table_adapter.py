"""Tests for the JSON locale string table."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from helper_intents_engine.adapters.string_table import JsonStringTable
from helper_intents_engine.core.exceptions import ResourceNotFoundError
from helper_intents_engine.services import messages

# pylint: disable=missing-function-docstring


def test_packaged_tables_define_every_key(string_table: JsonStringTable) -> None:
    assert string_table.locales() == ["en-US", "es-ES", "fr-FR"]
    for locale in string_table.locales():
        assert string_table.keys(locale) == set(messages.ALL_MESSAGE_KEYS), locale


def test_positional_substitution() -> None:
    table = JsonStringTable({"en-US": {"GREETING": "Thank you, {0}. See you {1}"}})
    assert table.get_string("en-US", "GREETING", "Ana", "soon") == "Thank you, Ana. See you soon"


def test_locale_lookup_is_normalized() -> None:
    table = JsonStringTable({"en_us": {"A": "a"}})
    assert table.locales() == ["en-US"]
    assert table.get_string("EN-us", "A") == "a"


def test_missing_key_raises() -> None:
    table = JsonStringTable({"en-US": {"A": "a"}})
    with pytest.raises(ResourceNotFoundError) as excinfo:
        table.get_string("en-US", "B")
    assert excinfo.value.locale == "en-US"
    assert excinfo.value.key == "B"


def test_missing_locale_does_not_fall_back() -> None:
    table = JsonStringTable({"en-US": {"A": "a"}})
    with pytest.raises(ResourceNotFoundError) as excinfo:
        table.get_string("en-GB", "A")
    assert excinfo.value.key is None


def test_from_directory_loads_each_file(tmp_path: Path) -> None:
    (tmp_path / "de-DE.json").write_text(json.dumps({"A": "Hallo"}), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    table = JsonStringTable.from_directory(tmp_path)
    assert table.locales() == ["de-DE"]
    assert table.get_string("de-DE", "A") == "Hallo"


def test_from_directory_rejects_non_string_values(tmp_path: Path) -> None:
    (tmp_path / "en-US.json").write_text(json.dumps({"A": ["nested"]}), encoding="utf-8")
    with pytest.raises(ValueError):
        JsonStringTable.from_directory(tmp_path)


def test_invalid_locale_identifier_rejected() -> None:
    with pytest.raises(ValueError):
        JsonStringTable({"not a locale": {}})
