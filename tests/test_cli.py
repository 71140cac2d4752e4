"""Tests for the helper-intents CLI."""
# pylint: disable=missing-function-docstring

from __future__ import annotations

import json
import logging
from pathlib import Path

from typer.testing import CliRunner

from helper_intents_engine.cli import main_app
from helper_intents_engine.core.logging import CorrelationIdFilter, get_correlation_id

runner = CliRunner()


def test_intents_lists_every_handler() -> None:
    result = runner.invoke(main_app, ["intents"])
    assert result.exit_code == 0
    assert "askForSignIn" in result.output
    assert "handle_no_input" in result.output


def test_fulfill_prints_rendered_response(tmp_path: Path, webhook_payload) -> None:
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(webhook_payload("askForConfirmation")), encoding="utf-8")

    result = runner.invoke(main_app, ["fulfill", str(request_file)])

    assert result.exit_code == 0
    body = json.loads(result.output)
    assert body["payload"]["google"]["systemIntent"]["intent"] == "actions.intent.CONFIRMATION"


def test_fulfill_intent_override_and_unknown(tmp_path: Path, webhook_payload) -> None:
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(webhook_payload("askForConfirmation")), encoding="utf-8")

    result = runner.invoke(main_app, ["fulfill", str(request_file), "--intent", "nope"])

    assert result.exit_code == 1
    assert "nope" in result.output


def test_check_strings_passes_for_packaged_tables() -> None:
    result = runner.invoke(main_app, ["check-strings"])
    assert result.exit_code == 0
    assert "en-US" in result.output


def test_check_strings_reports_missing_keys(tmp_path: Path) -> None:
    (tmp_path / "de-DE.json").write_text(json.dumps({"WELCOME_SPEECH": "Hallo!"}), "utf-8")

    result = runner.invoke(main_app, ["check-strings", "--dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "NO_INPUT_FIRST" in result.output


def test_fulfill_tags_logs_with_response_id(tmp_path: Path, webhook_payload, caplog) -> None:
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(webhook_payload("askForPlace")), encoding="utf-8")
    caplog.handler.addFilter(CorrelationIdFilter())

    with caplog.at_level(logging.INFO):
        result = runner.invoke(main_app, ["fulfill", str(request_file)])

    assert result.exit_code == 0
    cids = {
        getattr(record, "correlation_id", None)
        for record in caplog.records
        if record.name == "helper_intents_engine.cli.fulfill"
    }
    assert cids == {"resp-1"}
    assert get_correlation_id() is None
