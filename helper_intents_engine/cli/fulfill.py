"""CLI commands for running and checking fulfillment offline."""

from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from helper_intents_engine.adapters.dialogflow import (
    parse_webhook_request,
    render_webhook_response,
)
from helper_intents_engine.adapters.string_table import JsonStringTable
from helper_intents_engine.bootstrap import build_default_service_container
from helper_intents_engine.core.exceptions import ResourceNotFoundError, WebhookPayloadError
from helper_intents_engine.core.logging import correlation_id_context, get_logger
from helper_intents_engine.services import messages
from helper_intents_engine.services.intent_router import IntentHandlerNotFoundError

console = Console()
logger = get_logger(__name__)


def list_intents() -> None:
    """List the registered intents and their handlers."""
    services = build_default_service_container()
    table = Table(title="Registered intents")
    table.add_column("Intent", style="cyan")
    table.add_column("Handler")
    for name, handler in sorted(services.require_router().handlers().items()):
        table.add_row(name, getattr(handler, "__name__", repr(handler)))
    console.print(table)


def fulfill_file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Dialogflow request JSON"),
    intent: Optional[str] = typer.Option(
        None, "--intent", "-i", help="Override the intent display name in the request"
    ),
) -> None:
    """Run one webhook request file through the router and print the reply.

    Log lines are tagged with the request's ``responseId`` so an offline run can
    be matched against the webhook logs of the same turn.
    """
    services = build_default_service_container()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        intent_name, request = parse_webhook_request(payload)
    except (json.JSONDecodeError, WebhookPayloadError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    with correlation_id_context(payload.get("responseId") or uuid.uuid4().hex):
        logger.info("fulfilling %s from %s", intent or intent_name, path)
        try:
            response = services.require_router().handle(intent or intent_name, request, services)
        except (IntentHandlerNotFoundError, ResourceNotFoundError) as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1) from e

    console.print_json(json.dumps(render_webhook_response(response), ensure_ascii=False))


def check_strings(
    strings_dir: Optional[Path] = typer.Option(
        None, "--dir", "-d", help="Directory of <locale>.json tables (packaged tables by default)"
    ),
) -> None:
    """Verify every locale table defines every message key."""
    table_port = JsonStringTable.from_directory(strings_dir)
    locales = table_port.locales()
    if not locales:
        console.print("[red]No string tables found.[/red]")
        raise typer.Exit(1)

    missing: list[tuple[str, str]] = []
    for locale in locales:
        for key in sorted(messages.ALL_MESSAGE_KEYS - table_port.keys(locale)):
            missing.append((locale, key))

    if not missing:
        console.print(
            f"[green]All {len(messages.ALL_MESSAGE_KEYS)} keys present in "
            f"{', '.join(locales)}.[/green]"
        )
        return

    table = Table(title="Missing strings")
    table.add_column("Locale", style="cyan")
    table.add_column("Key", style="red")
    for locale, key in missing:
        table.add_row(locale, key)
    console.print(table)
    raise typer.Exit(1)


__all__ = ["list_intents", "fulfill_file", "check_strings"]
