"""CLI commands for helper-intents-engine."""

import typer

from helper_intents_engine.cli import fulfill

main_app = typer.Typer(
    name="helper-intents",
    help="Helper Intents Engine CLI",
    no_args_is_help=True,
)
main_app.command("intents")(fulfill.list_intents)
main_app.command("fulfill")(fulfill.fulfill_file)
main_app.command("check-strings")(fulfill.check_strings)


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
