from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from .logging import setup_logging
from .settings import load_settings
from .tui.components import render_error
from .tui.host import Host
from .tui.router import Router

app = typer.Typer(
    add_completion=False,
    help="automata: terminal menu with timer, list and about views",
    rich_markup_mode="rich",
)
console = Console(stderr=True)
logger = logging.getLogger("automata")


def _run_tui() -> int:
    """Build the router and hand it to the full-screen host.

    Returns the process exit code.
    """
    try:
        settings = load_settings()
    except ValidationError as exc:
        render_error(
            console,
            "Invalid configuration",
            str(exc),
            action="Check the AUTOMATA_* environment variables and .env",
        )
        return 2

    log_file = setup_logging(settings)
    router = Router.from_settings(settings)

    try:
        return Host(router).run()
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 0
    except Exception as exc:
        logger.exception("host loop failed")
        render_error(
            console,
            "The terminal UI stopped unexpectedly",
            f"{type(exc).__name__}: {exc}",
            action=f"See {log_file} for details",
        )
        return 1


@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context):
    """
    [bold]automata[/bold]: pick an item from the menu to open its view.

    [dim]Run without arguments to launch the interactive menu.[/dim]
    """
    if ctx.invoked_subcommand is None:
        raise typer.Exit(code=_run_tui())


def main():
    app()
