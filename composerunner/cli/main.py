"""Typer CLI for composerunner: wiring hub for command modules."""

from __future__ import annotations

from typing import Annotated

import typer

from composerunner.cli._helpers import console
from composerunner.cli.compose_cmd import down, rm, run, up

app = typer.Typer(
    name="composerunner",
    help="Drive docker-compose with validated flags.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        from composerunner import __version__

        console.print(f"composerunner {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """composerunner: docker-compose from Python."""
    from composerunner._log import setup_logging

    setup_logging(verbose=verbose)


app.command()(up)
app.command()(run)
app.command()(rm)
app.command()(down)


def app_entry() -> None:
    """Entry point for the CLI."""
    app()
