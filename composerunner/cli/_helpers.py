"""Shared CLI helpers: option parsing, session setup, and error handling."""

from __future__ import annotations

import shlex
from collections.abc import Callable, Sequence
from typing import Annotated, TypeVar

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

from composerunner.compose import ComposeProcess, ComposeProcessError, ComposeSession
from composerunner.config import DEFAULT_EXECUTABLE

console = Console()

_M = TypeVar("_M", bound=BaseModel)

DEFAULT_COMPOSE_FILE = "docker-compose.yml"

FileOption = Annotated[
    list[str] | None,
    typer.Option(
        "--file",
        "-f",
        help=f"Compose file (repeatable, later files override earlier ones). "
        f"Default: {DEFAULT_COMPOSE_FILE}",
    ),
]
ProjectNameOption = Annotated[
    str | None, typer.Option("--project-name", "-p", help="Compose project name")
]
ExecutableOption = Annotated[
    str,
    typer.Option("--executable", help="Compose program, e.g. 'docker compose'"),
]
DryRunOption = Annotated[
    bool, typer.Option("--dry-run", help="Print the docker-compose command instead of running it")
]


def parse_pairs(values: Sequence[str] | None, option: str) -> dict[str, str]:
    """Parse repeated ``KEY=VALUE`` strings into a dict, keeping their order."""
    pairs: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            console.print(f"[red]Error:[/red] {option} expects KEY=VALUE, got {escape(item)!r}")
            raise typer.Exit(2)
        pairs[key] = value
    return pairs


def build_session(
    files: Sequence[str] | None,
    project_name: str | None,
    executable: str,
) -> ComposeSession:
    return ComposeSession(
        list(files) if files else [DEFAULT_COMPOSE_FILE],
        project_name=project_name,
        executable=shlex.split(executable) or [DEFAULT_EXECUTABLE],
    )


def options_or_exit(model_cls: type[_M], **fields: object) -> _M:
    try:
        return model_cls.model_validate(fields)
    except ValidationError as e:
        console.print(f"[red]Invalid options:[/red] {escape(str(e))}")
        raise typer.Exit(2) from None


def print_command(session: ComposeSession, args: Sequence[str]) -> None:
    console.print(
        shlex.join(session.command_line(args)), markup=False, highlight=False, soft_wrap=True
    )


def execute_or_exit(action: Callable[[], ComposeProcess]) -> ComposeProcess:
    """Run *action*, turning compose and spawn failures into a CLI exit."""
    try:
        return action()
    except ComposeProcessError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.returncode if e.returncode > 0 else 1) from None
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None
