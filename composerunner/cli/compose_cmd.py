"""Compose commands: up, run, rm, down."""

from __future__ import annotations

from typing import Annotated

import typer

from composerunner.cli._helpers import (
    DryRunOption,
    ExecutableOption,
    FileOption,
    ProjectNameOption,
    build_session,
    execute_or_exit,
    options_or_exit,
    parse_pairs,
    print_command,
)
from composerunner.compose import (
    DownOptions,
    RmOptions,
    RunOptions,
    UpOptions,
    down_arguments,
    rm_arguments,
    run_arguments,
    up_arguments,
)
from composerunner.config import DEFAULT_EXECUTABLE


def up(
    file: FileOption = None,
    project_name: ProjectNameOption = None,
    executable: ExecutableOption = DEFAULT_EXECUTABLE,
    dry_run: DryRunOption = False,
    detach: Annotated[
        bool, typer.Option("--detach/--no-detach", help="Run containers in the background")
    ] = True,
    build: Annotated[bool, typer.Option("--build", help="Build images before starting")] = False,
    force_recreate: Annotated[bool, typer.Option("--force-recreate")] = False,
    no_recreate: Annotated[bool, typer.Option("--no-recreate")] = False,
    pull: Annotated[
        str | None, typer.Option("--pull", help="Pull policy: always, missing or never")
    ] = None,
    scale: Annotated[
        list[str] | None, typer.Option("--scale", help="SERVICE=NUM (repeatable)")
    ] = None,
    timeout: Annotated[
        int | None, typer.Option("--timeout", help="Shutdown timeout in seconds")
    ] = None,
    wait: Annotated[bool, typer.Option("--wait", help="Wait for services to be healthy")] = False,
    remove_orphans: Annotated[bool, typer.Option("--remove-orphans")] = False,
) -> None:
    """Create and start containers."""
    options = options_or_exit(
        UpOptions,
        detach=detach,
        build=build,
        force_recreate=force_recreate,
        no_recreate=no_recreate,
        pull=pull,
        scale=parse_pairs(scale, "--scale"),
        timeout=timeout,
        wait=wait,
        remove_orphans=remove_orphans,
    )
    session = build_session(file, project_name, executable)
    if dry_run:
        print_command(session, up_arguments(options))
        return

    process = execute_or_exit(lambda: session.up(options))
    if not options.detach:
        # Attached: stream until docker-compose exits, then forward its status.
        execute_or_exit(process.wait)


def run(
    service: Annotated[str, typer.Argument(help="Service to run")],
    args: Annotated[
        list[str] | None, typer.Argument(help="Command and arguments (after --)")
    ] = None,
    file: FileOption = None,
    project_name: ProjectNameOption = None,
    executable: ExecutableOption = DEFAULT_EXECUTABLE,
    dry_run: DryRunOption = False,
    detach: Annotated[bool, typer.Option("--detach/--no-detach")] = True,
    env: Annotated[list[str] | None, typer.Option("--env", "-e", help="KEY=VALUE")] = None,
    label: Annotated[list[str] | None, typer.Option("--label", "-l", help="KEY=VALUE")] = None,
    name: Annotated[str | None, typer.Option("--name", help="Container name")] = None,
    rm: Annotated[bool, typer.Option("--rm", help="Remove the container when it exits")] = False,
    no_deps: Annotated[bool, typer.Option("--no-deps")] = False,
    user: Annotated[str | None, typer.Option("--user", "-u")] = None,
    workdir: Annotated[str | None, typer.Option("--workdir", "-w")] = None,
) -> None:
    """Run a one-off command on a service."""
    options = options_or_exit(
        RunOptions,
        detach=detach,
        env=parse_pairs(env, "--env"),
        label=parse_pairs(label, "--label"),
        name=name,
        rm=rm,
        no_deps=no_deps,
        user=user,
        workdir=workdir,
    )
    session = build_session(file, project_name, executable)
    trailing = args or []
    if dry_run:
        print_command(session, run_arguments(service, None, trailing, options))
        return

    execute_or_exit(lambda: session.run(service, None, trailing, options))


def rm(
    file: FileOption = None,
    project_name: ProjectNameOption = None,
    executable: ExecutableOption = DEFAULT_EXECUTABLE,
    dry_run: DryRunOption = False,
    stop: Annotated[bool, typer.Option("--stop", "-s", help="Stop containers first")] = False,
    force: Annotated[bool, typer.Option("--force")] = False,
    volumes: Annotated[bool, typer.Option("--volumes", "-v")] = False,
) -> None:
    """Remove stopped service containers."""
    options = options_or_exit(RmOptions, stop=stop, force=force, volumes=volumes)
    session = build_session(file, project_name, executable)
    if dry_run:
        print_command(session, rm_arguments(options))
        return

    execute_or_exit(lambda: session.rm(options))


def down(
    file: FileOption = None,
    project_name: ProjectNameOption = None,
    executable: ExecutableOption = DEFAULT_EXECUTABLE,
    dry_run: DryRunOption = False,
    remove_orphans: Annotated[bool, typer.Option("--remove-orphans")] = False,
    rmi: Annotated[str | None, typer.Option("--rmi", help="Remove images: local or all")] = None,
    timeout: Annotated[
        int | None, typer.Option("--timeout", "-t", help="Shutdown timeout in seconds")
    ] = None,
    volumes: Annotated[
        bool, typer.Option("--volumes", "-v", help="Remove named and anonymous volumes")
    ] = False,
) -> None:
    """Stop and remove containers and networks."""
    options = options_or_exit(
        DownOptions,
        remove_orphans=remove_orphans,
        rmi=rmi,
        timeout=timeout,
        volumes=volumes or None,
    )
    session = build_session(file, project_name, executable)
    if dry_run:
        print_command(session, down_arguments(options))
        return

    execute_or_exit(lambda: session.down(options))
