"""ComposeSession: the public entry point for driving docker-compose."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from composerunner.compose.flags import down_arguments, rm_arguments, run_arguments, up_arguments
from composerunner.compose.process import ComposeProcess, spawn
from composerunner.compose.resolver import FileSpec, resolve_file_arguments
from composerunner.compose.schema import (
    DownOptions,
    RmOptions,
    RunOptions,
    SpawnOptions,
    UpOptions,
)
from composerunner.config import (
    DEFAULT_EXECUTABLE,
    WORKDIR_PREFIX,
    StdioMode,
    check_stdio_mode,
    get_default_stdio,
)


class ComposeSession:
    """A set of compose files plus the project they run as.

    *file* is one config (a path, a mapping or a pydantic model) or a list of
    them; later entries overlay earlier ones, exactly as repeated ``--file``
    flags do. Structured configs are written to *directory* as
    ``docker-compose.<index>.yml`` each time a command runs. Without a
    *directory*, a fresh temporary one is created here and never removed.

    ``up`` (detached), ``run``, ``rm`` and ``down`` wait for the process and
    raise :class:`~composerunner.compose.process.ComposeProcessError` on
    failure. ``up(UpOptions(detach=False))`` and ``command`` return the
    handle as soon as the process starts.
    """

    def __init__(
        self,
        file: FileSpec,
        *,
        directory: str | os.PathLike[str] | None = None,
        project_name: str | None = None,
        executable: str | Sequence[str] = DEFAULT_EXECUTABLE,
        stdio: StdioMode | None = None,
    ) -> None:
        check_stdio_mode(stdio)
        self._file = tuple(file) if isinstance(file, (list, tuple)) else file
        if directory is None:
            directory = tempfile.mkdtemp(prefix=WORKDIR_PREFIX)
        self._directory = Path(directory)
        self._project_name = project_name
        self._executable = (executable,) if isinstance(executable, str) else tuple(executable)
        self._stdio = stdio

    def __repr__(self) -> str:
        return (
            f"ComposeSession(project_name={self._project_name!r}, "
            f"directory={str(self._directory)!r})"
        )

    @property
    def file(self) -> FileSpec:
        return self._file

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def project_name(self) -> str | None:
        return self._project_name

    @property
    def executable(self) -> tuple[str, ...]:
        return self._executable

    # ------------------------------------------------------------------
    # Argument assembly
    # ------------------------------------------------------------------

    def global_arguments(self) -> list[str]:
        """Return ``--project-name`` (if set) followed by the ``--file`` pairs.

        Writes any structured configs to the working directory.
        """
        args = ["--project-name", self._project_name] if self._project_name else []
        args.extend(resolve_file_arguments(self._file, self._directory))
        return args

    def command_line(self, args: Sequence[str]) -> list[str]:
        """Return the full argument vector for *args*, without spawning anything."""
        return [*self._executable, *self.global_arguments(), *args]

    def _resolve_stdio(self, spawn_options: SpawnOptions | None) -> StdioMode:
        if spawn_options is not None and spawn_options.stdio is not None:
            return spawn_options.stdio
        return self._stdio or get_default_stdio()

    # ------------------------------------------------------------------
    # Subcommands
    # ------------------------------------------------------------------

    def command(
        self, args: Sequence[str], spawn_options: SpawnOptions | None = None
    ) -> ComposeProcess:
        """Run ``docker-compose <global args> <args>`` and return without waiting."""
        argv = self.command_line(args)
        return spawn(argv, self._resolve_stdio(spawn_options), spawn_options)

    def up(
        self, options: UpOptions | None = None, spawn_options: SpawnOptions | None = None
    ) -> ComposeProcess:
        """Start the services.

        Detached (the default), docker-compose forks the containers and exits
        quickly, so this waits for it. Attached, the process keeps streaming
        logs and the handle is returned right away.
        """
        options = options or UpOptions()
        process = self.command(up_arguments(options), spawn_options)
        if options.detach:
            process.wait()
        return process

    def run(
        self,
        service: str,
        command: str | None = None,
        args: Sequence[str] = (),
        options: RunOptions | None = None,
        spawn_options: SpawnOptions | None = None,
    ) -> ComposeProcess:
        """Run a one-off command on *service* and wait for it."""
        process = self.command(run_arguments(service, command, args, options), spawn_options)
        return process.wait()

    def rm(
        self, options: RmOptions | None = None, spawn_options: SpawnOptions | None = None
    ) -> ComposeProcess:
        """Remove stopped service containers and wait for it."""
        return self.command(rm_arguments(options), spawn_options).wait()

    def down(
        self, options: DownOptions | None = None, spawn_options: SpawnOptions | None = None
    ) -> ComposeProcess:
        """Stop and remove containers and networks and wait for it."""
        return self.command(down_arguments(options), spawn_options).wait()
