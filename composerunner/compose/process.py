"""Spawn docker-compose and wrap the child process in a handle."""

from __future__ import annotations

import os
import signal as _signal
import subprocess
from collections.abc import Sequence
from typing import Any

from composerunner._log import get_logger
from composerunner.compose.schema import SpawnOptions
from composerunner.config import StdioMode

_logger = get_logger("compose.process")

_STDIO_STREAMS: dict[str, int | None] = {
    "inherit": None,
    "pipe": subprocess.PIPE,
    "ignore": subprocess.DEVNULL,
}


def _signal_name(signum: int) -> str:
    try:
        return _signal.Signals(signum).name
    except ValueError:
        return str(signum)


class ComposeProcessError(Exception):
    """Raised when a waited-on compose process exits non-zero or is killed by a signal."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | bytes | None = None,
        stderr: str | bytes | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.signal = -returncode if returncode < 0 else None
        self.stdout = stdout
        self.stderr = stderr
        if self.signal is not None:
            reason = f"was killed by signal {_signal_name(self.signal)}"
        else:
            reason = f"exited with code {returncode}"
        super().__init__(f"Command {' '.join(self.command)!r} {reason}")


class ComposeProcess:
    """Handle to a spawned compose process.

    Wraps :class:`subprocess.Popen`. The session never inspects the handle
    beyond deciding whether to :meth:`wait` on it; callers that need streams
    before completion use :attr:`popen` directly.
    """

    def __init__(self, popen: subprocess.Popen, args: Sequence[str]) -> None:
        self.popen = popen
        self.args = list(args)
        self.stdout: str | bytes | None = None
        self.stderr: str | bytes | None = None

    def __repr__(self) -> str:
        return f"ComposeProcess(pid={self.pid}, returncode={self.returncode})"

    @property
    def pid(self) -> int:
        return self.popen.pid

    @property
    def returncode(self) -> int | None:
        return self.popen.returncode

    @property
    def signal(self) -> int | None:
        """Number of the signal that terminated the process, if any."""
        rc = self.returncode
        return -rc if rc is not None and rc < 0 else None

    def poll(self) -> int | None:
        return self.popen.poll()

    def wait(self, timeout: float | None = None, check: bool = True) -> ComposeProcess:
        """Wait for the process to finish and collect any piped output.

        Raises:
            ComposeProcessError: If *check* is set and the process exited
                non-zero or was killed by a signal.
            subprocess.TimeoutExpired: If *timeout* elapses first. The
                process keeps running.
        """
        stdout, stderr = self.popen.communicate(timeout=timeout)
        if stdout is not None:
            self.stdout = stdout
        if stderr is not None:
            self.stderr = stderr

        rc = self.popen.returncode
        if check and rc != 0:
            _logger.warning("%s exited with %s", self.args[0], rc)
            raise ComposeProcessError(self.args, rc, self.stdout, self.stderr)
        return self

    def send_signal(self, signum: int) -> None:
        self.popen.send_signal(signum)

    def terminate(self) -> None:
        self.popen.terminate()

    def kill(self) -> None:
        self.popen.kill()


def _stdio_kwargs(stdio: StdioMode) -> dict[str, Any]:
    stream = _STDIO_STREAMS[stdio]
    return {"stdin": stream, "stdout": stream, "stderr": stream}


def spawn(
    args: Sequence[str],
    stdio: StdioMode,
    options: SpawnOptions | None = None,
) -> ComposeProcess:
    """Start *args* without waiting and return its handle.

    Spawn failures (missing executable, permission denied) propagate as the
    ``OSError`` raised by ``subprocess.Popen``.
    """
    opts = options or SpawnOptions()
    env = {**os.environ, **opts.env} if opts.env is not None else None

    _logger.debug("spawn %s (stdio=%s)", list(args), stdio)
    kwargs: dict[str, Any] = {
        "env": env,
        "cwd": opts.cwd,
        "text": opts.text,
        **_stdio_kwargs(stdio),
    }
    # Raw Popen keywords win over everything derived above.
    kwargs.update(opts.popen_kwargs)
    popen = subprocess.Popen(list(args), **kwargs)
    return ComposeProcess(popen, args)
