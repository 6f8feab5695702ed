"""Pydantic models for compose subcommand options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from composerunner.config import StdioMode, check_stdio_mode

PullPolicy = Literal["always", "missing", "never"]
RmiMode = Literal["local", "all"]


class _Options(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class UpOptions(_Options):
    detach: bool = True
    build: bool = False
    force_recreate: bool = False
    no_recreate: bool = False  # conflicts with force_recreate; not checked here
    pull: PullPolicy | None = None
    scale: dict[str, int] = {}
    timeout: int | None = Field(default=None, ge=0)  # seconds; 0 is treated as unset
    wait: bool = False
    abort_on_container_exit: bool = False
    exit_code_from: str | None = None
    attach: list[str] = []
    no_attach: list[str] = []
    remove_orphans: bool = False
    renew_anon_volumes: bool = False
    quiet_pull: bool = False
    timestamps: bool = False
    no_log_prefix: bool = False


class RunOptions(_Options):
    build: bool = False
    detach: bool = True
    entrypoint: str | None = None
    env: dict[str, str] = {}
    interactive: bool = False
    label: dict[str, str] = {}
    name: str | None = None
    no_tty: bool = False
    no_deps: bool = False
    publish: dict[str, str | int] = {}
    quiet_pull: bool = False
    remove_orphans: bool = False
    rm: bool = False
    service_ports: bool = False
    use_aliases: bool = False
    user: str | None = None
    volume: dict[str, str] = {}
    workdir: str | None = None


class RmOptions(_Options):
    stop: bool = False
    force: bool = False
    volumes: bool = False


class DownOptions(_Options):
    remove_orphans: bool = False
    rmi: RmiMode | None = None
    timeout: int | None = Field(default=None, ge=0)
    volumes: str | bool | None = None


@dataclass
class SpawnOptions:
    """Per-call process options, passed through to ``subprocess.Popen``.

    ``env`` is merged over ``os.environ``; ``popen_kwargs`` is forwarded as-is.
    """

    stdio: StdioMode | None = None
    env: Mapping[str, str] | None = None
    cwd: str | Path | None = None
    text: bool = True
    popen_kwargs: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_stdio_mode(self.stdio)
