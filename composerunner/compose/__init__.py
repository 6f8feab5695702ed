"""Compose module: typed docker-compose invocation."""

from composerunner.compose.flags import (
    down_arguments,
    join_flags,
    rm_arguments,
    run_arguments,
    up_arguments,
)
from composerunner.compose.process import ComposeProcess, ComposeProcessError, spawn
from composerunner.compose.resolver import resolve_file_arguments
from composerunner.compose.schema import (
    DownOptions,
    RmOptions,
    RunOptions,
    SpawnOptions,
    UpOptions,
)
from composerunner.compose.session import ComposeSession

__all__ = [
    "ComposeProcess",
    "ComposeProcessError",
    "ComposeSession",
    "DownOptions",
    "RmOptions",
    "RunOptions",
    "SpawnOptions",
    "UpOptions",
    "down_arguments",
    "join_flags",
    "resolve_file_arguments",
    "rm_arguments",
    "run_arguments",
    "spawn",
    "up_arguments",
]
