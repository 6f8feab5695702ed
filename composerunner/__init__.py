"""composerunner: drive docker-compose from Python (inline & typed or from YAML files)."""

from composerunner.compose import (
    ComposeProcess,
    ComposeProcessError,
    ComposeSession,
    DownOptions,
    RmOptions,
    RunOptions,
    SpawnOptions,
    UpOptions,
)

__version__ = "1.1.0"

__all__ = [
    "ComposeProcess",
    "ComposeProcessError",
    "ComposeSession",
    "DownOptions",
    "RmOptions",
    "RunOptions",
    "SpawnOptions",
    "UpOptions",
    "__version__",
]
