"""Process-wide defaults for composerunner.

The default stdio routing comes from ``DOCKER_COMPOSE_STDIO`` and is read
once per process; later changes to the environment are not picked up.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal, get_args

StdioMode = Literal["inherit", "pipe", "ignore"]

STDIO_ENV_VAR = "DOCKER_COMPOSE_STDIO"
DEFAULT_STDIO: StdioMode = "inherit"
DEFAULT_EXECUTABLE = "docker-compose"
WORKDIR_PREFIX = "docker-compose"

STDIO_MODES: frozenset[str] = frozenset(get_args(StdioMode))


def is_stdio_mode(value: object) -> bool:
    return isinstance(value, str) and value in STDIO_MODES


def check_stdio_mode(value: object) -> None:
    """Raise ``ValueError`` unless *value* is None or a known stdio mode."""
    if value is not None and not is_stdio_mode(value):
        raise ValueError(f"Unknown stdio mode {value!r}, expected one of {sorted(STDIO_MODES)}")


@lru_cache(maxsize=1)
def get_default_stdio() -> StdioMode:
    """Return the default stdio mode for spawned compose processes.

    Resolution order:
    1. ``DOCKER_COMPOSE_STDIO`` if it is one of ``inherit``, ``pipe``, ``ignore``
    2. ``inherit``
    """
    value = os.environ.get(STDIO_ENV_VAR)
    if is_stdio_mode(value):
        return value  # type: ignore[return-value]
    return DEFAULT_STDIO
