"""Shared test fixtures and helpers."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from composerunner.config import STDIO_ENV_VAR, get_default_stdio

# Stand-in for docker-compose: prints its argv as JSON and exits with
# $FAKE_COMPOSE_EXIT (default 0).
FAKE_COMPOSE = textwrap.dedent("""\
    import json
    import os
    import sys

    print(json.dumps(sys.argv[1:]))
    print("fake-compose stderr", file=sys.stderr)
    sys.exit(int(os.environ.get("FAKE_COMPOSE_EXIT", "0")))
""")


def make_fake_compose(directory: Path) -> list[str]:
    """Write the fake compose script into *directory* and return its executable argv."""
    script = directory / "fake_compose.py"
    script.write_text(FAKE_COMPOSE)
    return [sys.executable, str(script)]


def popen_argv(popen_cls: MagicMock) -> list[str]:
    """Return the argument vector of the last ``Popen(...)`` call."""
    return popen_cls.call_args.args[0]


@pytest.fixture(autouse=True)
def _clear_default_stdio(monkeypatch):
    """Reset the cached stdio default and the env var around every test."""
    get_default_stdio.cache_clear()
    monkeypatch.delenv(STDIO_ENV_VAR, raising=False)
    yield
    get_default_stdio.cache_clear()


@pytest.fixture
def fake_compose(tmp_path) -> list[str]:
    """Provide an executable argv for the fake compose script."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    return make_fake_compose(bin_dir)


@pytest.fixture
def mock_popen():
    """Patch ``subprocess.Popen`` with a mock whose process exits 0."""
    with patch("composerunner.compose.process.subprocess.Popen") as popen_cls:
        proc = popen_cls.return_value
        proc.communicate.return_value = (None, None)
        proc.returncode = 0
        proc.pid = 4242
        yield popen_cls
