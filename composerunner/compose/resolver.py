"""Resolve a session's configuration sources into ``--file`` arguments."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from composerunner._log import get_logger
from composerunner._yaml import dump_yaml

_logger = get_logger("compose.resolver")

ComposeConfig = Mapping[str, Any] | BaseModel
ConfigSource = str | os.PathLike[str] | ComposeConfig
FileSpec = ConfigSource | Sequence[ConfigSource]


def normalize_sources(file: FileSpec) -> list[ConfigSource]:
    """Return *file* as a list; a list or tuple keeps its order, anything else is wrapped."""
    if isinstance(file, (list, tuple)):
        return list(file)
    return [file]


def materialized_path(directory: Path, index: int) -> Path:
    return directory / f"docker-compose.{index}.yml"


def materialize(source: ConfigSource, index: int, directory: Path) -> str:
    """Return a file path for *source*, writing structured configs into *directory*.

    Paths pass through unchanged. Structured configs are serialized and written
    to ``docker-compose.<index>.yml``, overwriting any previous file there.
    """
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    if not isinstance(source, (Mapping, BaseModel)):
        raise TypeError(
            f"Compose file #{index} must be a path, a mapping or a pydantic model, "
            f"got {type(source).__name__}"
        )

    text = dump_yaml(source)
    directory.mkdir(parents=True, exist_ok=True)
    path = materialized_path(directory, index)
    path.write_text(text, encoding="utf-8")
    _logger.debug("wrote %s", path)
    return str(path)


def resolve_files(file: FileSpec, directory: Path) -> list[str]:
    return [materialize(source, i, directory) for i, source in enumerate(normalize_sources(file))]


def resolve_file_arguments(file: FileSpec, directory: Path) -> list[str]:
    """Return ``["--file", path, ...]`` with one pair per source, in source order."""
    args: list[str] = []
    for path in resolve_files(file, directory):
        args.extend(["--file", path])
    return args
