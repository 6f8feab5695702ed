"""Shared YAML serialization for structured compose configurations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import BaseModel


def _plain_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {key: _plain_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain_value(item) for item in value]
    return value


def to_plain(config: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Return a plain ``dict`` for a mapping or a pydantic model, recursively.

    Models are dumped in JSON mode with aliases and without ``None`` fields,
    so optional keys the caller never set don't show up in the output.
    Nested mappings become ``dict`` and tuples become ``list``, the only
    containers ``yaml.safe_dump`` accepts.
    """
    return _plain_value(config)


def dump_yaml(config: Mapping[str, Any] | BaseModel) -> str:
    """Serialize a structured configuration to YAML text.

    Key order is preserved (later keys are not sorted), matching the order
    in which the caller built the configuration.
    """
    return yaml.safe_dump(
        to_plain(config),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
