"""Tests for configuration source resolution (compose/resolver.py)."""

from __future__ import annotations

from collections import OrderedDict
from pathlib import Path

import pytest
import yaml
from pydantic import BaseModel

from composerunner.compose.resolver import (
    materialize,
    normalize_sources,
    resolve_file_arguments,
)

_REDIS = {"services": {"redis": {"image": "redis:7"}}}
_WEB = {"services": {"web": {"image": "nginx", "ports": ["8080:80"]}}}


class _ComposeFile(BaseModel):
    services: dict[str, dict[str, str]]
    name: str | None = None


class _Service(BaseModel):
    image: str
    command: list[str] | None = None


class TestNormalizeSources:
    def test_single_mapping_wrapped(self):
        assert normalize_sources(_REDIS) == [_REDIS]

    def test_single_string_wrapped(self):
        assert normalize_sources("docker-compose.yml") == ["docker-compose.yml"]

    def test_tuple_keeps_order(self):
        assert normalize_sources(("b.yml", "a.yml")) == ["b.yml", "a.yml"]


class TestResolveFileArguments:
    def test_single_path_passes_through(self, tmp_path):
        assert resolve_file_arguments("base.yml", tmp_path) == ["--file", "base.yml"]
        assert list(tmp_path.iterdir()) == []

    def test_pathlike_passes_through(self, tmp_path):
        assert resolve_file_arguments(Path("conf/base.yml"), tmp_path) == [
            "--file",
            "conf/base.yml",
        ]

    def test_mixed_sources_in_order(self, tmp_path):
        args = resolve_file_arguments([_REDIS, "override.yml", _WEB], tmp_path)

        assert args[0::2] == ["--file", "--file", "--file"]
        paths = args[1::2]
        assert paths[0] == str(tmp_path / "docker-compose.0.yml")
        assert paths[1] == "override.yml"
        assert paths[2] == str(tmp_path / "docker-compose.2.yml")

    def test_written_content(self, tmp_path):
        resolve_file_arguments([_REDIS, _WEB], tmp_path)
        assert yaml.safe_load((tmp_path / "docker-compose.0.yml").read_text()) == _REDIS
        assert yaml.safe_load((tmp_path / "docker-compose.1.yml").read_text()) == _WEB

    def test_pydantic_model(self, tmp_path):
        config = _ComposeFile(services={"db": {"image": "postgres"}})
        args = resolve_file_arguments(config, tmp_path)
        written = yaml.safe_load(Path(args[1]).read_text())
        assert written == {"services": {"db": {"image": "postgres"}}}

    def test_resolving_twice_overwrites(self, tmp_path):
        first = resolve_file_arguments([_REDIS, "x.yml", _WEB], tmp_path)
        content = (tmp_path / "docker-compose.0.yml").read_text()

        second = resolve_file_arguments([_REDIS, "x.yml", _WEB], tmp_path)

        assert first == second
        assert (tmp_path / "docker-compose.0.yml").read_text() == content
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "docker-compose.0.yml",
            "docker-compose.2.yml",
        ]

    def test_nested_mapping_and_model(self, tmp_path):
        config = {
            "services": OrderedDict(
                web=_Service(image="nginx"),
                worker=OrderedDict(image="app", command=("celery", "worker")),
            )
        }
        args = resolve_file_arguments(config, tmp_path)
        assert yaml.safe_load(Path(args[1]).read_text()) == {
            "services": {
                "web": {"image": "nginx"},
                "worker": {"image": "app", "command": ["celery", "worker"]},
            }
        }

    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "nested" / "work"
        resolve_file_arguments(_REDIS, target)
        assert (target / "docker-compose.0.yml").is_file()

    def test_write_failure_propagates(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        with pytest.raises(OSError):
            resolve_file_arguments([_REDIS], blocker)

    def test_unsupported_source(self, tmp_path):
        with pytest.raises(TypeError, match="#1"):
            resolve_file_arguments(["a.yml", 42], tmp_path)


class TestMaterialize:
    def test_index_in_name(self, tmp_path):
        path = materialize(_REDIS, 7, tmp_path)
        assert path.endswith("docker-compose.7.yml")
