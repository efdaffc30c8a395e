# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pymagepack.interfaces import MinifyResult

LocaleFactory = Callable[..., Path]


@dataclass
class FakeMinifier:
    """Minifier double recording every invocation."""

    error: str | None = None
    calls: list[str] = field(default_factory=list)

    def minify(self, source: str) -> MinifyResult:
        self.calls.append(source)
        if self.error is not None:
            return MinifyResult(code=None, error=self.error)
        return MinifyResult(code=f"/*min*/{len(source)}")


@dataclass
class RecordingLogger:
    """Logger double keeping messages per level."""

    messages: dict[str, list[str]] = field(
        default_factory=lambda: {"info": [], "debug": [], "ok": [], "warn": [], "fail": []},
    )

    def info(self, message: str) -> None:
        self.messages["info"].append(message)

    def debug(self, message: str) -> None:
        self.messages["debug"].append(message)

    def ok(self, message: str) -> None:
        self.messages["ok"].append(message)

    def warn(self, message: str) -> None:
        self.messages["warn"].append(message)

    def fail(self, message: str) -> None:
        self.messages["fail"].append(message)


@pytest.fixture
def fake_minifier() -> FakeMinifier:
    return FakeMinifier()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_locale(tmp_path: Path) -> LocaleFactory:
    """Return a factory creating deployed locale directories under ``tmp_path``."""

    def _make(
        relative: str = "pub/static/frontend/Vendor/theme/en_US",
        files: Mapping[str, str] | None = None,
        *,
        minified: bool = False,
    ) -> Path:
        locale = tmp_path / relative
        locale.mkdir(parents=True, exist_ok=True)
        config_name = "requirejs-config.min.js" if minified else "requirejs-config.js"
        (locale / config_name).write_text("require.config({});", encoding="utf-8")
        for name, contents in (files or {}).items():
            target = locale / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(contents, encoding="utf-8")
        return locale

    return _make


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[list[dict[str, object]], str], Path]:
    """Return a helper writing a bundling configuration file under ``tmp_path``."""

    def _write(bundles: list[dict[str, object]], name: str = "magepack.config.json") -> Path:
        path = tmp_path / name
        payload = json.dumps(bundles, indent=2)
        if path.suffix == ".js":
            payload = f"module.exports = {payload};\n"
        path.write_text(payload, encoding="utf-8")
        return path

    return _write
