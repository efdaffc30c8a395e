# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read the per-locale RequireJS module map.

Magento writes ``requirejs-map.js`` next to ``requirejs-config.js`` when a
theme falls back to files deployed under another theme. The file holds a
``baseUrlInterceptor`` object that maps a module file to the relative base
directory the loader should fetch it from instead of the locale root.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from ..core.config.constants import REQUIREJS_MAP_FILENAME, REQUIREJS_MAP_MIN_FILENAME
from ..core.javascript.literal import LiteralSyntaxError, parse_literal

_INTERCEPTOR_RE: Final[re.Pattern[str]] = re.compile(r"[\"']?baseUrlInterceptor[\"']?\s*:\s*(\{[^{}]*\})")
_MIN_JS_SUFFIX: Final[str] = ".min.js"
_JS_SUFFIX: Final[str] = ".js"


@dataclass(frozen=True, slots=True)
class ModuleMap:
    """Relative base directories keyed by module file path."""

    bases: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def load(cls, locale: Path, minify_on: bool) -> ModuleMap:
        """Load the module map deployed in ``locale``.

        Args:
            locale: Locale root directory.
            minify_on: Prefer ``requirejs-map.min.js`` when ``True``.

        Returns:
            ModuleMap: Parsed mapping, empty when the file is absent or unparsable.
        """

        names = (REQUIREJS_MAP_MIN_FILENAME, REQUIREJS_MAP_FILENAME) if minify_on else (REQUIREJS_MAP_FILENAME,)
        for name in names:
            candidate = locale / name
            try:
                text = candidate.read_text(encoding="utf-8")
            except OSError:
                continue
            return cls.parse(text)
        return cls()

    @classmethod
    def parse(cls, text: str) -> ModuleMap:
        """Extract the ``baseUrlInterceptor`` mapping from map file text."""

        match = _INTERCEPTOR_RE.search(text)
        if match is None:
            return cls()
        try:
            payload = parse_literal(match.group(1))
        except LiteralSyntaxError:
            return cls()
        if not isinstance(payload, dict):
            return cls()
        return cls(bases={str(key): str(value) for key, value in payload.items()})

    def base_for(self, relative_path: str) -> str | None:
        """Return the mapped base directory of ``relative_path`` if any.

        A minified path also matches an entry recorded for its plain ``.js``
        counterpart.
        """

        base = self.bases.get(relative_path)
        if base is None and relative_path.endswith(_MIN_JS_SUFFIX):
            base = self.bases.get(relative_path[: -len(_MIN_JS_SUFFIX)] + _JS_SUFFIX)
        return base

    def locate(self, locale: Path, relative_path: str) -> Path:
        """Return the file path of ``relative_path`` under ``locale``."""

        base = self.base_for(relative_path)
        if base is None:
            return locale / relative_path
        return Path(os.path.normpath(locale / base / relative_path))


__all__ = ["ModuleMap"]
