# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve logical module names to candidate files within a locale."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .module_map import ModuleMap
from .paths import get_module_real_path


@dataclass(frozen=True, slots=True)
class ModulePathResolver:
    """Turn module names into paths under one locale root.

    Resolution performs no I/O and never checks that the path exists; reading
    and caching happen in the pipeline.
    """

    locale: Path
    module_map: ModuleMap = field(default_factory=ModuleMap)

    def resolve(self, module_name: str, descriptor: str, minify_on: bool) -> Path:
        """Return the candidate file path of ``module_name``.

        Args:
            module_name: Logical module name.
            descriptor: Source descriptor declared in the bundle spec.
            minify_on: Whether the locale serves minified assets.

        Returns:
            Path: Locale-scoped module file path.
        """

        relative = get_module_real_path(module_name, descriptor, minify_on)
        return self.module_map.locate(self.locale, relative)


__all__ = ["ModulePathResolver"]
