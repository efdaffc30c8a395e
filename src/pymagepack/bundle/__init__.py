# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""RequireJS bundle generation for deployed static content."""

from __future__ import annotations

from .locales import NoLocalesFoundError, discover_locales, is_minify_enabled
from .minify import TerserMinifier
from .module_map import ModuleMap
from .pipeline import BundleResult, BundlingPipeline, BundlingReport
from .resolver import ModulePathResolver
from .runner import run_bundling
from .wrapper import ModuleFormat, classify_module, wrap_module

__all__ = [
    "BundleResult",
    "BundlingPipeline",
    "BundlingReport",
    "ModuleFormat",
    "ModuleMap",
    "ModulePathResolver",
    "NoLocalesFoundError",
    "TerserMinifier",
    "classify_module",
    "discover_locales",
    "is_minify_enabled",
    "run_bundling",
    "wrap_module",
]
