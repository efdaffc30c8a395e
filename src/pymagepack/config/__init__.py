# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bundling configuration models and loaders."""

from __future__ import annotations

from .loader import load_bundling_config, parse_bundling_config
from .models import (
    BundleOptions,
    BundleSpec,
    BundlingConfig,
    ConfigError,
    MinifyOptions,
    resolve_bundle_options,
)

__all__ = [
    "BundleOptions",
    "BundleSpec",
    "BundlingConfig",
    "ConfigError",
    "MinifyOptions",
    "load_bundling_config",
    "parse_bundling_config",
    "resolve_bundle_options",
]
