# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants describing Magento static content and bundle output layout."""

from __future__ import annotations

from typing import Final

DEFAULT_CONFIG_FILENAME: Final[str] = "magepack.config.js"
DEFAULT_LOCALES_PATTERN: Final[str] = "{pub/static/frontend/*/*/*,pub/static/adminhtml/*/*/*}"
EXCLUDED_LOCALE_MARKER: Final[str] = "Magento/blank"

REQUIREJS_CONFIG_FILENAME: Final[str] = "requirejs-config.js"
REQUIREJS_CONFIG_MIN_FILENAME: Final[str] = "requirejs-config.min.js"
REQUIREJS_MAP_FILENAME: Final[str] = "requirejs-map.js"
REQUIREJS_MAP_MIN_FILENAME: Final[str] = "requirejs-map.min.js"

BUNDLE_DIR_NAME: Final[str] = "magepack"
BUNDLE_ID_PREFIX: Final[str] = "magepack/bundle-"

# Globals referenced by name from Magento templates and the loader itself.
RESERVED_NAMES: Final[tuple[str, ...]] = ("$", "jQuery", "define", "require", "exports")

TERSER_ENV_VAR: Final[str] = "PYMAGEPACK_TERSER"
LOCALES_ENV_VAR: Final[str] = "PYMAGEPACK_LOCALES"

__all__ = [
    "BUNDLE_DIR_NAME",
    "BUNDLE_ID_PREFIX",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_LOCALES_PATTERN",
    "EXCLUDED_LOCALE_MARKER",
    "LOCALES_ENV_VAR",
    "REQUIREJS_CONFIG_FILENAME",
    "REQUIREJS_CONFIG_MIN_FILENAME",
    "REQUIREJS_MAP_FILENAME",
    "REQUIREJS_MAP_MIN_FILENAME",
    "RESERVED_NAMES",
    "TERSER_ENV_VAR",
]
