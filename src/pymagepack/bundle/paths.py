# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map bundle and module names onto paths inside a locale root."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Final

from ..core.config.constants import BUNDLE_DIR_NAME, BUNDLE_ID_PREFIX

TEXT_EXTENSIONS: Final[frozenset[str]] = frozenset({".html", ".htm", ".json", ".txt", ".css", ".svg", ".xml"})
PLUGIN_SEPARATOR: Final[str] = "!"
_JS_SUFFIX: Final[str] = ".js"
_MIN_JS_SUFFIX: Final[str] = ".min.js"


def _min_marker(minify_on: bool) -> str:
    return ".min" if minify_on else ""


def bundle_id(bundle_name: str) -> str:
    """Return the synthetic loader module id of bundle ``bundle_name``."""

    return f"{BUNDLE_ID_PREFIX}{bundle_name}"


def get_bundle_dir(locale: Path) -> Path:
    """Return the directory holding generated bundles for ``locale``."""

    return locale / BUNDLE_DIR_NAME


def get_bundle_path(locale: Path, bundle_name: str, minify_on: bool) -> Path:
    """Return the output path of the bundle file.

    Args:
        locale: Locale root directory.
        bundle_name: Name of the bundle as configured.
        minify_on: Whether the deployed locale serves minified assets.

    Returns:
        Path: ``<locale>/magepack/bundle-<name>[.min].js``.
    """

    return get_bundle_dir(locale) / f"bundle-{bundle_name}{_min_marker(minify_on)}{_JS_SUFFIX}"


def get_bundle_config_path(locale: Path, bundle_name: str, minify_on: bool) -> Path:
    """Return the output path of the loader configuration written beside a bundle.

    Args:
        locale: Locale root directory.
        bundle_name: Name of the bundle as configured.
        minify_on: Whether the deployed locale serves minified assets.

    Returns:
        Path: ``<locale>/magepack/requirejs-config-<name>[.min].js``.
    """

    return get_bundle_dir(locale) / f"requirejs-config-{bundle_name}{_min_marker(minify_on)}{_JS_SUFFIX}"


def strip_plugin(value: str) -> str:
    """Remove a loader plugin prefix such as ``text!`` from ``value``."""

    plugin, separator, resource = value.partition(PLUGIN_SEPARATOR)
    if separator and "/" not in plugin:
        return resource
    return value


def is_text_resource(module_name: str, path: str) -> bool:
    """Return whether the module is a plain-text asset rather than JavaScript.

    Args:
        module_name: Logical module name, possibly carrying a ``text!`` prefix.
        path: Source descriptor or resolved path of the module.

    Returns:
        bool: ``True`` for ``text!`` modules and known text extensions.
    """

    if module_name.startswith(f"text{PLUGIN_SEPARATOR}"):
        return True
    return PurePosixPath(path).suffix.lower() in TEXT_EXTENSIONS


def get_module_real_path(module_name: str, descriptor: str, minify_on: bool) -> str:
    """Return the file path of a module relative to its locale root.

    Text assets keep their own extension. JavaScript modules get ``.min.js``
    when the locale is minified and ``.js`` otherwise, whatever suffix the
    descriptor already carried.

    Args:
        module_name: Logical module name.
        descriptor: Source descriptor declared in the bundle spec.
        minify_on: Whether the deployed locale serves minified assets.

    Returns:
        str: POSIX-style relative path of the module file.
    """

    path = strip_plugin(descriptor)
    if is_text_resource(module_name, path):
        return path
    if path.endswith(_MIN_JS_SUFFIX):
        path = path[: -len(_MIN_JS_SUFFIX)]
    elif path.endswith(_JS_SUFFIX):
        path = path[: -len(_JS_SUFFIX)]
    return f"{path}{_min_marker(minify_on)}{_JS_SUFFIX}"


__all__ = [
    "TEXT_EXTENSIONS",
    "bundle_id",
    "get_bundle_config_path",
    "get_bundle_dir",
    "get_bundle_path",
    "get_module_real_path",
    "is_text_resource",
    "strip_plugin",
]
