# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover deployed frontend locales and their minification mode."""

from __future__ import annotations

import glob
from collections.abc import Sequence
from pathlib import Path

from ..core.config.constants import (
    DEFAULT_LOCALES_PATTERN,
    EXCLUDED_LOCALE_MARKER,
    REQUIREJS_CONFIG_FILENAME,
    REQUIREJS_CONFIG_MIN_FILENAME,
)


class NoLocalesFoundError(RuntimeError):
    """Raised when no deployed locale matches the discovery pattern."""

    def __init__(self, pattern: str) -> None:
        super().__init__(
            f"No locales found for {pattern!r}! Make sure bundling runs after static content is deployed.",
        )
        self.pattern = pattern


def expand_braces(pattern: str) -> list[str]:
    """Expand shell-style ``{a,b}`` alternatives in ``pattern``.

    Nested groups are supported. A pattern with unbalanced braces is
    returned unchanged.

    Args:
        pattern: Glob pattern possibly containing brace groups.

    Returns:
        list[str]: Expanded patterns in declaration order.
    """

    start = pattern.find("{")
    if start == -1:
        return [pattern]
    depth = 0
    splits: list[int] = []
    for index in range(start, len(pattern)):
        char = pattern[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                break
        elif char == "," and depth == 1:
            splits.append(index)
    else:
        return [pattern]

    prefix, suffix = pattern[:start], pattern[index + 1 :]
    bounds = [start, *splits, index]
    alternatives = [pattern[lo + 1 : hi] for lo, hi in zip(bounds, bounds[1:])]
    expanded: list[str] = []
    for alternative in alternatives:
        expanded.extend(expand_braces(f"{prefix}{alternative}{suffix}"))
    return expanded


def _has_requirejs_config(locale: Path) -> bool:
    return (locale / REQUIREJS_CONFIG_MIN_FILENAME).exists() or (locale / REQUIREJS_CONFIG_FILENAME).exists()


def discover_locales(pattern: str = DEFAULT_LOCALES_PATTERN, *, root: Path | None = None) -> list[Path]:
    """Return the deployed locale roots matching ``pattern``.

    The Magento blank theme is skipped, as is any match without a deployed
    ``requirejs-config`` file.

    Args:
        pattern: Glob pattern, brace groups allowed, relative to ``root``.
        root: Directory the pattern is evaluated from. Defaults to the
            working directory, in which case relative paths are returned.

    Returns:
        list[Path]: Locale roots, sorted within each brace alternative.

    Raises:
        NoLocalesFoundError: If nothing matches.
    """

    locales: list[Path] = []
    seen: set[Path] = set()
    for expanded in expand_braces(pattern):
        for match in sorted(glob.glob(expanded, root_dir=root)):
            locale = Path(match) if root is None else root / match
            if locale in seen or EXCLUDED_LOCALE_MARKER in locale.as_posix():
                continue
            if not locale.is_dir() or not _has_requirejs_config(locale):
                continue
            seen.add(locale)
            locales.append(locale)

    if not locales:
        raise NoLocalesFoundError(pattern)
    return locales


def is_minify_enabled(locales: Sequence[Path]) -> bool:
    """Return whether the deployment serves minified JavaScript.

    Every locale of one deployment shares the same setting, so the first
    locale decides for the whole run.
    """

    if not locales:
        return False
    return (locales[0] / REQUIREJS_CONFIG_MIN_FILENAME).exists()


__all__ = [
    "NoLocalesFoundError",
    "discover_locales",
    "expand_braces",
    "is_minify_enabled",
]
