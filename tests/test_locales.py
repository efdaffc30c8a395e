# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for locale discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from pymagepack.bundle.locales import (
    NoLocalesFoundError,
    discover_locales,
    expand_braces,
    is_minify_enabled,
)


def test_expand_braces_handles_nesting() -> None:
    assert expand_braces("a/{b,c}/d") == ["a/b/d", "a/c/d"]
    assert expand_braces("{x,y{1,2}}z") == ["xz", "y1z", "y2z"]
    assert expand_braces("plain/*") == ["plain/*"]
    assert expand_braces("open/{a,b") == ["open/{a,b"]


def test_discover_locales_skips_blank_theme_and_undeployed_dirs(tmp_path: Path, make_locale) -> None:
    luma = make_locale("pub/static/frontend/Magento/luma/en_US")
    admin = make_locale("pub/static/adminhtml/Magento/backend/de_DE")
    make_locale("pub/static/frontend/Magento/blank/en_US")
    (tmp_path / "pub/static/frontend/Vendor/empty/en_US").mkdir(parents=True)

    locales = discover_locales(root=tmp_path)

    assert locales == [luma, admin]


def test_discover_locales_accepts_minified_config(tmp_path: Path, make_locale) -> None:
    locale = make_locale("pub/static/frontend/Vendor/theme/fr_FR", minified=True)

    assert discover_locales("pub/static/frontend/*/*/*", root=tmp_path) == [locale]


def test_discover_locales_sorts_within_alternative(tmp_path: Path, make_locale) -> None:
    second = make_locale("pub/static/frontend/Vendor/theme/fr_FR")
    first = make_locale("pub/static/frontend/Vendor/theme/de_DE")

    assert discover_locales(root=tmp_path) == [first, second]


def test_discover_locales_raises_when_nothing_matches(tmp_path: Path) -> None:
    with pytest.raises(NoLocalesFoundError) as excinfo:
        discover_locales("pub/static/frontend/*/*/*", root=tmp_path)

    assert excinfo.value.pattern == "pub/static/frontend/*/*/*"
    assert "static content is deployed" in str(excinfo.value)


def test_is_minify_enabled_uses_first_locale(make_locale) -> None:
    minified = make_locale("pub/static/frontend/A/theme/en_US", minified=True)
    plain = make_locale("pub/static/frontend/B/theme/en_US")

    assert is_minify_enabled([minified, plain])
    assert not is_minify_enabled([plain, minified])
    assert not is_minify_enabled([])
