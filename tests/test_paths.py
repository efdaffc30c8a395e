# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for output paths, module path resolution and the module map."""

from __future__ import annotations

from pathlib import Path

from pymagepack.bundle.module_map import ModuleMap
from pymagepack.bundle.paths import (
    bundle_id,
    get_bundle_config_path,
    get_bundle_path,
    get_module_real_path,
    is_text_resource,
    strip_plugin,
)
from pymagepack.bundle.resolver import ModulePathResolver


def test_output_paths_follow_minification_mode() -> None:
    locale = Path("/static/frontend/Vendor/theme/en_US")

    assert get_bundle_path(locale, "checkout", False) == locale / "magepack" / "bundle-checkout.js"
    assert get_bundle_path(locale, "checkout", True) == locale / "magepack" / "bundle-checkout.min.js"
    assert get_bundle_config_path(locale, "cms", False) == locale / "magepack" / "requirejs-config-cms.js"
    assert get_bundle_config_path(locale, "cms", True) == locale / "magepack" / "requirejs-config-cms.min.js"
    assert bundle_id("cms") == "magepack/bundle-cms"


def test_module_real_path_normalises_script_suffix() -> None:
    assert get_module_real_path("jquery", "jquery", False) == "jquery.js"
    assert get_module_real_path("jquery", "jquery.js", True) == "jquery.min.js"
    assert get_module_real_path("jquery", "jquery.min.js", False) == "jquery.js"


def test_text_modules_keep_their_path() -> None:
    name = "text!Magento_Ui/templates/collection.html"
    assert is_text_resource(name, "Magento_Ui/templates/collection.html")
    assert get_module_real_path(name, name, True) == "Magento_Ui/templates/collection.html"
    assert get_module_real_path("data", "Vendor_Mod/data.json", True) == "Vendor_Mod/data.json"


def test_strip_plugin_only_removes_leading_plugin() -> None:
    assert strip_plugin("text!a/b.html") == "a/b.html"
    assert strip_plugin("Vendor_Mod/js/odd!name") == "Vendor_Mod/js/odd!name"
    assert strip_plugin("plain/module") == "plain/module"


def test_module_map_parses_base_url_interceptor() -> None:
    text = (
        "require.config({\n"
        '    "config": {"baseUrlInterceptor": {"jquery.js": "../../../../base/Magento/base/en_US/"}}\n'
        "});"
    )
    module_map = ModuleMap.parse(text)

    assert module_map.base_for("jquery.js") == "../../../../base/Magento/base/en_US/"
    assert module_map.base_for("jquery.min.js") == "../../../../base/Magento/base/en_US/"
    assert module_map.base_for("other.js") is None


def test_module_map_tolerates_garbage() -> None:
    assert ModuleMap.parse("not a map").bases == {}
    assert ModuleMap.parse("baseUrlInterceptor: {broken: }").bases == {}


def test_module_map_load_prefers_minified_file(tmp_path: Path) -> None:
    (tmp_path / "requirejs-map.js").write_text('{"baseUrlInterceptor": {"a.js": "plain/"}}', encoding="utf-8")
    (tmp_path / "requirejs-map.min.js").write_text('{"baseUrlInterceptor": {"a.js": "min/"}}', encoding="utf-8")

    assert ModuleMap.load(tmp_path, True).base_for("a.js") == "min/"
    assert ModuleMap.load(tmp_path, False).base_for("a.js") == "plain/"
    assert ModuleMap.load(tmp_path / "missing", True).bases == {}


def test_resolver_applies_module_map(tmp_path: Path) -> None:
    locale = tmp_path / "frontend" / "Vendor" / "theme" / "en_US"
    module_map = ModuleMap(bases={"jquery.js": "../../../Magento/base/en_US"})

    resolver = ModulePathResolver(locale, module_map)

    assert resolver.resolve("jquery", "jquery", True) == tmp_path / "frontend" / "Magento" / "base" / "en_US" / "jquery.min.js"
    assert resolver.resolve("mage/cookies", "mage/cookies", False) == locale / "mage" / "cookies.js"


def test_module_map_accepts_javascript_literal() -> None:
    text = "require.config({config: {baseUrlInterceptor: {'mage/x.js': '../../base/', }}});"
    assert ModuleMap.parse(text).base_for("mage/x.min.js") == "../../base/"
