# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the bundling pipeline."""

from __future__ import annotations

import pytest

from pymagepack.bundle.pipeline import BundleResult, BundlingPipeline
from pymagepack.config import BundleSpec, BundlingConfig

ANONYMOUS_A = "define(['jquery'], function ($) { return $; });"


def _config(*bundles: tuple[str, dict[str, str]]) -> BundlingConfig:
    return BundlingConfig([BundleSpec(name=name, modules=modules) for name, modules in bundles])


def test_missing_module_is_skipped_and_left_out_of_config(make_locale, recording_logger) -> None:
    locale = make_locale(files={"a.js": ANONYMOUS_A})
    pipeline = BundlingPipeline(
        _config(("checkout", {"a": "a", "b": "b"})),
        [locale],
        minify_on=False,
        logger=recording_logger,
    )

    report = pipeline.run()

    bundle = (locale / "magepack" / "bundle-checkout.js").read_text(encoding="utf-8")
    config = (locale / "magepack" / "requirejs-config-checkout.js").read_text(encoding="utf-8")
    assert bundle == "define('a', ['jquery'], function ($) { return $; });\n"
    assert config == "requirejs.config({bundles:{'magepack/bundle-checkout':['a']}});"
    result = report.results[0]
    assert result.modules == ("a",)
    assert result.skipped == ("b",)
    assert report.skipped_modules == 1
    assert any('"b" not found' in message for message in recording_logger.messages["debug"])
    assert recording_logger.messages["info"] == [f'Creating bundles for "{locale}".']


def test_module_order_and_wrapping(make_locale, recording_logger) -> None:
    locale = make_locale(
        files={
            "legacy.js": "window.legacy = true;",
            "named.js": "define('named', [], function () { return 1; });",
            "tpl/view.html": "<p>it's</p>",
        },
    )
    modules = {"named": "named", "text!tpl/view.html": "text!tpl/view.html", "legacy": "legacy"}

    BundlingPipeline(_config(("cms", modules)), [locale], minify_on=False, logger=recording_logger).run()

    bundle = (locale / "magepack" / "bundle-cms.js").read_text(encoding="utf-8")
    assert bundle == (
        "define('named', [], function () { return 1; });\n"
        "define('text!tpl/view.html', function () { return '<p>it\\'s</p>'; });\n"
        "define('legacy', [], function () {\nwindow.legacy = true;\n});\n"
    )
    config = (locale / "magepack" / "requirejs-config-cms.js").read_text(encoding="utf-8")
    assert config == "requirejs.config({bundles:{'magepack/bundle-cms':['named','text!tpl/view.html','legacy']}});"


def test_empty_bundle_still_writes_outputs(make_locale, recording_logger) -> None:
    locale = make_locale()

    BundlingPipeline(_config(("empty", {"gone": "gone"})), [locale], minify_on=False, logger=recording_logger).run()

    assert (locale / "magepack" / "bundle-empty.js").read_text(encoding="utf-8") == ""
    assert (locale / "magepack" / "requirejs-config-empty.js").read_text(encoding="utf-8") == (
        "requirejs.config({bundles:{'magepack/bundle-empty':[]}});"
    )


def test_repeated_runs_produce_identical_output(make_locale, recording_logger) -> None:
    locale = make_locale(files={"a.js": ANONYMOUS_A})
    config = _config(("checkout", {"a": "a"}))
    stale = locale / "magepack" / "bundle-checkout.js"
    stale.parent.mkdir()
    stale.write_text("stale contents that are longer than the bundle " * 10, encoding="utf-8")

    BundlingPipeline(config, [locale], minify_on=False, logger=recording_logger).run()
    first = stale.read_bytes()
    BundlingPipeline(config, [locale], minify_on=False, logger=recording_logger).run()

    assert stale.read_bytes() == first
    assert b"stale" not in first


def test_identical_bundles_across_locales_minify_once(make_locale, recording_logger, fake_minifier) -> None:
    files = {"a.min.js": ANONYMOUS_A}
    first = make_locale("pub/static/frontend/Vendor/theme/en_US", files, minified=True)
    second = make_locale("pub/static/frontend/Vendor/theme/de_DE", files, minified=True)
    minifier = fake_minifier

    report = BundlingPipeline(
        _config(("checkout", {"a": "a"})),
        [first, second],
        minify_on=True,
        minifier=minifier,
        logger=recording_logger,
    ).run()

    assert len(minifier.calls) == 1
    expected = f"/*min*/{len(minifier.calls[0])}"
    for locale in (first, second):
        assert (locale / "magepack" / "bundle-checkout.min.js").read_text(encoding="utf-8") == expected
        assert (locale / "magepack" / "requirejs-config-checkout.min.js").exists()
    assert report.minify_cache is not None
    assert report.minify_cache.hits == 1
    assert all(result.minified for result in report.results)


def test_failed_minification_writes_empty_bundle_and_is_not_retried(
    make_locale,
    recording_logger,
    fake_minifier,
) -> None:
    files = {"a.min.js": ANONYMOUS_A}
    locales = [
        make_locale("pub/static/frontend/Vendor/theme/en_US", files, minified=True),
        make_locale("pub/static/frontend/Vendor/theme/nl_NL", files, minified=True),
    ]
    minifier = fake_minifier
    minifier.error = "Unexpected token"

    report = BundlingPipeline(
        _config(("checkout", {"a": "a"})),
        locales,
        minify_on=True,
        minifier=minifier,
        logger=recording_logger,
    ).run()

    assert len(minifier.calls) == 1
    assert recording_logger.messages["fail"] == ['Minification of bundle "checkout" failed: Unexpected token']
    for locale in locales:
        assert (locale / "magepack" / "bundle-checkout.min.js").read_text(encoding="utf-8") == ""
        assert (locale / "magepack" / "requirejs-config-checkout.min.js").read_text(encoding="utf-8") == (
            "requirejs.config({bundles:{'magepack/bundle-checkout':['a']}});"
        )
    assert [result.size for result in report.results] == [0, 0]


def test_force_minify_keeps_plain_file_names(make_locale, recording_logger, fake_minifier) -> None:
    locale = make_locale(files={"a.js": ANONYMOUS_A})
    minifier = fake_minifier

    pipeline = BundlingPipeline(
        _config(("checkout", {"a": "a"})),
        [locale],
        minify_on=False,
        force_minify=True,
        minifier=minifier,
        logger=recording_logger,
    )
    result = pipeline.run().results[0]

    assert pipeline.should_minify
    assert result.minified
    assert result.bundle_path == locale / "magepack" / "bundle-checkout.js"
    assert result.bundle_path.read_text(encoding="utf-8").startswith("/*min*/")
    assert minifier.calls == ["define('a', ['jquery'], function ($) { return $; });\n"]


def test_no_minification_without_flags(make_locale, recording_logger, fake_minifier) -> None:
    locale = make_locale(files={"a.js": ANONYMOUS_A})
    minifier = fake_minifier

    BundlingPipeline(
        _config(("checkout", {"a": "a"})),
        [locale],
        minify_on=False,
        minifier=minifier,
        logger=recording_logger,
    ).run()

    assert minifier.calls == []


def test_shared_modules_are_read_once_per_locale(make_locale, recording_logger) -> None:
    locale = make_locale(files={"a.js": ANONYMOUS_A, "b.js": "var b;"})

    report = BundlingPipeline(
        _config(("one", {"a": "a"}), ("two", {"a": "a", "b": "b"})),
        [locale],
        minify_on=False,
        logger=recording_logger,
    ).run()

    assert report.read_cache is not None
    assert (report.read_cache.misses, report.read_cache.hits) == (2, 1)
    assert [result.name for result in report.for_locale(locale)] == ["one", "two"]


def test_write_failure_propagates(make_locale, recording_logger) -> None:
    locale = make_locale(files={"a.js": ANONYMOUS_A})
    (locale / "magepack").write_text("not a directory", encoding="utf-8")

    pipeline = BundlingPipeline(_config(("checkout", {"a": "a"})), [locale], minify_on=False, logger=recording_logger)

    with pytest.raises(OSError):
        pipeline.run()


def test_size_is_reported_in_kilobytes(make_locale, recording_logger) -> None:
    locale = make_locale(files={"big.js": "x" * 3000})

    result = BundlingPipeline(
        _config(("big", {"big": "big"})),
        [locale],
        minify_on=False,
        logger=recording_logger,
    ).run().results[0]

    assert isinstance(result, BundleResult)
    assert result.size_kb == 3
    assert recording_logger.messages["ok"] == ['Generated bundle "big"' + " " * 8 + "- 3 kB."]


def test_text_plugin_module_with_unlisted_extension(make_locale, recording_logger) -> None:
    locale = make_locale(files={"Vendor_Mod/template/row.tpl": "<li><%- label %></li>"})
    name = "text!Vendor_Mod/template/row.tpl"

    BundlingPipeline(_config(("grid", {name: name})), [locale], minify_on=False, logger=recording_logger).run()

    bundle = (locale / "magepack" / "bundle-grid.js").read_text(encoding="utf-8")
    assert bundle == "define('text!Vendor_Mod/template/row.tpl', function () { return '<li><%- label %></li>'; });\n"


def test_crlf_sources_are_bundled_byte_for_byte(make_locale, recording_logger) -> None:
    locale = make_locale()
    (locale / "view.html").write_bytes(b"<p>\r\nx</p>")
    (locale / "legacy.js").write_bytes(b"var a = `one\r\ntwo`;\r\n")
    modules = {"text!view.html": "text!view.html", "legacy": "legacy"}

    BundlingPipeline(_config(("crlf", modules)), [locale], minify_on=False, logger=recording_logger).run()

    bundle = (locale / "magepack" / "bundle-crlf.js").read_bytes()
    assert bundle == (
        b"define('text!view.html', function () { return '<p>\\r\\nx</p>'; });\n"
        b"define('legacy', [], function () {\nvar a = `one\r\ntwo`;\r\n\n});\n"
    )
