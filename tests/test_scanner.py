# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the JavaScript define-call scanner."""

from __future__ import annotations

from pymagepack.core.javascript.scanner import (
    ArgumentShape,
    TokenKind,
    find_define_call,
    iter_define_calls,
    tokenize,
)


def test_define_inside_comments_and_strings_is_ignored() -> None:
    source = (
        "// define(['a'], f)\n"
        "var s = \"define(['b'])\";\n"
        "/* define(function () {}) */\n"
        "var t = 'define(';\n"
    )
    assert list(iter_define_calls(source)) == []


def test_umd_guard_reports_only_the_call() -> None:
    source = "if (typeof define === 'function' && define.amd) {\n    define(['jquery'], factory);\n}\n"
    calls = list(iter_define_calls(source))

    assert len(calls) == 1
    call = calls[0]
    assert call.shape is ArgumentShape.DEPENDENCIES
    assert call.first_argument == source.index("['jquery']")
    assert source[call.open_paren] == "("
    assert call.is_anonymous


def test_member_calls_and_declarations_are_not_define_calls() -> None:
    source = "loader.define(['a'], f); obj?.define({}); function define(name) { return name; }"
    assert find_define_call(source) is None


def test_regex_literal_containing_define_is_skipped() -> None:
    source = "var re = /define\\(/g; var half = total / 2; define(function () { return re; });"
    calls = list(iter_define_calls(source))

    assert [call.shape for call in calls] == [ArgumentShape.FACTORY]


def test_template_literal_substitutions_are_tracked() -> None:
    source = "const t = `define(${value})`; define({ key: `x${y}` });"
    calls = list(iter_define_calls(source))

    assert len(calls) == 1
    assert calls[0].shape is ArgumentShape.OBJECT
    assert calls[0].first_argument == source.index("{ key")


def test_first_argument_shapes() -> None:
    assert find_define_call("define('name', [], f);").shape is ArgumentShape.NAME
    assert find_define_call("define(factory);").shape is ArgumentShape.REFERENCE
    assert find_define_call("define(() => 1);").shape is ArgumentShape.FACTORY
    assert find_define_call("define(moduleName, deps, f);").shape is ArgumentShape.OTHER
    assert find_define_call("define();").shape is ArgumentShape.EMPTY


def test_find_anonymous_call_skips_named_ones() -> None:
    source = "define('a', [], f);\ndefine(['b'], g);"
    call = find_define_call(source, anonymous=True)

    assert call is not None
    assert call.first_argument == source.index("['b']")


def test_malformed_input_does_not_raise() -> None:
    for source in ("var s = 'unterminated", "/* open comment define(", "`open ${ template", "define(", "x = /[/"):
        list(tokenize(source))
        list(iter_define_calls(source))

    call = find_define_call("define(")
    assert call is not None
    assert call.shape is ArgumentShape.EMPTY
    assert call.first_argument == len("define(")


def test_tokenize_reports_kinds() -> None:
    kinds = [token.kind for token in tokenize("a = 'x' + 1.5;")]
    assert kinds == [
        TokenKind.IDENTIFIER,
        TokenKind.PUNCTUATOR,
        TokenKind.STRING,
        TokenKind.PUNCTUATOR,
        TokenKind.NUMBER,
        TokenKind.PUNCTUATOR,
    ]
