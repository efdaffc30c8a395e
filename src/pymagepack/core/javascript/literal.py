# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read JavaScript object literals as Python values.

Magepack configuration files are written by ``javascript-stringify`` or by
hand, so they use bare identifier keys, single-quoted strings, comments and
trailing commas. This module accepts that literal subset, which includes
plain JSON, and nothing that would require evaluating code.

Accepted values:

* objects with identifier, string or numeric keys;
* arrays;
* single, double or backtick quoted strings without substitutions;
* numbers, optionally signed, in decimal, hex, octal or binary notation;
* ``true``, ``false``, ``null``, ``undefined``, ``Infinity`` and ``NaN``.

A leading ``module.exports =`` and a trailing semicolon are skipped when
``allow_export`` is set.
"""

from __future__ import annotations

import re
from typing import Final

from .scanner import Token, TokenKind, tokenize

LiteralValue = dict[str, "LiteralValue"] | list["LiteralValue"] | str | int | float | bool | None

_KEYWORD_VALUES: Final[dict[str, LiteralValue]] = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": None,
    "Infinity": float("inf"),
    "NaN": float("nan"),
}
_EXPORT_PREFIX: Final[tuple[str, ...]] = ("module", ".", "exports", "=")
_QUOTES: Final[frozenset[str]] = frozenset({"'", '"', "`"})
_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(
    r"\\(u\{[0-9A-Fa-f]+\}|u[0-9A-Fa-f]{4}|x[0-9A-Fa-f]{2}|\r\n|[\s\S])",
)
_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}
_LINE_CONTINUATIONS: Final[frozenset[str]] = frozenset({"\n", "\r", "\r\n", "\u2028", "\u2029"})


class LiteralSyntaxError(ValueError):
    """Raised when source text is not a supported JavaScript literal.

    Attributes:
        msg: Description of the problem without position information.
        lineno: One-based line of the offending token.
        offset: Character offset of the offending token.
    """

    def __init__(self, msg: str, source: str, offset: int) -> None:
        self.msg = msg
        self.offset = offset
        self.lineno = source.count("\n", 0, offset) + 1
        super().__init__(f"{msg} at line {self.lineno}")


def _unescape(match: re.Match[str]) -> str:
    escape = match.group(1)
    if escape in _LINE_CONTINUATIONS:
        return ""
    if escape.startswith("u{"):
        return chr(int(escape[2:-1], 16))
    if escape[0] in "ux" and len(escape) > 1:
        return chr(int(escape[1:], 16))
    return _SIMPLE_ESCAPES.get(escape, escape)


def decode_string(text: str) -> str:
    """Return the value of a quoted JavaScript string token.

    Args:
        text: Token text including its quotes.

    Returns:
        str: Decoded string. Escaped surrogate pairs are joined.

    Raises:
        ValueError: If the token is not a terminated string.
    """

    if len(text) < 2 or text[0] not in _QUOTES or text[-1] != text[0]:
        raise ValueError("unterminated string")
    decoded = _ESCAPE_RE.sub(_unescape, text[1:-1])
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16")


def _number(text: str) -> int | float:
    cleaned = text.replace("_", "")
    if cleaned.endswith("n"):
        raise ValueError("BigInt literals are not supported")
    if cleaned[:2].lower() in {"0x", "0o", "0b"}:
        return int(cleaned, 0)
    try:
        return int(cleaned)
    except ValueError:
        return float(cleaned)


class _LiteralParser:
    """Recursive descent over the significant tokens of one literal."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens = list(tokenize(source))
        self._index = 0

    def parse(self, *, allow_export: bool) -> LiteralValue:
        if allow_export and [token.text for token in self._tokens[: len(_EXPORT_PREFIX)]] == list(_EXPORT_PREFIX):
            self._index = len(_EXPORT_PREFIX)
        value = self._value()
        if allow_export and self._peek_text() == ";":
            self._index += 1
        trailing = self._peek()
        if trailing is not None:
            raise self._error(f"unexpected {trailing.text!r} after the value", trailing)
        return value

    def _peek(self) -> Token | None:
        return self._tokens[self._index] if self._index < len(self._tokens) else None

    def _peek_text(self) -> str | None:
        token = self._peek()
        return token.text if token is not None else None

    def _next(self, expected: str) -> Token:
        token = self._peek()
        if token is None:
            raise LiteralSyntaxError(f"expected {expected} but reached the end", self._source, len(self._source))
        self._index += 1
        return token

    def _error(self, msg: str, token: Token) -> LiteralSyntaxError:
        return LiteralSyntaxError(msg, self._source, token.start)

    def _value(self) -> LiteralValue:
        token = self._next("a value")
        if token.kind is TokenKind.PUNCTUATOR:
            if token.text == "{":
                return self._object()
            if token.text == "[":
                return self._array()
            if token.text in {"-", "+"}:
                operand = self._next("a number")
                value = self._signed_operand(operand)
                return -value if token.text == "-" else value
        elif token.kind is TokenKind.STRING or token.kind is TokenKind.TEMPLATE:
            return self._string(token)
        elif token.kind is TokenKind.NUMBER:
            return self._numeric(token)
        elif token.kind is TokenKind.IDENTIFIER and token.text in _KEYWORD_VALUES:
            return _KEYWORD_VALUES[token.text]
        raise self._error(f"unexpected {token.text!r}", token)

    def _signed_operand(self, token: Token) -> int | float:
        if token.kind is TokenKind.NUMBER:
            return self._numeric(token)
        if token.kind is TokenKind.IDENTIFIER and token.text in {"Infinity", "NaN"}:
            return float("inf") if token.text == "Infinity" else float("nan")
        raise self._error(f"expected a number after the sign, found {token.text!r}", token)

    def _string(self, token: Token) -> str:
        try:
            return decode_string(token.text)
        except ValueError as exc:
            raise self._error(str(exc), token) from exc

    def _numeric(self, token: Token) -> int | float:
        try:
            return _number(token.text)
        except ValueError as exc:
            raise self._error(f"invalid number {token.text!r}", token) from exc

    def _key(self) -> str:
        token = self._next("a property name")
        if token.kind is TokenKind.IDENTIFIER:
            return token.text
        if token.kind is TokenKind.STRING:
            return self._string(token)
        if token.kind is TokenKind.NUMBER:
            return str(self._numeric(token))
        raise self._error(f"expected a property name, found {token.text!r}", token)

    def _object(self) -> dict[str, LiteralValue]:
        members: dict[str, LiteralValue] = {}
        while True:
            if self._peek_text() == "}":
                self._index += 1
                return members
            key = self._key()
            colon = self._next("':'")
            if colon.text != ":":
                raise self._error(f"expected ':' after {key!r}, found {colon.text!r}", colon)
            members[key] = self._value()
            separator = self._next("',' or '}'")
            if separator.text == "}":
                return members
            if separator.text != ",":
                raise self._error(f"expected ',' or '}}', found {separator.text!r}", separator)

    def _array(self) -> list[LiteralValue]:
        items: list[LiteralValue] = []
        while True:
            if self._peek_text() == "]":
                self._index += 1
                return items
            items.append(self._value())
            separator = self._next("',' or ']'")
            if separator.text == "]":
                return items
            if separator.text != ",":
                raise self._error(f"expected ',' or ']', found {separator.text!r}", separator)


def parse_literal(source: str, *, allow_export: bool = False) -> LiteralValue:
    """Return the Python value of a JavaScript literal.

    Args:
        source: Literal source text. Comments are ignored.
        allow_export: Accept a ``module.exports = <literal>;`` statement.

    Returns:
        LiteralValue: Nested dicts, lists and scalars. Object key order is
        preserved and a repeated key keeps its last value.

    Raises:
        LiteralSyntaxError: If ``source`` is not a supported literal.
    """

    return _LiteralParser(source).parse(allow_export=allow_export)


__all__ = ["LiteralSyntaxError", "LiteralValue", "decode_string", "parse_literal"]
