# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lightweight JavaScript scanner used to locate AMD ``define`` calls.

The scanner is not a parser. It splits source into identifiers, strings,
template literals, numbers, regular expression literals and punctuators,
dropping whitespace and comments, which is enough to find ``define(`` calls
that are real code rather than text inside a string or comment.

Regular expression literals are told apart from division by looking at the
previous significant token. A wrong guess can only swallow the remainder of
one line, because a regular expression literal never spans lines.

Malformed input never raises: an unterminated string, comment or template
simply runs to the end of the source.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Final


class TokenKind(str, Enum):
    """Enumerate token categories produced by :func:`tokenize`."""

    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    TEMPLATE = "template"
    REGEX = "regex"
    PUNCTUATOR = "punctuator"


class ArgumentShape(str, Enum):
    """Describe how the first argument of a ``define`` call starts."""

    NAME = "name"
    DEPENDENCIES = "dependencies"
    OBJECT = "object"
    FACTORY = "factory"
    REFERENCE = "reference"
    EMPTY = "empty"
    OTHER = "other"


ANONYMOUS_SHAPES: Final[frozenset[ArgumentShape]] = frozenset(
    {ArgumentShape.DEPENDENCIES, ArgumentShape.OBJECT, ArgumentShape.FACTORY, ArgumentShape.REFERENCE},
)


@dataclass(frozen=True, slots=True)
class Token:
    """Represent one significant token and its offset in the source."""

    kind: TokenKind
    text: str
    start: int


@dataclass(frozen=True, slots=True)
class DefineCall:
    """Locate a ``define(...)`` call in module source.

    Attributes:
        start: Offset of the ``define`` identifier.
        open_paren: Offset of the opening parenthesis.
        first_argument: Offset where the first argument begins, or of the
            closing parenthesis for an empty call.
        shape: Classification of the first argument.
    """

    start: int
    open_paren: int
    first_argument: int
    shape: ArgumentShape

    @property
    def is_anonymous(self) -> bool:
        """Return ``True`` when the call omits the module name."""

        return self.shape in ANONYMOUS_SHAPES


_WHITESPACE_RE: Final = re.compile(r"\s+")
_IDENTIFIER_RE: Final = re.compile(r"(?:[A-Za-z_$\u0080-\uffff]|\\u[0-9A-Fa-f]{4})(?:[\w$\u0080-\uffff]|\\u[0-9A-Fa-f]{4})*")
_NUMBER_RE: Final = re.compile(
    r"0[xXoObB][0-9A-Fa-f_]+n?|(?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d+)?n?",
)
_STRING_RES: Final = {
    "'": re.compile(r"'(?:[^'\\\n]|\\[\s\S])*'?"),
    '"': re.compile(r'"(?:[^"\\\n]|\\[\s\S])*"?'),
}
_TEMPLATE_CHUNK_RE: Final = re.compile(r"(?:[^`\\$]|\\[\s\S]|\$(?!\{))*")
_REGEX_RE: Final = re.compile(r"/(?:[^/\\\[\n]|\\.|\[(?:[^\]\\\n]|\\.)*\]?)+/?[A-Za-z]*")
_MULTI_PUNCTUATORS: Final[tuple[str, ...]] = ("...", "?.", "=>")

# After these keywords a slash starts a regular expression, not a division.
_REGEX_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "await",
        "case",
        "delete",
        "do",
        "else",
        "in",
        "instanceof",
        "new",
        "of",
        "return",
        "throw",
        "typeof",
        "void",
        "yield",
    },
)
_VALUE_CLOSERS: Final[frozenset[str]] = frozenset({")", "]"})
_LITERAL_KEYWORDS: Final[frozenset[str]] = frozenset({"true", "false", "null", "undefined", "this", "new", "typeof", "void"})


class _Scanner:
    """Stateful tokenizer tracking template literal nesting."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._length = len(source)
        self._pos = 0
        # One entry per open brace; True marks a template ``${`` substitution.
        self._braces: list[bool] = []
        self._previous: Token | None = None

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self._next_token()
            if token is None:
                return
            self._previous = token
            yield token

    def _regex_allowed(self) -> bool:
        previous = self._previous
        if previous is None:
            return True
        if previous.kind is TokenKind.IDENTIFIER:
            return previous.text in _REGEX_KEYWORDS
        if previous.kind is TokenKind.PUNCTUATOR:
            return previous.text not in _VALUE_CLOSERS
        if previous.kind is TokenKind.TEMPLATE:
            return previous.text.endswith("${")
        return False

    def _skip_trivia(self) -> None:
        source = self._source
        while self._pos < self._length:
            match = _WHITESPACE_RE.match(source, self._pos)
            if match:
                self._pos = match.end()
                continue
            if source.startswith("//", self._pos):
                newline = source.find("\n", self._pos)
                self._pos = self._length if newline == -1 else newline + 1
                continue
            if source.startswith("/*", self._pos):
                end = source.find("*/", self._pos + 2)
                self._pos = self._length if end == -1 else end + 2
                continue
            return

    def _next_token(self) -> Token | None:
        self._skip_trivia()
        if self._pos >= self._length:
            return None
        source = self._source
        start = self._pos
        char = source[start]

        if char in _STRING_RES:
            return self._consume(TokenKind.STRING, _STRING_RES[char].match(source, start))
        if char == "`":
            return self._template(start, start + 1)
        if char == "}" and self._braces and self._braces[-1]:
            self._braces.pop()
            return self._template(start, start + 1)
        if char == "/" and self._regex_allowed():
            return self._consume(TokenKind.REGEX, _REGEX_RE.match(source, start))

        number = _NUMBER_RE.match(source, start) if char.isdigit() or char == "." else None
        if number:
            return self._consume(TokenKind.NUMBER, number)
        identifier = _IDENTIFIER_RE.match(source, start)
        if identifier:
            return self._consume(TokenKind.IDENTIFIER, identifier)
        return self._punctuator(start)

    def _consume(self, kind: TokenKind, match: re.Match[str] | None) -> Token:
        start = self._pos
        end = match.end() if match and match.end() > start else start + 1
        self._pos = end
        return Token(kind, self._source[start:end], start)

    def _template(self, start: int, body: int) -> Token:
        """Consume template text from ``body`` up to a closing backtick or ``${``."""

        chunk = _TEMPLATE_CHUNK_RE.match(self._source, body)
        end = chunk.end() if chunk else body
        if self._source.startswith("${", end):
            self._braces.append(True)
            end += 2
        elif end < self._length:
            end += 1
        self._pos = end
        return Token(TokenKind.TEMPLATE, self._source[start:end], start)

    def _punctuator(self, start: int) -> Token:
        source = self._source
        for candidate in _MULTI_PUNCTUATORS:
            if source.startswith(candidate, start):
                text = candidate
                break
        else:
            text = source[start]
        if text == "{":
            self._braces.append(False)
        elif text == "}" and self._braces:
            self._braces.pop()
        self._pos = start + len(text)
        return Token(TokenKind.PUNCTUATOR, text, start)


def tokenize(source: str) -> Iterator[Token]:
    """Yield the significant tokens of ``source``.

    Args:
        source: JavaScript source text.

    Returns:
        Iterator[Token]: Tokens in source order, without whitespace or comments.
    """

    return iter(_Scanner(source))


def _argument_shape(first: Token | None, following: Token | None) -> ArgumentShape:
    """Classify a call's first argument from its first two tokens."""

    if first is None:
        return ArgumentShape.EMPTY
    if first.kind is TokenKind.STRING or first.kind is TokenKind.TEMPLATE:
        return ArgumentShape.NAME
    if first.kind is TokenKind.PUNCTUATOR:
        return {
            "[": ArgumentShape.DEPENDENCIES,
            "{": ArgumentShape.OBJECT,
            "(": ArgumentShape.FACTORY,
            ")": ArgumentShape.EMPTY,
        }.get(first.text, ArgumentShape.OTHER)
    if first.kind is TokenKind.IDENTIFIER:
        if first.text in {"function", "async"}:
            return ArgumentShape.FACTORY
        # ``define(factory)``: a lone reference can only be the factory.
        sole_argument = following is not None and following.text == ")"
        if first.text not in _LITERAL_KEYWORDS and sole_argument:
            return ArgumentShape.REFERENCE
    return ArgumentShape.OTHER


def _is_define_callee(token: Token, previous: Token | None) -> bool:
    if token.kind is not TokenKind.IDENTIFIER or token.text != "define":
        return False
    if previous is None:
        return True
    if previous.kind is TokenKind.PUNCTUATOR and previous.text in {".", "?."}:
        return False
    return not (previous.kind is TokenKind.IDENTIFIER and previous.text == "function")


def _token_at(tokens: list[Token], index: int) -> Token | None:
    return tokens[index] if index < len(tokens) else None


def iter_define_calls(source: str) -> Iterator[DefineCall]:
    """Yield every ``define(...)`` call found in ``source``.

    Member calls such as ``loader.define(`` and function declarations named
    ``define`` are not reported.

    Args:
        source: JavaScript source text.

    Returns:
        Iterator[DefineCall]: Calls in source order.
    """

    tokens = list(tokenize(source))
    previous: Token | None = None
    for index, token in enumerate(tokens):
        paren = _token_at(tokens, index + 1)
        if _is_define_callee(token, previous) and paren is not None and paren.text == "(":
            first = _token_at(tokens, index + 2)
            yield DefineCall(
                start=token.start,
                open_paren=paren.start,
                first_argument=first.start if first is not None else len(source),
                shape=_argument_shape(first, _token_at(tokens, index + 3)),
            )
        previous = token


def find_define_call(source: str, *, anonymous: bool = False) -> DefineCall | None:
    """Return the first ``define`` call in ``source``.

    Args:
        source: JavaScript source text.
        anonymous: Only consider calls whose first argument omits the name.

    Returns:
        DefineCall | None: The first matching call, ``None`` when absent.
    """

    for call in iter_define_calls(source):
        if not anonymous or call.is_anonymous:
            return call
    return None


__all__ = [
    "ANONYMOUS_SHAPES",
    "ArgumentShape",
    "DefineCall",
    "Token",
    "TokenKind",
    "find_define_call",
    "iter_define_calls",
    "tokenize",
]
