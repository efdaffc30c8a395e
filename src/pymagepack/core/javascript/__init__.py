# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JavaScript source helpers: a lightweight tokenizer and a literal reader."""

from __future__ import annotations

from .literal import LiteralSyntaxError, parse_literal
from .scanner import ArgumentShape, DefineCall, Token, TokenKind, find_define_call, iter_define_calls, tokenize

__all__ = [
    "ArgumentShape",
    "DefineCall",
    "LiteralSyntaxError",
    "Token",
    "TokenKind",
    "find_define_call",
    "iter_define_calls",
    "parse_literal",
    "tokenize",
]
