# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Serialise Python values as compact JavaScript literals.

Loader configuration is emitted as source text rather than JSON: keys that
are valid identifiers stay bare and strings use single quotes, so the output
reads like hand-written ``requirejs.config`` calls.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Final

from .paths import bundle_id

_IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(
    "[\\\\'\\x00-\\x1f\\x7f-\\x9f\\u00ad\\u0600-\\u0604\\u070f\\u17b4\\u17b5"
    "\\u200c-\\u200f\\u2028-\\u202f\\u2060-\\u206f\\ufeff\\ufff0-\\uffff]",
)
_NAMED_ESCAPES: Final[dict[str, str]] = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
    "'": "\\'",
    "\\": "\\\\",
}

JsValue = Mapping[str, "JsValue"] | Iterable["JsValue"] | str | int | float | bool | None


def _escape(match: re.Match[str]) -> str:
    char = match.group(0)
    return _NAMED_ESCAPES.get(char) or f"\\u{ord(char):04x}"


def quote_string(value: str) -> str:
    """Return ``value`` as a single-quoted JavaScript string literal."""

    return f"'{_ESCAPE_RE.sub(_escape, value)}'"


def _format_key(key: str) -> str:
    return key if _IDENTIFIER_RE.match(key) else quote_string(key)


def _format_number(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return repr(value)


def stringify(value: JsValue) -> str:
    """Return the JavaScript literal for ``value``.

    Args:
        value: Nested mappings, sequences, strings, numbers, booleans or ``None``.

    Returns:
        str: Compact literal without insignificant whitespace.

    Raises:
        TypeError: If ``value`` contains an unsupported type.
    """

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, Mapping):
        members = ",".join(f"{_format_key(str(key))}:{stringify(item)}" for key, item in value.items())
        return f"{{{members}}}"
    if isinstance(value, Iterable):
        return f"[{','.join(stringify(item) for item in value)}]"
    raise TypeError(f"Cannot serialise {type(value).__name__} as a JavaScript literal")


def render_bundle_config(bundle_name: str, modules: Iterable[str]) -> str:
    """Return the loader configuration statement mapping a bundle to its modules.

    Args:
        bundle_name: Configured bundle name.
        modules: Module names packed into the bundle, in inclusion order.

    Returns:
        str: ``requirejs.config({bundles:{...}});`` source text.
    """

    options = {"bundles": {bundle_id(bundle_name): list(modules)}}
    return f"requirejs.config({stringify(options)});"


__all__ = ["quote_string", "render_bundle_config", "stringify"]
