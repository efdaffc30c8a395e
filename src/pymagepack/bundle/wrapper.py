# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalise module sources into named AMD ``define`` calls.

A bundle concatenates many files into one, so every module inside it must
name itself. Four source shapes are recognised, checked in this order:

* text assets (templates, JSON): wrapped as a module returning the text;
* scripts without any ``define`` call: enclosed in a dependency-free module;
* anonymous ``define`` calls: the module name is inserted as first argument;
* anything else: returned unchanged.
"""

from __future__ import annotations

from enum import Enum

from ..core.javascript.scanner import find_define_call, iter_define_calls
from .paths import is_text_resource
from .stringify import quote_string


class ModuleFormat(str, Enum):
    """Enumerate the source shapes handled by :func:`wrap_module`."""

    TEXT = "text"
    NON_AMD = "non-amd"
    ANONYMOUS_AMD = "anonymous-amd"
    NAMED_AMD = "named-amd"


def is_text(module_name: str, module_path: str) -> bool:
    """Return ``True`` when the module is a plain-text asset.

    A ``text!`` module name or a known text extension on ``module_path``
    marks the module as text, the same rule the path resolver applies.
    """

    return is_text_resource(module_name, module_path)


def is_non_amd(contents: str) -> bool:
    """Return ``True`` when ``contents`` never calls ``define``."""

    return find_define_call(contents) is None


def is_anonymous_amd(contents: str) -> bool:
    """Return ``True`` when ``contents`` calls ``define`` without a module name."""

    return find_define_call(contents, anonymous=True) is not None


def wrap_text(module_name: str, contents: str) -> str:
    """Return a module whose value is the raw ``contents`` string."""

    return f"define({quote_string(module_name)}, function () {{ return {quote_string(contents)}; }});"


def wrap_non_amd(module_name: str, contents: str) -> str:
    """Enclose a classic script in a named module with no dependencies or exports."""

    return f"define({quote_string(module_name)}, [], function () {{\n{contents}\n}});"


def wrap_anonymous_amd(module_name: str, contents: str) -> str:
    """Insert ``module_name`` as the first argument of the first anonymous ``define``.

    Everything except the inserted name is preserved byte for byte. Sources
    without an anonymous call are returned unchanged.
    """

    call = find_define_call(contents, anonymous=True)
    if call is None:
        return contents
    offset = call.first_argument
    return f"{contents[:offset]}{quote_string(module_name)}, {contents[offset:]}"


def classify_module(module_name: str, module_path: str, contents: str) -> ModuleFormat:
    """Return the source shape of a module.

    Args:
        module_name: Logical module name; a ``text!`` prefix marks text assets.
        module_path: Resolved file path; text detection also checks its extension.
        contents: Raw module source.

    Returns:
        ModuleFormat: Detected shape. Code that cannot be classified with
        confidence is reported as :attr:`ModuleFormat.NAMED_AMD`.
    """

    if is_text(module_name, module_path):
        return ModuleFormat.TEXT
    calls = list(iter_define_calls(contents))
    if not calls:
        return ModuleFormat.NON_AMD
    if any(call.is_anonymous for call in calls):
        return ModuleFormat.ANONYMOUS_AMD
    return ModuleFormat.NAMED_AMD


def wrap_module(module_name: str, contents: str, module_path: str) -> str:
    """Return ``contents`` normalised into a named module declaration.

    Args:
        module_name: Logical module name used by the loader.
        contents: Raw module source.
        module_path: Resolved file path of the module.

    Returns:
        str: Wrapped source, or ``contents`` when it already names itself.
    """

    module_format = classify_module(module_name, module_path, contents)
    if module_format is ModuleFormat.TEXT:
        return wrap_text(module_name, contents)
    if module_format is ModuleFormat.NON_AMD:
        return wrap_non_amd(module_name, contents)
    if module_format is ModuleFormat.ANONYMOUS_AMD:
        return wrap_anonymous_amd(module_name, contents)
    return contents


__all__ = [
    "ModuleFormat",
    "classify_module",
    "is_anonymous_amd",
    "is_non_amd",
    "is_text",
    "wrap_anonymous_amd",
    "wrap_module",
    "wrap_non_amd",
    "wrap_text",
]
