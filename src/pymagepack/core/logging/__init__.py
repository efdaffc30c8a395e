# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers."""

from __future__ import annotations

from .console import ConsoleLogger, build_logger
from .consoles import build_console, default_console
from .public import emoji, fail, info, ok, warn

__all__ = [
    "ConsoleLogger",
    "build_console",
    "build_logger",
    "default_console",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
