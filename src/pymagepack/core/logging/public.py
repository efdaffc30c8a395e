# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from .consoles import default_console


def emoji(symbol: str, enable: bool) -> str:
    """Select an emoji symbol based on the caller's preference.

    Args:
        symbol: Emoji text to include in the output.
        enable: Flag indicating whether emoji output is desired.

    Returns:
        str: Emoji symbol when enabled, otherwise an empty string.
    """

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, console: Console | None) -> None:
    """Render ``msg`` on ``console``, or on the default console.

    Args:
        msg: Message text to print.
        style: Rich style applied when the console renders colour.
        console: Destination console.
    """

    text = Text(msg)
    text.stylize(style)
    (console or default_console()).print(text)


def info(msg: str, *, use_emoji: bool, console: Console | None = None) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", console=console)


def ok(msg: str, *, use_emoji: bool, console: Console | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", console=console)


def warn(msg: str, *, use_emoji: bool, console: Console | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", console=console)


def fail(msg: str, *, use_emoji: bool, console: Console | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", console=console)
