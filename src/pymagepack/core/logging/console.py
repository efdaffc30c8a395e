# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console logger implementing the bundling log surface."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text

from .consoles import build_console
from .public import fail as core_fail
from .public import info as core_info
from .public import ok as core_ok
from .public import warn as core_warn

_KEY_VALUE_RE = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


@dataclass(slots=True)
class ConsoleLogger:
    """Adapter around the project logging helpers honouring emoji and debug settings.

    Every level is written to ``console``, so its colour settings apply to
    the whole run.
    """

    console: Console = field(default_factory=build_console)
    use_emoji: bool = True
    debug_enabled: bool = False

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji, console=self.console)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji, console=self.console)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji, console=self.console)

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, console=self.console)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs are highlighted so paths stand out in long runs.

        Args:
            message: Debug payload.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_logger(*, emoji: bool = True, debug: bool = False, no_color: bool = False) -> ConsoleLogger:
    """Return a :class:`ConsoleLogger` bound to a dedicated Rich console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        ConsoleLogger: Configured logger.
    """

    console = build_console(no_color=no_color, emoji=emoji)
    return ConsoleLogger(console=console, use_emoji=emoji, debug_enabled=debug)
