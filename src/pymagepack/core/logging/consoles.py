# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Construct the Rich consoles that bundling output is written to."""

from __future__ import annotations

from functools import lru_cache

from rich.console import Console


def build_console(*, no_color: bool = False, emoji: bool = True) -> Console:
    """Return a console writing to the current standard output.

    Colour is used only on terminals. Rich also honours the ``NO_COLOR``
    environment variable unless ``no_color`` forces colour off.

    Args:
        no_color: Disable ANSI colour regardless of the terminal.
        emoji: Render ``:emoji:`` codes in output.

    Returns:
        Console: Console without highlighting or line wrapping, so paths and
        bundle names are printed verbatim.
    """

    return Console(no_color=True if no_color else None, emoji=emoji, highlight=False, soft_wrap=True)


@lru_cache(maxsize=1)
def default_console() -> Console:
    """Return the process-wide console used when callers supply none."""

    return build_console()


__all__ = ["build_console", "default_console"]
