# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from ...core.logging import ConsoleLogger, build_logger


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> ConsoleLogger:
    """Return a console logger configured from CLI flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        ConsoleLogger: Logger instance bound to a dedicated Rich console.
    """

    return build_logger(emoji=emoji, debug=debug, no_color=no_color)


__all__ = ["CLIError", "build_cli_logger"]
