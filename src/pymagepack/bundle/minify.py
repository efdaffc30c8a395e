# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Minify bundles with the terser command line tool."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from subprocess import CompletedProcess

from ..config.models import MinifyOptions
from ..core.runtime.process import CommandOptions, SubprocessExecutionError, run_command
from ..interfaces.bundling import MinifyResult
from .stringify import stringify

CommandRunner = Callable[..., CompletedProcess[str]]


class TerserMinifier:
    """Run ``terser`` over bundle text piped through stdin.

    Comments are dropped and names are mangled, except for the configured
    reserved identifiers that markup and the loader reference by name.
    """

    def __init__(self, options: MinifyOptions | None = None, *, runner: CommandRunner = run_command) -> None:
        self._options = options or MinifyOptions()
        self._runner = runner

    @property
    def options(self) -> MinifyOptions:
        return self._options

    def build_command(self) -> list[str]:
        """Return the full terser argument list."""

        reserved = stringify(list(self._options.reserved))
        return [
            *self._options.command,
            "--compress",
            "--mangle",
            f"reserved={reserved}",
            "--format",
            "comments=false",
        ]

    def minify(self, source: str) -> MinifyResult:
        """Return the minified form of ``source``.

        Args:
            source: Concatenated bundle text.

        Returns:
            MinifyResult: Minified code, or the error reported by terser when
            it exits non-zero or cannot be launched.
        """

        command: Sequence[str] = self.build_command()
        options = CommandOptions(check=True, timeout=self._options.timeout).with_input(source)
        try:
            completed = self._runner(command, options=options)
        except SubprocessExecutionError as exc:
            return MinifyResult(code=None, error=(exc.stderr or str(exc)).strip())
        except FileNotFoundError as exc:
            return MinifyResult(code=None, error=str(exc))
        return MinifyResult(code=completed.stdout)


__all__ = ["TerserMinifier"]
