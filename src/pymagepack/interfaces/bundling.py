# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Contracts for loggers and minifiers consumed by the bundling pipeline."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class MinifyResult:
    """Outcome of one minifier invocation.

    Attributes:
        code: Minified source, ``None`` when minification failed.
        error: Diagnostic reported by the minifier, if any.
    """

    code: str | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when minified code was produced without error."""

        return self.code is not None and self.error is None


@runtime_checkable
class Minifier(Protocol):
    """Define the contract implemented by JavaScript minifiers.

    Implementations report failures through :class:`MinifyResult` instead of
    raising, so one broken bundle never aborts a run.
    """

    @abstractmethod
    def minify(self, source: str) -> MinifyResult:
        """Return the minified form of ``source``.

        Args:
            source: Concatenated bundle text.

        Returns:
            MinifyResult: Minified code or the reported error.
        """
        raise NotImplementedError


@runtime_checkable
class BundleLogger(Protocol):
    """Define the logging surface used while bundling."""

    @abstractmethod
    def info(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def debug(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def ok(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def warn(self, message: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def fail(self, message: str) -> None:
        raise NotImplementedError


__all__ = ["BundleLogger", "Minifier", "MinifyResult"]
