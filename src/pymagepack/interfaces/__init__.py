# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the collaborators of the bundling pipeline."""

from __future__ import annotations

from .bundling import BundleLogger, Minifier, MinifyResult

__all__ = ["BundleLogger", "Minifier", "MinifyResult"]
