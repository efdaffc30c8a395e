# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run-scoped caches shared by the bundling pipeline."""

from __future__ import annotations

from .bundling import CacheInfo, MinifyCache, ReadCache, content_hash

__all__ = ["CacheInfo", "MinifyCache", "ReadCache", "content_hash"]
