# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read and minification caches owned by a single bundling run.

Both caches are plain in-memory mappings. A pipeline builds fresh instances
for every invocation so nothing leaks between runs, and callers that want
to share work across runs can pass the same instances explicitly.

The minification cache is keyed by an MD5 digest of the pre-minification
bundle text. MD5 is fast but not collision resistant: two different bundles
hashing to the same digest would share one minified result. Bundle text is
produced from files on disk that the operator controls, so accidental
collisions are the only realistic case and their probability is negligible.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from threading import Lock


def content_hash(text: str) -> str:
    """Return the hex digest used to key minified bundle text.

    Args:
        text: Pre-minification bundle contents.

    Returns:
        str: MD5 hex digest of the UTF-8 encoded text.
    """

    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


@dataclass(frozen=True, slots=True)
class CacheInfo:
    """Describe cache usage for reporting.

    Attributes:
        current_size: Number of cached entries currently stored.
        hits: Number of lookups satisfied from the cache.
        misses: Number of lookups that required fresh work.
    """

    current_size: int
    hits: int
    misses: int


class ReadCache:
    """Map resolved module paths to their raw contents for one run.

    Keys are resolved file paths rather than logical module names, so two
    locales that resolve the same name to different files never share an
    entry.
    """

    def __init__(self, reader: Callable[[Path], str] | None = None) -> None:
        self._reader = reader or _read_utf8
        self._store: dict[Path, str] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def read(self, path: Path) -> str:
        """Return the contents of ``path``, reading it at most once per run.

        Args:
            path: Resolved module file path.

        Returns:
            str: Raw file contents.

        Raises:
            OSError: If the file is absent or unreadable. Failures are not cached.
        """

        with self._lock:
            cached = self._store.get(path)
            if cached is not None:
                self._hits += 1
                return cached
        contents = self._reader(path)
        with self._lock:
            self._store[path] = contents
            self._misses += 1
        return contents

    def __contains__(self, path: object) -> bool:
        return path in self._store

    def __len__(self) -> int:
        return len(self._store)

    def cache_info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(current_size=len(self._store), hits=self._hits, misses=self._misses)


class MinifyCache:
    """Map content hashes of bundle text to minified output.

    A ``None`` value records a minification that failed. It is still a cache
    hit, so a known-bad input is never retried within the run.
    """

    def __init__(self) -> None:
        self._store: dict[str, str | None] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0

    def lookup(self, source: str) -> tuple[bool, str | None]:
        """Return whether ``source`` was minified before, and the stored result.

        A cached failure yields ``(True, None)`` while an unknown input yields
        ``(False, None)``.
        """

        key = content_hash(source)
        with self._lock:
            if key in self._store:
                self._hits += 1
                return True, self._store[key]
            self._misses += 1
            return False, None

    def store(self, source: str, minified: str | None) -> None:
        with self._lock:
            self._store[content_hash(source)] = minified

    def get_or_compute(self, source: str, compute: Callable[[str], str | None]) -> str | None:
        """Return the cached minification of ``source`` or compute and store it.

        Args:
            source: Pre-minification bundle text.
            compute: Callable producing the minified text, ``None`` on failure.

        Returns:
            str | None: Minified text, or ``None`` when minification failed.
        """

        found, cached = self.lookup(source)
        if found:
            return cached
        result = compute(source)
        self.store(source, result)
        return result

    def __contains__(self, source: object) -> bool:
        return isinstance(source, str) and content_hash(source) in self._store

    def __len__(self) -> int:
        return len(self._store)

    def cache_info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(current_size=len(self._store), hits=self._hits, misses=self._misses)


def _read_utf8(path: Path) -> str:
    # newline="" keeps CRLF sequences intact.
    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


__all__ = ["CacheInfo", "MinifyCache", "ReadCache", "content_hash"]
