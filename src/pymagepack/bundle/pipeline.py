# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bundling pipeline: collect, minify and write bundles for every locale.

Work is strictly sequential. Each (locale, bundle) pair goes through three
steps before the next pair starts:

1. collect: resolve, read and wrap every module in declaration order,
   skipping modules whose file cannot be read;
2. minify: only when the run minifies, through the content-addressed cache;
3. write: replace the bundle file and its loader configuration.

Missing modules and minifier errors are reported and tolerated. Failures
while writing outputs propagate and abort the run.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from ..cache import CacheInfo, MinifyCache, ReadCache
from ..config.models import BundleSpec, BundlingConfig
from ..core.logging import build_logger
from ..interfaces.bundling import BundleLogger, Minifier
from .minify import TerserMinifier
from .module_map import ModuleMap
from .paths import get_bundle_config_path, get_bundle_path
from .resolver import ModulePathResolver
from .stringify import render_bundle_config
from .wrapper import wrap_module

ModuleMapLoader = Callable[[Path, bool], ModuleMap]
_SIZE_LABEL_WIDTH = 30


@dataclass(frozen=True, slots=True)
class BundleResult:
    """Describe the artefacts written for one (locale, bundle) pair.

    Attributes:
        locale: Locale root the bundle was built for.
        name: Configured bundle name.
        modules: Module names packed into the bundle, in inclusion order.
        skipped: Declared modules that could not be read.
        bundle_path: Location of the written bundle.
        config_path: Location of the written loader configuration.
        size: Length of the written bundle text in characters.
        minified: Whether the bundle text went through the minifier.
    """

    locale: Path
    name: str
    modules: tuple[str, ...]
    skipped: tuple[str, ...]
    bundle_path: Path
    config_path: Path
    size: int
    minified: bool

    @property
    def size_kb(self) -> int:
        """Return the bundle size in kilobytes, rounded half up."""

        return int(self.size / 1024 + 0.5)


@dataclass(slots=True)
class BundlingReport:
    """Summarise a pipeline run."""

    results: list[BundleResult] = field(default_factory=list)
    read_cache: CacheInfo | None = None
    minify_cache: CacheInfo | None = None

    @property
    def skipped_modules(self) -> int:
        return sum(len(result.skipped) for result in self.results)

    def for_locale(self, locale: Path) -> list[BundleResult]:
        """Return the results produced for ``locale``."""

        return [result for result in self.results if result.locale == locale]


@dataclass(slots=True)
class _CollectedBundle:
    contents: str
    modules: list[str]
    skipped: list[str]


class BundlingPipeline:
    """Build every configured bundle for every locale.

    The read cache and minify cache belong to the pipeline instance. A new
    pipeline starts with empty caches unless callers pass shared ones.
    """

    def __init__(
        self,
        config: BundlingConfig,
        locales: Sequence[Path],
        *,
        minify_on: bool,
        force_minify: bool = False,
        minifier: Minifier | None = None,
        logger: BundleLogger | None = None,
        read_cache: ReadCache | None = None,
        minify_cache: MinifyCache | None = None,
        module_map_loader: ModuleMapLoader = ModuleMap.load,
    ) -> None:
        """Initialise the pipeline.

        Args:
            config: Ordered bundle specifications.
            locales: Locale roots to bundle, processed in order.
            minify_on: Whether the deployed locales serve minified assets. It
                selects ``.min.js`` paths and enables minification.
            force_minify: Minify even when ``minify_on`` is false.
            minifier: Minifier used for bundle text. Defaults to terser.
            logger: Destination for progress and diagnostics.
            read_cache: Module contents cache; a fresh one when omitted.
            minify_cache: Minified output cache; a fresh one when omitted.
            module_map_loader: Loads the module map of a locale.
        """

        self._config = config
        self._locales = tuple(locales)
        self._minify_on = minify_on
        self._force_minify = force_minify
        self._minifier = minifier
        self._logger: BundleLogger = logger or build_logger()
        self._read_cache = read_cache if read_cache is not None else ReadCache()
        self._minify_cache = minify_cache if minify_cache is not None else MinifyCache()
        self._module_map_loader = module_map_loader

    @property
    def should_minify(self) -> bool:
        """Return ``True`` when bundle text is minified before writing."""

        return self._minify_on or self._force_minify

    @property
    def read_cache(self) -> ReadCache:
        return self._read_cache

    @property
    def minify_cache(self) -> MinifyCache:
        return self._minify_cache

    @property
    def minifier(self) -> Minifier:
        """Return the minifier, creating the default terser runner on first use."""

        if self._minifier is None:
            self._minifier = TerserMinifier()
        return self._minifier

    def run(self) -> BundlingReport:
        """Bundle every locale and return a report of the written artefacts.

        Returns:
            BundlingReport: Results in (locale, bundle) order plus cache usage.

        Raises:
            OSError: If an output directory or file cannot be written.
        """

        report = BundlingReport()
        for locale in self._locales:
            report.results.extend(self.bundle_locale(locale))
        report.read_cache = self._read_cache.cache_info()
        report.minify_cache = self._minify_cache.cache_info()
        return report

    def bundle_locale(self, locale: Path) -> list[BundleResult]:
        """Build every configured bundle for one locale."""

        self._logger.info(f'Creating bundles for "{locale}".')
        resolver = ModulePathResolver(locale, self._module_map_loader(locale, self._minify_on))
        return [self.build_bundle(locale, bundle, resolver) for bundle in self._config]

    def build_bundle(
        self,
        locale: Path,
        bundle: BundleSpec,
        resolver: ModulePathResolver | None = None,
    ) -> BundleResult:
        """Collect, optionally minify, and write one bundle.

        Args:
            locale: Locale root the bundle is built for.
            bundle: Bundle specification.
            resolver: Module resolver for ``locale``; built on demand when omitted.

        Returns:
            BundleResult: Description of the written artefacts.
        """

        if resolver is None:
            resolver = ModulePathResolver(locale, self._module_map_loader(locale, self._minify_on))
        self._logger.debug(f'Creating bundle "{bundle.name}".')
        collected = self._collect_modules(bundle, resolver)
        contents = collected.contents
        if self.should_minify:
            contents = self._minify(bundle.name, contents)
        return self._write_artifacts(locale, bundle.name, contents, collected)

    def _collect_modules(self, bundle: BundleSpec, resolver: ModulePathResolver) -> _CollectedBundle:
        self._logger.debug(f'Collecting modules for "{bundle.name}".')
        parts: list[str] = []
        modules: list[str] = []
        skipped: list[str] = []
        for module_name, descriptor in bundle.modules.items():
            module_path = resolver.resolve(module_name, descriptor, self._minify_on)
            self._logger.debug(f'Loading module="{module_name}" path={module_path}')
            try:
                raw = self._read_cache.read(module_path)
            except (OSError, UnicodeDecodeError):
                self._logger.debug(f'Module "{module_name}" not found under path={module_path}')
                skipped.append(module_name)
                continue
            parts.append(wrap_module(module_name, raw, str(module_path)))
            parts.append("\n")
            modules.append(module_name)
        self._logger.debug(f'Bundle "{bundle.name}" collected.')
        return _CollectedBundle(contents="".join(parts), modules=modules, skipped=skipped)

    def _minify(self, bundle_name: str, contents: str) -> str:
        self._logger.debug(f'Minifying "{bundle_name}" bundle.')
        minified = self._minify_cache.get_or_compute(contents, partial(self._invoke_minifier, bundle_name))
        self._logger.debug(f'Bundle "{bundle_name}" minified.')
        return minified if minified is not None else ""

    def _invoke_minifier(self, bundle_name: str, contents: str) -> str | None:
        result = self.minifier.minify(contents)
        if result.error:
            self._logger.fail(f'Minification of bundle "{bundle_name}" failed: {result.error}')
        return result.code

    def _write_artifacts(
        self,
        locale: Path,
        bundle_name: str,
        contents: str,
        collected: _CollectedBundle,
    ) -> BundleResult:
        self._logger.debug(f'Writing "{bundle_name}" bundle and configuration to disk.')
        bundle_path = get_bundle_path(locale, bundle_name, self._minify_on)
        config_path = get_bundle_config_path(locale, bundle_name, self._minify_on)

        bundle_path.parent.mkdir(parents=True, exist_ok=True)
        bundle_path.write_text(contents, encoding="utf-8", newline="")
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(render_bundle_config(bundle_name, collected.modules), encoding="utf-8", newline="")

        result = BundleResult(
            locale=locale,
            name=bundle_name,
            modules=tuple(collected.modules),
            skipped=tuple(collected.skipped),
            bundle_path=bundle_path,
            config_path=config_path,
            size=len(contents),
            minified=self.should_minify,
        )
        label = f'Generated bundle "{bundle_name}"'.ljust(_SIZE_LABEL_WIDTH)
        self._logger.ok(f"{label}- {result.size_kb} kB.")
        return result


__all__ = ["BundleResult", "BundlingPipeline", "BundlingReport"]
