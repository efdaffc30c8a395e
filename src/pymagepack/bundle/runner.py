# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Entry point tying configuration, locale discovery and the pipeline together."""

from __future__ import annotations

from ..config import BundleOptions, load_bundling_config
from ..core.logging import build_logger
from ..interfaces.bundling import BundleLogger, Minifier
from .locales import discover_locales, is_minify_enabled
from .minify import TerserMinifier
from .pipeline import BundlingPipeline, BundlingReport


def run_bundling(
    options: BundleOptions,
    *,
    logger: BundleLogger | None = None,
    minifier: Minifier | None = None,
) -> BundlingReport:
    """Build bundles for every deployed locale described by ``options``.

    Args:
        options: Run-wide options.
        logger: Destination for progress output. Defaults to a console logger.
        minifier: Minifier override. Defaults to terser configured from
            ``options.minify``.

    Returns:
        BundlingReport: Results for every (locale, bundle) pair.

    Raises:
        ConfigError: If the bundling configuration cannot be loaded.
        NoLocalesFoundError: If no deployed locale matches the pattern.
        OSError: If writing outputs fails.
    """

    log = logger or build_logger()
    config_path = options.resolved_config_path
    log.info(f'Using bundling config from "{config_path}".')
    config = load_bundling_config(config_path)
    log.debug(f"Loaded {len(config)} bundle(s): {', '.join(config.names)}.")

    locales = discover_locales(options.locales_pattern, root=options.root)
    minify_on = is_minify_enabled(locales)

    pipeline = BundlingPipeline(
        config,
        locales,
        minify_on=minify_on,
        force_minify=options.force_minify,
        minifier=minifier or TerserMinifier(options.minify),
        logger=log,
    )
    return pipeline.run()


__all__ = ["run_bundling"]
