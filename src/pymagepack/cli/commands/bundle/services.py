# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services for the bundle CLI."""

from __future__ import annotations

from collections.abc import Mapping

from ....bundle import BundlingReport, NoLocalesFoundError, run_bundling
from ....config import ConfigError, resolve_bundle_options
from ....core.logging import ConsoleLogger
from ...core.shared import CLIError
from .models import BundleCLIOptions


def execute_bundle(
    options: BundleCLIOptions,
    *,
    logger: ConsoleLogger,
    env: Mapping[str, str] | None = None,
) -> BundlingReport:
    """Run the bundling pipeline for the CLI.

    Args:
        options: Structured CLI options.
        logger: Logger receiving progress output.
        env: Optional environment mapping for overrides.

    Returns:
        BundlingReport: Results of the run.

    Raises:
        CLIError: If configuration loading or locale discovery fails.
    """

    try:
        bundle_options = resolve_bundle_options(
            config_path=options.config,
            locales_pattern=options.glob,
            root=options.root,
            force_minify=options.force_minify,
            env=env,
        )
        return run_bundling(bundle_options, logger=logger)
    except (ConfigError, NoLocalesFoundError) as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc), exit_code=1) from exc


def emit_summary(report: BundlingReport, *, logger: ConsoleLogger) -> None:
    """Log a one-line summary of ``report``.

    Args:
        report: Results of the bundling run.
        logger: Logger used to emit the summary.
    """

    locales = len({result.locale for result in report.results})
    message = f"Bundled {len(report.results)} bundle(s) across {locales} locale(s)."
    if report.skipped_modules:
        logger.warn(f"{message} {report.skipped_modules} module(s) could not be found.")
        return
    logger.ok(message)


__all__ = ["emit_summary", "execute_bundle"]
