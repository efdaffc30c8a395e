# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command generating RequireJS bundles."""

from __future__ import annotations

from pathlib import Path

import typer

from ....core.config.constants import DEFAULT_CONFIG_FILENAME
from ...core.shared import CLIError, build_cli_logger
from .models import (
    COLOR_OPTION,
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    GLOB_OPTION,
    MINIFY_OPTION,
    ROOT_OPTION,
    build_bundle_options,
)
from .services import emit_summary, execute_bundle


def bundle_command(
    config: CONFIG_OPTION = Path(DEFAULT_CONFIG_FILENAME),
    glob: GLOB_OPTION = None,
    minify: MINIFY_OPTION = False,
    root: ROOT_OPTION = None,
    debug: DEBUG_OPTION = False,
    emoji: EMOJI_OPTION = True,
    color: COLOR_OPTION = True,
) -> None:
    """Execute the bundle command.

    Args:
        config: Bundling configuration path.
        glob: Optional locale glob pattern override.
        minify: Flag forcing minification.
        root: Optional Magento root directory.
        debug: Flag enabling debug output.
        emoji: Flag controlling emoji usage.
        color: Flag controlling ANSI colour output.

    Raises:
        typer.Exit: When configuration or locale discovery fails.
    """

    options = build_bundle_options(
        config=config,
        glob=glob,
        minify=minify,
        root=root,
        debug=debug,
        emoji=emoji,
        color=color,
    )
    logger = build_cli_logger(emoji=options.use_emoji, debug=options.debug, no_color=not options.use_color)
    try:
        report = execute_bundle(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    emit_summary(report, logger=logger)


__all__ = ["bundle_command"]
