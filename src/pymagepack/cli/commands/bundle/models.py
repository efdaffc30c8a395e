# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Data structures for the bundle CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ....core.config.constants import DEFAULT_CONFIG_FILENAME

CONFIG_OPTION = Annotated[
    Path,
    typer.Option(
        "--config",
        "-c",
        help="Bundling configuration file ('module.exports = [...]' as written by magepack, or JSON).",
    ),
]
GLOB_OPTION = Annotated[
    str | None,
    typer.Option(
        "--glob",
        "-g",
        help="Glob pattern of deployed locale directories, relative to --root.",
        show_default=False,
    ),
]
MINIFY_OPTION = Annotated[
    bool,
    typer.Option(
        "--minify",
        "-m",
        help="Minify bundles even when the deployed locales are not minified.",
    ),
]
ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Magento installation root. Defaults to the working directory.",
        show_default=False,
    ),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print per-module debug output."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
COLOR_OPTION = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Toggle ANSI colour output."),
]


@dataclass(slots=True)
class BundleCLIOptions:
    """Normalised CLI inputs for the bundle workflow."""

    config: Path
    glob: str | None
    force_minify: bool
    root: Path
    debug: bool
    use_emoji: bool
    use_color: bool = True


def build_bundle_options(
    config: Path = Path(DEFAULT_CONFIG_FILENAME),
    glob: str | None = None,
    minify: bool = False,
    root: Path | None = None,
    debug: bool = False,
    emoji: bool = True,
    color: bool = True,
) -> BundleCLIOptions:
    """Construct ``BundleCLIOptions`` from Typer parameters.

    Args:
        config: Bundling configuration path.
        glob: Optional locale glob pattern override.
        minify: Flag forcing minification.
        root: Optional Magento root directory.
        debug: Flag enabling debug output.
        emoji: Flag controlling emoji usage in CLI output.
        color: Flag controlling ANSI colour in CLI output.

    Returns:
        BundleCLIOptions: Structured CLI options.
    """

    return BundleCLIOptions(
        config=config,
        glob=glob,
        force_minify=minify,
        root=(root or Path.cwd()).expanduser().resolve(),
        debug=debug,
        use_emoji=emoji,
        use_color=color,
    )


__all__ = [
    "BundleCLIOptions",
    "COLOR_OPTION",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "GLOB_OPTION",
    "MINIFY_OPTION",
    "ROOT_OPTION",
    "build_bundle_options",
]
