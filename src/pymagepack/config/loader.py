# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load bundling configuration from magepack style JavaScript or JSON files."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from ..core.javascript.literal import LiteralSyntaxError, parse_literal
from .models import BundlingConfig, ConfigError


def load_bundling_config(path: Path) -> BundlingConfig:
    """Read and validate the bundling configuration stored at ``path``.

    Two layouts are accepted: a ``module.exports = <literal>;`` file as
    written by magepack, and a plain JSON document.

    Args:
        path: Location of the configuration file.

    Returns:
        BundlingConfig: Validated, ordered bundle specifications.

    Raises:
        ConfigError: If the file is unreadable, malformed, or fails validation.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read bundling config {path}: {exc}") from exc
    return parse_bundling_config(text, source=str(path))


def parse_bundling_config(text: str, *, source: str = "<string>") -> BundlingConfig:
    """Parse bundling configuration text.

    The payload is a JavaScript literal: bare or quoted keys, single or
    double quoted strings, comments and trailing commas are all accepted,
    optionally wrapped in a CommonJS export. Nothing is evaluated.

    Args:
        text: Configuration source.
        source: Label used in error messages.

    Returns:
        BundlingConfig: Validated configuration.

    Raises:
        ConfigError: If the payload is not a supported literal or fails validation.
    """

    try:
        data = parse_literal(text, allow_export=True)
    except LiteralSyntaxError as exc:
        raise ConfigError(f"{source}: invalid bundling config at line {exc.lineno}: {exc.msg}") from exc
    try:
        return BundlingConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{source}: {exc}") from exc


__all__ = ["load_bundling_config", "parse_bundling_config"]
