# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the bundling pipeline."""

from __future__ import annotations

import os
import shlex
from collections.abc import Iterator, Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator, model_validator

from ..core.config.constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_LOCALES_PATTERN,
    LOCALES_ENV_VAR,
    RESERVED_NAMES,
    TERSER_ENV_VAR,
)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class BundleSpec(BaseModel):
    """Describe one bundle: its name and the ordered modules it packs.

    ``modules`` maps a logical module name to the source descriptor handed to
    the path resolver. Mapping order is the concatenation order of the bundle.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    modules: dict[str, str] = Field(default_factory=dict)


class BundlingConfig(RootModel[list[BundleSpec]]):
    """Ordered sequence of bundle specifications."""

    @model_validator(mode="after")
    def _check_unique_names(self) -> BundlingConfig:
        seen: set[str] = set()
        for bundle in self.root:
            if bundle.name in seen:
                raise ValueError(f"duplicate bundle name '{bundle.name}'")
            seen.add(bundle.name)
        return self

    def __iter__(self) -> Iterator[BundleSpec]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    @property
    def names(self) -> list[str]:
        """Return bundle names in declaration order."""

        return [bundle.name for bundle in self.root]


class MinifyOptions(BaseModel):
    """Settings for the external minifier.

    Attributes:
        command: Executable plus leading arguments used to launch terser.
        reserved: Identifiers that must survive name mangling.
        timeout: Optional per-bundle timeout in seconds.
    """

    model_config = ConfigDict(validate_assignment=True)

    command: list[str] = Field(default_factory=lambda: ["terser"])
    reserved: tuple[str, ...] = RESERVED_NAMES
    timeout: float | None = None

    @field_validator("command")
    @classmethod
    def _require_executable(cls, value: list[str]) -> list[str]:
        if not value or not value[0]:
            raise ValueError("minifier command must name an executable")
        return value


class BundleOptions(BaseModel):
    """Run-wide options for one invocation of the bundler."""

    model_config = ConfigDict(validate_assignment=True)

    config_path: Path = Path(DEFAULT_CONFIG_FILENAME)
    locales_pattern: str = DEFAULT_LOCALES_PATTERN
    root: Path = Field(default_factory=Path.cwd)
    force_minify: bool = False
    minify: MinifyOptions = Field(default_factory=MinifyOptions)

    @property
    def resolved_config_path(self) -> Path:
        """Return ``config_path`` anchored at ``root`` when relative."""

        path = self.config_path.expanduser()
        return path if path.is_absolute() else (self.root / path).resolve()


def resolve_bundle_options(
    *,
    config_path: Path | None = None,
    locales_pattern: str | None = None,
    root: Path | None = None,
    force_minify: bool = False,
    env: Mapping[str, str] | None = None,
) -> BundleOptions:
    """Return bundle options honouring explicit values, then environment overrides.

    Args:
        config_path: Bundling configuration path; relative paths resolve against ``root``.
        locales_pattern: Glob pattern used for locale discovery.
        root: Magento installation root. Defaults to the working directory.
        force_minify: Minify even when the deployed locales are not minified.
        env: Optional environment mapping used instead of :mod:`os.environ`.

    Returns:
        BundleOptions: Effective options for the run.

    Raises:
        ConfigError: If an environment override is malformed.
    """

    environment = os.environ if env is None else env
    options = BundleOptions(force_minify=force_minify)
    if root is not None:
        options.root = root.expanduser().resolve()
    if config_path is not None:
        options.config_path = config_path

    if locales_pattern:
        options.locales_pattern = locales_pattern
    elif environment.get(LOCALES_ENV_VAR):
        options.locales_pattern = environment[LOCALES_ENV_VAR]

    terser_override = environment.get(TERSER_ENV_VAR, "").strip()
    if terser_override:
        try:
            command = shlex.split(terser_override)
        except ValueError as exc:
            raise ConfigError(f"Invalid {TERSER_ENV_VAR} value {terser_override!r}: {exc}") from exc
        options.minify = MinifyOptions(command=command)
    return options


__all__ = [
    "BundleOptions",
    "BundleSpec",
    "BundlingConfig",
    "ConfigError",
    "MinifyOptions",
    "resolve_bundle_options",
]
