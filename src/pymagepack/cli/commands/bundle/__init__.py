# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Bundle CLI command package."""

from __future__ import annotations

import typer

from .command import bundle_command

__all__ = ["register"]


def register(app: typer.Typer) -> None:
    """Attach the ``bundle`` command to ``app``.

    Args:
        app: Typer application receiving the command.
    """

    app.command(name="bundle", help="Generate bundles for every deployed locale.")(bundle_command)
