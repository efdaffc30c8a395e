# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared building blocks (logging, subprocess execution, JavaScript scanning)."""
