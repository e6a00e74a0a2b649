# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Runtime tunables for secret recovery.

Defaults use per-term truncating division. Every value can be overridden through
an environment variable so batch jobs can switch modes without code changes.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .interpolation import DivisionMode


def _load_division(name: str, default: DivisionMode) -> DivisionMode:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return DivisionMode(value.strip().lower())
    except ValueError:
        return default


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds runtime defaults for the recovery pipeline."""

    division: DivisionMode = DivisionMode.TRUNCATE
    max_workers: int = 1
    log_level: str = "WARNING"


def load_policy() -> RecoveryPolicy:
    """Load the policy considering environment overrides."""

    return RecoveryPolicy(
        division=_load_division("SECRET_RECOVERY_DIVISION", DivisionMode.TRUNCATE),
        max_workers=max(1, _load_int("SECRET_RECOVERY_WORKERS", 1)),
        log_level=_load_level("SECRET_RECOVERY_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "policy", "load_policy"]
