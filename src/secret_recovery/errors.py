# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Error types raised while recovering a secret from a share record."""

from __future__ import annotations

from fractions import Fraction
from os import PathLike

from .bigint import to_decimal

__all__ = [
    "RecoveryError",
    "MissingSourceError",
    "MalformedRecordError",
    "DecodeError",
    "InvalidThresholdError",
    "InsufficientSharesError",
    "NonIntegralSecretError",
]


class RecoveryError(Exception):
    """Base class for every failure a single test case can report."""

    kind = "recovery"


class MissingSourceError(RecoveryError):
    kind = "missing-source"

    def __init__(self, path: str | PathLike[str], reason: str = "") -> None:
        self.path = str(path)
        self.reason = reason
        message = f"Cannot read record {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedRecordError(RecoveryError):
    kind = "malformed-record"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class DecodeError(RecoveryError):
    """A share value is not representable in its stated base."""

    kind = "decode"

    def __init__(self, value: object, base: object, reason: str) -> None:
        self.value = value
        self.base = base
        self.reason = reason
        super().__init__(f"Error decoding value: {value!r} in base {base!r} ({reason})")


class InvalidThresholdError(RecoveryError):
    kind = "invalid-threshold"

    def __init__(self, n: int, k: int) -> None:
        self.n = n
        self.k = k
        if k > n:
            message = f"Invalid input: k={to_decimal(k)} cannot be greater than n={to_decimal(n)}"
        else:
            message = f"Invalid input: n={to_decimal(n)} and k={to_decimal(k)} must both be at least 1"
        super().__init__(message)


class InsufficientSharesError(RecoveryError):
    kind = "insufficient-shares"

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Not enough points provided: need {to_decimal(required)}, got {available}")


class NonIntegralSecretError(RecoveryError):
    """Exact interpolation produced a constant term that is not an integer.

    Only raised in exact division mode; it means the selected shares do not
    lie on a single polynomial with an integral constant term.
    """

    kind = "non-integral"

    def __init__(self, value: Fraction) -> None:
        self.value = value
        shown = f"{to_decimal(value.numerator)}/{to_decimal(value.denominator)}"
        super().__init__(f"Interpolated constant term {shown} is not an integer")
