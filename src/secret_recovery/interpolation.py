# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Lagrange interpolation at x=0 over plain integers.

There is no modulus here: points are expected to lie on a polynomial with
an integral constant term. Two division strategies are available:

``DivisionMode.TRUNCATE``
    Each term ``y_i * num_i / den_i`` is divided on its own, truncating
    toward zero, and the integer terms are summed. This is the
    default.

``DivisionMode.EXACT``
    Terms are summed as fractions and only the total has to be an
    integer, otherwise :class:`NonIntegralSecretError` is raised.

The two agree whenever every term is integral, which holds for points with
consecutive x values taken from an integer-coefficient polynomial.
"""

from __future__ import annotations

import enum
import logging
from fractions import Fraction
from typing import Iterator, Sequence, Tuple

from .errors import NonIntegralSecretError

__all__ = [
    "DivisionMode",
    "lagrange_terms",
    "interpolate_truncating",
    "interpolate_exact",
    "interpolate",
]

_logger = logging.getLogger(__name__)

PointLike = Tuple[int, int]


class DivisionMode(str, enum.Enum):
    TRUNCATE = "truncate"
    EXACT = "exact"


def _trunc_div(num: int, den: int) -> int:
    # Python's // floors; shares use truncation toward zero.
    q = abs(num) // abs(den)
    return q if (num < 0) == (den < 0) else -q


def lagrange_terms(points: Sequence[PointLike]) -> Iterator[tuple[int, int]]:
    """Yield ``(numerator, denominator)`` of each Lagrange term at x=0."""
    for i, (xi, yi) in enumerate(points):
        num = yi
        den = 1
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            num *= -xj
            den *= xi - xj
        yield num, den


def interpolate_truncating(points: Sequence[PointLike]) -> int:
    """Sum of per-term truncated quotients."""
    return sum(_trunc_div(num, den) for num, den in lagrange_terms(points))


def interpolate_exact(points: Sequence[PointLike]) -> int:
    total = sum((Fraction(num, den) for num, den in lagrange_terms(points)), Fraction(0))
    if total.denominator != 1:
        raise NonIntegralSecretError(total)
    return total.numerator


def interpolate(
    points: Sequence[PointLike],
    division: DivisionMode | str = DivisionMode.TRUNCATE,
) -> int:
    """Return f(0) for the polynomial through ``points``.

    ``points`` must hold at least one pair and have pairwise-distinct x
    values; neither is checked here. A repeated x raises ``ZeroDivisionError``.
    """
    mode = DivisionMode(division)
    _logger.debug("Interpolating %d points (%s division)", len(points), mode.value)
    if mode is DivisionMode.EXACT:
        return interpolate_exact(points)
    return interpolate_truncating(points)
