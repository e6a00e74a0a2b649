# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Digit-string conversions for integers of any size.

CPython refuses ``int(text, base)`` and ``str(value)`` beyond a configurable
digit count when the base is not a power of two. Share values and secrets
are unbounded, so conversions here split the work into chunks that always
stay below that limit.
"""

from __future__ import annotations

import math
import string

__all__ = ["DIGITS", "parse_digits", "render", "to_decimal"]

DIGITS = string.digits + string.ascii_lowercase

# below the smallest digit limit CPython can be configured with
_CHUNK = 512


def parse_digits(body: str, radix: int) -> int:
    """Value of an unsigned, already validated digit string."""
    if len(body) <= _CHUNK:
        return int(body, radix)
    mid = len(body) // 2
    low = body[mid:]
    return parse_digits(body[:mid], radix) * radix ** len(low) + parse_digits(low, radix)


def render(value: int, radix: int, width: int = 0) -> str:
    """Digits of a non-negative ``value``, left-padded with zeros to ``width``."""
    estimate = int(value.bit_length() / math.log2(radix)) + 1
    if estimate > _CHUNK:
        half = estimate // 2
        high, low = divmod(value, radix**half)
        return render(high, radix, max(width - half, 0)) + render(low, radix, half)
    out: list[str] = []
    while value:
        value, rem = divmod(value, radix)
        out.append(DIGITS[rem])
    return "".join(reversed(out)).rjust(width, "0")


def to_decimal(value: int) -> str:
    """``str(value)`` without the interpreter's digit limit."""
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    return sign + render(abs(value), 10)
