# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Radix codec for share values.

``decode``
    Turn a digit string written in base 2..36 into an ``int``.

``encode``
    The inverse, used for diagnostics and tests.

Python's own ``int(text, base)`` is more permissive than the share format
(it accepts whitespace, underscores and ``0x``-style prefixes), so digits are
validated before conversion.
"""

from __future__ import annotations

import re

from .bigint import DIGITS, parse_digits, render
from .errors import DecodeError

__all__ = ["MIN_BASE", "MAX_BASE", "DIGITS", "parse_base", "parse_decimal", "decode", "encode"]

MIN_BASE = 2
MAX_BASE = 36

_DIGIT_STRING = re.compile(r"[+-]?[0-9A-Za-z]+")
_DECIMAL_STRING = re.compile(r"[+-]?[0-9]+")


def parse_decimal(text: str) -> int | None:
    """Strict ``[+-]?[0-9]+`` parse of any length; ``None`` if malformed."""
    if not _DECIMAL_STRING.fullmatch(text):
        return None
    value = parse_digits(text.lstrip("+-"), 10)
    return -value if text.startswith("-") else value


def parse_base(base: int | str) -> int:
    """Return ``base`` as an int radix, raising ``DecodeError`` when invalid."""
    if isinstance(base, bool):
        raise DecodeError(None, base, "base must be an integer")
    if isinstance(base, str):
        radix = parse_decimal(base)
        if radix is None:
            raise DecodeError(None, base, "base is not a decimal integer")
    elif isinstance(base, int):
        radix = base
    else:
        raise DecodeError(None, base, "base must be an integer")
    if not MIN_BASE <= radix <= MAX_BASE:
        raise DecodeError(None, base, f"base must be between {MIN_BASE} and {MAX_BASE}")
    return radix


def decode(base: int | str, digits: str) -> int:
    """Decode ``digits`` written in ``base`` into an arbitrary-precision integer."""
    try:
        radix = parse_base(base)
    except DecodeError as exc:
        raise DecodeError(digits, base, exc.reason) from None

    if not isinstance(digits, str) or not _DIGIT_STRING.fullmatch(digits):
        raise DecodeError(digits, base, "malformed digit string")

    body = digits.lstrip("+-").lower()
    for ch in body:
        if DIGITS.index(ch) >= radix:
            raise DecodeError(digits, base, f"digit {ch!r} is not valid in base {radix}")
    value = parse_digits(body, radix)
    return -value if digits.startswith("-") else value


def encode(value: int, base: int) -> str:
    """Render ``value`` in ``base`` using lowercase digits."""
    radix = parse_base(base)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    return sign + render(abs(value), radix)
