# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Recover the constant term of a polynomial from radix-encoded shares."""

from __future__ import annotations

from .batch import CaseResult, solve_all, solve_record
from .bigint import to_decimal
from .codec import decode, encode
from .errors import (
    DecodeError,
    InsufficientSharesError,
    InvalidThresholdError,
    MalformedRecordError,
    MissingSourceError,
    NonIntegralSecretError,
    RecoveryError,
)
from .interpolation import DivisionMode, interpolate, interpolate_exact, interpolate_truncating
from .records import Point, TestCase, find_constant_term, load_record, parse_test_case

__all__ = [
    "CaseResult",
    "DecodeError",
    "DivisionMode",
    "InsufficientSharesError",
    "InvalidThresholdError",
    "MalformedRecordError",
    "MissingSourceError",
    "NonIntegralSecretError",
    "Point",
    "RecoveryError",
    "TestCase",
    "decode",
    "encode",
    "find_constant_term",
    "interpolate",
    "interpolate_exact",
    "interpolate_truncating",
    "load_record",
    "parse_test_case",
    "solve_all",
    "solve_record",
    "to_decimal",
]

__version__ = "0.1.0"
