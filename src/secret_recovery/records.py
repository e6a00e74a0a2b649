# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Share records: loading, validation and constant-term recovery.

A record looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Share indices are sparse. Indices ``1..n`` are scanned in ascending order and
the first ``k`` present shares are interpolated.
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Union

from .bigint import to_decimal
from .codec import decode, parse_decimal
from .errors import (
    InsufficientSharesError,
    InvalidThresholdError,
    MalformedRecordError,
    MissingSourceError,
)
from .interpolation import DivisionMode, interpolate
from .policy import policy

__all__ = [
    "Point",
    "RawShare",
    "TestCase",
    "load_record",
    "parse_test_case",
    "decode_points",
    "select_points",
    "find_constant_term",
]

_logger = logging.getLogger(__name__)

_SHARE_INDEX = re.compile(r"[1-9][0-9]*")


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class RawShare:
    base: str
    value: str


@dataclass(frozen=True)
class TestCase:
    """A parsed record: declared share count, threshold and raw shares."""

    __test__ = False  # keep pytest from collecting this class

    n: int
    k: int
    shares: Mapping[int, RawShare] = field(default_factory=dict)


def load_record(path: Union[str, "os.PathLike[str]"]) -> Dict[str, Any]:
    """Read a JSON record from ``path``."""
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as exc:
        raise MissingSourceError(path, exc.strerror or str(exc)) from exc
    try:
        return json.loads(data)
    except ValueError as exc:  # JSONDecodeError, UnicodeDecodeError, oversized numbers
        raise MalformedRecordError(f"Invalid JSON in {os.fspath(path)}: {exc}") from exc


def _read_count(keys: Mapping[str, Any], name: str) -> int:
    if name not in keys:
        raise MalformedRecordError(f"Missing '{name}' in 'keys'", field=name)
    value = keys[name]
    if isinstance(value, bool):
        raise MalformedRecordError(f"'{name}' must be an integer, got {value!r}", field=name)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        parsed = parse_decimal(value)
        if parsed is not None:
            return parsed
    raise MalformedRecordError(f"'{name}' must be an integer, got {value!r}", field=name)


def _read_share(index: str, entry: Any) -> RawShare:
    if not isinstance(entry, Mapping):
        raise MalformedRecordError(f"Share {index} must be an object", field=index)
    base = entry.get("base")
    value = entry.get("value")
    if isinstance(base, int) and not isinstance(base, bool):
        base = to_decimal(base)
    if not isinstance(base, str):
        raise MalformedRecordError(f"Share {index} has no string 'base'", field=index)
    if not isinstance(value, str):
        raise MalformedRecordError(f"Share {index} has no string 'value'", field=index)
    return RawShare(base=base, value=value)


def parse_test_case(record: Any) -> TestCase:
    """Validate the shape of ``record`` and return a :class:`TestCase`."""
    if not isinstance(record, Mapping):
        raise MalformedRecordError("Record must be a JSON object")
    keys = record.get("keys")
    if not isinstance(keys, Mapping):
        raise MalformedRecordError("Record has no 'keys' object", field="keys")
    n = _read_count(keys, "n")
    k = _read_count(keys, "k")

    shares: Dict[int, RawShare] = {}
    ignored: List[str] = []
    for name, entry in record.items():
        if not (isinstance(name, str) and _SHARE_INDEX.fullmatch(name)):
            continue
        index = parse_decimal(name)
        if index > n:
            ignored.append(name)
            continue
        shares[index] = _read_share(name, entry)
    if ignored:
        _logger.debug("Ignoring shares outside 1..%s: %s", to_decimal(n), ", ".join(ignored))
    return TestCase(n=n, k=k, shares=shares)


def decode_points(case: TestCase) -> List[Point]:
    """Decode present shares with index ``1..n`` in ascending x order."""
    points: List[Point] = []
    for x in sorted(case.shares):
        if not 1 <= x <= case.n:
            continue
        share = case.shares[x]
        points.append(Point(x, decode(share.base, share.value)))
    return points


def select_points(points: List[Point], k: int) -> List[Point]:
    if len(points) < k:
        raise InsufficientSharesError(required=k, available=len(points))
    return points[:k]


def find_constant_term(
    record: Union[Mapping[str, Any], TestCase],
    *,
    division: Optional[Union[DivisionMode, str]] = None,
) -> int:
    """Recover the secret f(0) encoded by ``record``.

    Raises one of the :mod:`secret_recovery.errors` types when the record is
    malformed, a value cannot be decoded, ``k`` exceeds ``n`` or fewer than
    ``k`` shares are present.
    """
    case = record if isinstance(record, TestCase) else parse_test_case(record)
    if case.k > case.n or case.k < 1:
        raise InvalidThresholdError(case.n, case.k)

    points = decode_points(case)
    selected = select_points(points, case.k)
    _logger.debug("Using shares %s of %d decoded", [p.x for p in selected], len(points))
    return interpolate(selected, division if division is not None else policy.division)
