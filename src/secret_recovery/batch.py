# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Run many share records independently.

Each record is loaded, solved and reported on its own; a failing record is
captured in its :class:`CaseResult` and never stops the others.
"""

from __future__ import annotations

import concurrent.futures
import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from .errors import RecoveryError
from .interpolation import DivisionMode
from .policy import policy
from .records import find_constant_term, load_record

__all__ = ["CaseResult", "solve_record", "solve_all"]

_logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class CaseResult:
    case_id: int
    source: str
    secret: Optional[int] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def solve_record(
    case_id: int,
    source: Source,
    *,
    division: Optional[Union[DivisionMode, str]] = None,
) -> CaseResult:
    """Load ``source`` and recover its secret, capturing any case failure."""
    name = os.fspath(source)
    try:
        secret = find_constant_term(load_record(source), division=division)
    except (RecoveryError, ZeroDivisionError) as exc:
        _logger.warning("Test case %d (%s) failed: %s", case_id, name, exc)
        return CaseResult(case_id=case_id, source=name, error=exc)
    _logger.info("Test case %d (%s) solved", case_id, name)
    return CaseResult(case_id=case_id, source=name, secret=secret)


def solve_all(
    sources: Iterable[Source],
    *,
    division: Optional[Union[DivisionMode, str]] = None,
    max_workers: Optional[int] = None,
) -> List[CaseResult]:
    """Solve every source; results are ordered by 1-based case id."""
    numbered: Sequence[tuple[int, Source]] = list(enumerate(sources, 1))
    mode = DivisionMode(division) if division is not None else policy.division
    workers = policy.max_workers if max_workers is None else max_workers

    if workers <= 1 or len(numbered) <= 1:
        return [solve_record(case_id, src, division=mode) for case_id, src in numbered]

    results: List[CaseResult] = []
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        futures_map = {
            executor.submit(solve_record, case_id, src, division=mode): case_id
            for case_id, src in numbered
        }
        for future in concurrent.futures.as_completed(futures_map):
            results.append(future.result())
    results.sort(key=lambda r: r.case_id)
    return results
