"""Ranking of candidate functions by edit distance to the query."""

from typing import Iterable
from typing import Iterator
from typing import List

from .function_record import FunctionRecord
from .function_record import RankedResult
from .function_record import canonicalize

# 截断启发式：索引超过 TRUNCATE_AFTER_INDEX 且距离超过 TRUNCATE_DISTANCE 时停止
TRUNCATE_AFTER_INDEX = 10
TRUNCATE_DISTANCE = 30


def edit_distance(s1: str, s2: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    if len(s1) < len(s2):
        return edit_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def rank(records: Iterable[FunctionRecord], pattern: str) -> List[RankedResult]:
    """Score every record against ``pattern``, closest first.

    The pattern is compared as a plain string with each record's canonical
    signature; callers pass the canonical form of a parsed query.

    ``sorted`` is stable, so records at equal distance keep their input
    order (file discovery order, then extraction order within a file).
    """
    scored = [
        RankedResult(
            record=record, distance=edit_distance(pattern, canonicalize(record))
        )
        for record in records
    ]
    return sorted(scored, key=lambda result: result.distance)


def truncate(results: Iterable[RankedResult]) -> Iterator[RankedResult]:
    """Yield ranked results until the cutoff.

    The entry that triggers the cutoff is itself yielded.
    """
    for i, result in enumerate(results):
        yield result

        if i > TRUNCATE_AFTER_INDEX and result.distance > TRUNCATE_DISTANCE:
            break
