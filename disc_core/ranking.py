from __future__ import annotations
from typing import Mapping, Optional
from .types import CANONICAL_ORDER, Dimension, RankedEntry, RankedResult


def _sort_key(entry: RankedEntry) -> tuple[int, int, int]:
    # higher score, then more 4/5 answers, then D before I before S before C
    return (-entry.score, -entry.tiebreak, entry.dim.canonical_index)


def rank(scores: Mapping[Dimension, int], high_counts: Optional[Mapping[Dimension, int]] = None) -> RankedResult:
    """Total order over the four dimensions, highest first.

    Forced-choice callers pass no high counts, so that tier is always equal.
    """
    highs = high_counts or {}
    if set(scores) != set(CANONICAL_ORDER):
        raise ValueError("score vector must hold exactly D, I, S and C")
    entries = [RankedEntry(dim=d, score=int(scores[d]), tiebreak=int(highs.get(d, 0))) for d in CANONICAL_ORDER]
    return tuple(sorted(entries, key=_sort_key))
