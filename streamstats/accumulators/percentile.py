"""Nearest-rank percentile accumulator."""

import bisect
import math
from typing import List

from .base import Accumulator


def _clamp_rank(rank: float) -> float:
    rank = float(rank)
    if math.isnan(rank):
        raise ValueError("percentile rank must be a number, got nan")
    return min(max(rank, 0.0), 100.0)


class Percentile(Accumulator):
    """Report the value at rank ``floor(n * rank / 100)`` of the sorted input.

    The rank is clamped to [0, 100] at construction; a NaN rank raises
    ValueError.  Values are kept sorted at all times, so the result is
    always one of the observed values (no interpolation between neighbours).

    Named instances are built by passing the rank::

        p90 = Percentile(90)
        p95 = Percentile(95)
    """

    def __init__(self, rank: float) -> None:
        self._rank = _clamp_rank(rank)
        self._label = f"pct({self._rank:g})"
        self._sorted: List[float] = []

    @property
    def rank(self) -> float:
        return self._rank

    def update(self, value: float) -> None:
        # Insert before any equal elements.
        self._sorted.insert(bisect.bisect_left(self._sorted, value), value)

    def result(self) -> float:
        n = len(self._sorted)
        if n == 0:
            return math.nan
        idx = math.floor(n * self._rank / 100)
        if idx == n:
            idx = n - 1
        return self._sorted[idx]

    def label(self) -> str:
        return self._label
