"""Arithmetic mean accumulator."""

import math

from .base import Accumulator


class Mean(Accumulator):
    """Running sum and count; NaN until the first update."""

    def __init__(self) -> None:
        self._sum = 0.0
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def update(self, value: float) -> None:
        self._sum += value
        self._count += 1

    def result(self) -> float:
        if self._count == 0:
            return math.nan
        return self._sum / self._count

    def label(self) -> str:
        return "mean"
