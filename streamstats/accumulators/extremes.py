"""Min and Max accumulators.

Both start from a sentinel (the largest / most negative finite double) and
report it unchanged when no value was ever seen.
"""

import sys

from .base import Accumulator


class Min(Accumulator):
    def __init__(self) -> None:
        self._min = sys.float_info.max

    def update(self, value: float) -> None:
        if value < self._min:
            self._min = value

    def result(self) -> float:
        return self._min

    def label(self) -> str:
        return "min"


class Max(Accumulator):
    def __init__(self) -> None:
        self._max = -sys.float_info.max

    def update(self, value: float) -> None:
        if value > self._max:
            self._max = value

    def result(self) -> float:
        return self._max

    def label(self) -> str:
        return "max"
