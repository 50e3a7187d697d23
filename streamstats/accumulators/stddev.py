"""Population standard deviation accumulator."""

import math
from typing import List

from .base import Accumulator
from .mean import Mean


class StdDev(Accumulator):
    """Population standard deviation (divisor n) over the retained history.

    Every value is kept and the deviation is recomputed in two passes on each
    ``result`` call: one ``Mean`` for the centre, a second ``Mean`` over the
    squared deviations.
    """

    def __init__(self) -> None:
        self._values: List[float] = []

    def update(self, value: float) -> None:
        self._values.append(value)

    def result(self) -> float:
        if not self._values:
            return math.nan
        centre = Mean()
        for value in self._values:
            centre.update(value)
        mean = centre.result()
        spread = Mean()
        for value in self._values:
            spread.update((value - mean) ** 2)
        return math.sqrt(spread.result())

    def label(self) -> str:
        return "std"
