"""Drive a set of accumulators over a stream of values."""

from typing import Iterable, Iterator, List, Optional, Sequence

import structlog

from .accumulators.base import Accumulator
from .accumulators.extremes import Max, Min
from .accumulators.mean import Mean
from .accumulators.percentile import Percentile
from .accumulators.stddev import StdDev

logger = structlog.get_logger()

# Percentile ranks reported when none are configured.
DEFAULT_PERCENTILES = (90.0, 95.0)


def default_accumulators(
    percentiles: Optional[Sequence[float]] = None,
) -> List[Accumulator]:
    """Return the standard accumulators in report order.

    Min, Max, Mean and StdDev come first, followed by one Percentile per rank
    in *percentiles* (90 and 95 when omitted).
    """
    if percentiles is None:
        percentiles = DEFAULT_PERCENTILES
    accumulators: List[Accumulator] = [Min(), Max(), Mean(), StdDev()]
    accumulators.extend(Percentile(rank) for rank in percentiles)
    return accumulators


class AccumulatorSet:
    """Ordered collection of accumulators fed from the same input.

    The set owns its accumulators for the lifetime of a run.  Labels need
    not be unique.  Used as a context manager, the accumulators are dropped
    on exit, whether the run finished or failed.
    """

    def __init__(self, accumulators: Iterable[Accumulator]) -> None:
        self._accumulators: List[Accumulator] = list(accumulators)
        self.count = 0

    def update(self, value: float) -> None:
        """Feed *value* to every accumulator, in order."""
        for accumulator in self._accumulators:
            accumulator.update(value)
        self.count += 1

    def labels(self) -> List[str]:
        return [accumulator.label() for accumulator in self._accumulators]

    def __iter__(self) -> Iterator[Accumulator]:
        return iter(self._accumulators)

    def __len__(self) -> int:
        return len(self._accumulators)

    def __enter__(self) -> "AccumulatorSet":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._accumulators.clear()


def run(values: Iterable[float], accumulators: AccumulatorSet) -> AccumulatorSet:
    """Broadcast every value of *values* to *accumulators* and return the set.

    Errors raised while pulling the next value (InvalidInputError from the
    reader) propagate unchanged; the failing value never reaches any
    accumulator.
    """
    logger.debug("run_started", accumulators=accumulators.labels())
    for value in values:
        accumulators.update(value)
    logger.debug("run_finished", values=accumulators.count)
    return accumulators
