"""Abstract base class for streaming statistic accumulators."""

from abc import ABC, abstractmethod


class Accumulator(ABC):
    """Base class for all streamstats accumulators.

    Subclasses ingest values one at a time through ``update`` and can report
    their statistic at any point through ``result``.  ``result`` must not
    mutate state: calling it twice without an intervening ``update`` returns
    the same value.
    """

    @abstractmethod
    def update(self, value: float) -> None:
        """Incorporate one value."""

    @abstractmethod
    def result(self) -> float:
        """Return the statistic over every value seen so far."""

    @abstractmethod
    def label(self) -> str:
        """Return the human-readable name used in the report."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.label()}>"
