"""Render accumulator results as ``label = value`` lines."""

from typing import Iterable, List

from .accumulators.base import Accumulator


def format_value(value: float, precision: int = 6) -> str:
    """Format *value* with *precision* significant digits (``nan`` for NaN)."""
    return f"{value:.{precision}g}"


def format_report(accumulators: Iterable[Accumulator], precision: int = 6) -> List[str]:
    """Return one ``<label> = <result>`` line per accumulator, in order."""
    return [
        f"{accumulator.label()} = {format_value(accumulator.result(), precision)}"
        for accumulator in accumulators
    ]
