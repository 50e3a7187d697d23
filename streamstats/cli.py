"""CLI entry point: reads numbers from stdin, reports statistics to stdout."""

import sys

from .config import load_config
from .engine import AccumulatorSet, default_accumulators, run
from .errors import InvalidInputError
from .log import configure_logging
from .reader import iter_values
from .report import format_report


def main() -> None:
    configure_logging(load_config().log_level)

    with AccumulatorSet(default_accumulators()) as accumulators:
        try:
            run(iter_values(sys.stdin), accumulators)
        except InvalidInputError:
            print("Invalid input data", file=sys.stderr)
            sys.exit(1)
        for line in format_report(accumulators):
            print(line)
