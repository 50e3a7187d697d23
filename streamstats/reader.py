"""Parse whitespace-separated decimal tokens from a text stream into floats."""

import math
import re
from typing import Iterator, TextIO

import structlog

from .errors import InvalidInputError

logger = structlog.get_logger()

# Plain decimal notation only; float() alone would also accept "1_000",
# "inf" and "nan".
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_token(token: str, position: int) -> float:
    """Return *token* as a finite float, or raise InvalidInputError.

    Tokens outside plain decimal notation are rejected, as are tokens whose
    magnitude overflows a double.  *position* is the 1-based index of the
    token in the stream and is only used for the error.
    """
    if not _NUMBER_RE.fullmatch(token):
        raise InvalidInputError(token, position)
    value = float(token)
    if math.isinf(value):
        raise InvalidInputError(token, position)
    return value


def iter_values(stream: TextIO) -> Iterator[float]:
    """Yield one float per whitespace-separated token of *stream*.

    The stream is consumed line by line, so values become available as soon
    as their line is read.  Iteration stops at end of stream; a malformed
    token raises InvalidInputError and nothing after it is read.
    """
    position = 0
    for line in stream:
        for token in line.split():
            position += 1
            try:
                yield parse_token(token, position)
            except InvalidInputError:
                logger.debug("invalid_input", token=token, position=position)
                raise
