"""streamstats-specific exceptions."""


class InvalidInputError(ValueError):
    """Raised when an input token cannot be parsed as a number.

    The run is aborted: callers should print a diagnostic and exit non-zero
    without reporting any statistics.
    """

    def __init__(self, token: str, position: int) -> None:
        super().__init__(f"invalid token {token!r} at position {position}")
        self.token = token
        self.position = position
