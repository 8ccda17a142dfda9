"""Error taxonomy for the Hangul number codec.

Every codec failure is raised synchronously to the caller. None of them
are transient, so nothing here is meant to be retried.
"""


class HangulNumberError(Exception):
    """Base class for all codec errors."""


class ConfigurationError(HangulNumberError):
    """The alphabet is not exactly 128 distinct symbols."""


class InvalidArgument(HangulNumberError, ValueError):
    """A value or seed passed to the codec is out of range or of the wrong type."""

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class InvalidSymbol(HangulNumberError, ValueError):
    """A symbol presented to decode is not part of the alphabet."""

    def __init__(self, symbol: str, message: str | None = None):
        super().__init__(message or f"Invalid character: {symbol!r}")
        self.symbol = symbol


class InvalidSeedSymbol(InvalidSymbol):
    """The leading (seed) symbol is not part of the alphabet."""

    def __init__(self, symbol: str):
        super().__init__(symbol, f"Invalid seed character: {symbol!r}")


class InvalidLength(HangulNumberError, ValueError):
    """Decode input has fewer than two symbols."""

    def __init__(self, length: int):
        super().__init__(f"Invalid string: must be at least 2 characters, got {length}")
        self.length = length
