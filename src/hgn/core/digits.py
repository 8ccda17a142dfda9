"""Base-128 positional decomposition, most significant digit first."""

BASE = 128


def to_digits(n: int) -> list[int]:
    """Split a non-negative integer into base-128 digits.

    Zero is the single digit [0]; otherwise there is no leading zero.
    """
    if n == 0:
        return [0]
    digits = []
    while n:
        n, d = divmod(n, BASE)
        digits.append(d)
    digits.reverse()
    return digits


def from_digits(digits) -> int:
    """Fold base-128 digits (most significant first) back into an integer."""
    value = 0
    for d in digits:
        value = value * BASE + d
    return value
