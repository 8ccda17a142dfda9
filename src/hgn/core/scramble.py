"""Seed offset applied to each digit before it is mapped to a symbol."""

from .digits import BASE


def scramble(digit: int, seed: int) -> int:
    return (digit + seed) % BASE


def unscramble(scrambled: int, seed: int) -> int:
    return (scrambled - seed + BASE) % BASE
