"""Seeded base-128 Hangul number codec.

An encoded string is one seed symbol followed by the base-128 digits of
the number, most significant first, each shifted by the seed before being
mapped to a symbol:

    12345 = 96*128 + 57, seed 0  ->  A[0] + A[96] + A[57]  ->  "가크새"

Every seed yields a different string for the same number, and all of them
decode back to it. The seed only obscures; the randomness behind encode()
is random.Random and must not be relied on for secrecy.

Numbers are Python ints, so there is no upper bound on the encoded value.
"""

import random
import unicodedata

import regex

from .alphabet import SIZE, Alphabet, build
from .digits import from_digits, to_digits
from .errors import InvalidArgument, InvalidLength, InvalidSeedSymbol
from .scramble import scramble, unscramble


def _check_number(n):
    # bool is an int subclass but never a meaningful number here
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"Number must be a non-negative integer, got {n!r}", n)
    if n < 0:
        raise InvalidArgument(f"Number must be a non-negative integer, got {n}", n)


def _check_seed(seed):
    if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed < SIZE:
        raise InvalidArgument(f"Seed must be between 0 and {SIZE - 1}, got {seed!r}", seed)


def split_symbols(s: str) -> list[str]:
    """Split an encoded string into symbol units (extended grapheme clusters).

    NFC normalization first, so a syllable written as decomposed jamo
    counts as one unit. A syllable carrying a combining mark stays one
    unit and fails lookup as a whole.
    """
    return regex.findall(r"\X", unicodedata.normalize("NFC", s))


class Codec:
    """Encoder/decoder bound to one alphabet and one random source."""

    def __init__(self, alphabet: Alphabet | None = None, rng: random.Random | None = None):
        self.alphabet = alphabet if alphabet is not None else build()
        self.rng = rng if rng is not None else random.Random()

    def encode_with_seed(self, n: int, seed: int) -> str:
        _check_number(n)
        _check_seed(seed)
        symbol_at = self.alphabet.symbol_at
        data = "".join(symbol_at(scramble(d, seed)) for d in to_digits(n))
        return symbol_at(seed) + data

    def encode(self, n: int) -> str:
        """Encode with a seed drawn uniformly from 0-127."""
        _check_number(n)
        return self.encode_with_seed(n, self.rng.randrange(SIZE))

    def encode_all(self, n: int) -> list[str]:
        """All 128 encodings of n, in ascending seed order."""
        _check_number(n)
        return [self.encode_with_seed(n, seed) for seed in range(SIZE)]

    def decode(self, s: str) -> int:
        if not isinstance(s, str):
            raise InvalidArgument(f"Encoded value must be a string, got {type(s).__name__}", s)
        units = split_symbols(s)
        if len(units) < 2:
            raise InvalidLength(len(units))

        seed_symbol = units[0]
        if seed_symbol not in self.alphabet:
            raise InvalidSeedSymbol(seed_symbol)
        seed = self.alphabet.index_of(seed_symbol)

        index_of = self.alphabet.index_of
        return from_digits(unscramble(index_of(u), seed) for u in units[1:])


ALPHABET = build()
DEFAULT_CODEC = Codec(ALPHABET)


def encode_with_seed(n: int, seed: int) -> str:
    """Encode n with an explicit seed (0-127). Deterministic."""
    return DEFAULT_CODEC.encode_with_seed(n, seed)


def encode(n: int) -> str:
    """Encode n with a random seed."""
    return DEFAULT_CODEC.encode(n)


def encode_all(n: int) -> list[str]:
    """Encode n under every seed, seed 0 first."""
    return DEFAULT_CODEC.encode_all(n)


def decode(s: str) -> int:
    """Decode an encoded string back to its number."""
    return DEFAULT_CODEC.decode(s)
