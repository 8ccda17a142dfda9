"""Shared fixtures for hgn tests."""

import random

import pytest

from hgn.core.alphabet import build
from hgn.core.codec import Codec


@pytest.fixture
def alphabet():
    return build()


@pytest.fixture
def codec(alphabet):
    """Codec with a fixed random source so encode() is repeatable."""
    return Codec(alphabet, random.Random(1234))
