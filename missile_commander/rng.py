"""A self-seeded random source shared by the game."""

from __future__ import annotations

import os
import random
import time


def make_generator() -> random.Random:
    """Return a generator seeded from the clock and the OS entropy pool."""
    seed = (time.monotonic_ns() << 256) ^ int.from_bytes(os.urandom(28), "big")
    return random.Random(seed)


_generator = make_generator()


def get(low: int, high: int) -> int:
    """Return a random integer in the inclusive range ``[low, high]``."""
    low, high = int(low), int(high)
    if low > high:
        raise ValueError(f"empty range: [{low}, {high}]")
    return _generator.randint(low, high)