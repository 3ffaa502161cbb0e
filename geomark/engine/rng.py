"""
Seeded pseudo-random source.

Every random decision in the engine flows through a SeededRng so that a seed
string fully determines the output.
"""

import math
import struct
from typing import Sequence, TypeVar

from .sdk import STROKES

T = TypeVar("T")

_LCG_MUL = 1103515245
_LCG_INC = 12345
_MASK31 = 0x7FFFFFFF


def _to_int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def hash_seed(seed: str) -> int:
    """Fold the seed's UTF-16 code units into a signed 32-bit hash."""
    data = seed.encode("utf-16-le", errors="surrogatepass")
    h = 0
    for unit in struct.unpack(f"<{len(data) // 2}H", data):
        h = _to_int32((h << 5) - h + unit)
    return h


class SeededRng:
    """Linear congruential generator seeded from a string."""

    def __init__(self, seed: str):
        self.seed = seed
        self._state = abs(hash_seed(seed)) or 1

    def next(self) -> float:
        """Advance the generator; returns a float in [0, 1)."""
        self._state = (self._state * _LCG_MUL + _LCG_INC) & _MASK31
        return self._state / (_MASK31 + 1)

    def __repr__(self):
        return f"SeededRng(seed={self.seed!r})"


def create_rng(seed: str) -> SeededRng:
    return SeededRng(seed)


def pick(rng: SeededRng, items: Sequence[T]) -> T:
    return items[int(rng.next() * len(items))]


def rr(rng: SeededRng, lo: float, hi: float) -> float:
    return lo + rng.next() * (hi - lo)


def ri(rng: SeededRng, lo: int, hi: int) -> int:
    """Uniform integer in the inclusive range [lo, hi]."""
    return math.floor(rr(rng, lo, hi + 1))


def pick_stroke(rng: SeededRng) -> int:
    return pick(rng, STROKES)
