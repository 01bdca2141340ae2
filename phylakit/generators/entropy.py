#!/usr/bin/env python3
"""
Entropy Module for Language Generation
======================================
Provides the seeded randomness every generation step is driven by.

Features:
- Linear congruential generator with fixed constants
- Uniform, weighted and ranged selection helpers
- String hashing that bridges arbitrary concepts to generator seeds

Output text is a direct function of this stream, so the recurrence and the
hash arithmetic (32-bit rolling hash, 64-bit seed combination) must stay
bit-exact.
"""

from typing import Any, List, Sequence, Tuple


# 64-bit wraparound for all seed arithmetic
MASK64 = (1 << 64) - 1

# LCG parameters
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


def to_seed(value: int) -> int:
    """Coerce an integer into the unsigned 64-bit seed space."""
    return int(value) & MASK64


# =============================================================================
# Seeded Random Number Generator
# =============================================================================

class SeededRandom:
    """
    Deterministic random number generator.

    The same seed always yields the same sequence:

        rng = SeededRandom(12345)
        rng.random()            # float in [0, 1)
        rng.choice(['a', 'b'])  # uniform pick
        rng.weighted_index([0.5, 0.3, 0.2])
        rng.randrange(2, 4)     # 2 or 3
    """

    def __init__(self, seed: int):
        self._state = to_seed(seed)

    @property
    def state(self) -> int:
        return self._state

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        self._state = ((self._state * LCG_MULTIPLIER + LCG_INCREMENT) & MASK64) % LCG_MODULUS
        return self._state / LCG_MODULUS

    def choice(self, seq: Sequence[Any]) -> Any:
        """Return a uniformly chosen element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        index = int(self.random() * len(seq))
        return seq[min(index, len(seq) - 1)]

    def weighted_index(self, weights: Sequence[float]) -> int:
        """
        Choose an index with probability proportional to its weight.

        The draw is scaled by the weight total and walked down the list; the
        first weight larger than what remains of the draw wins. Rounding
        leftovers and all-zero weights fall through to the last index.
        """
        if not weights:
            raise IndexError("Cannot choose from empty sequence")

        total = sum(weights)
        r = self.random() * total

        for i, weight in enumerate(weights):
            if r < weight:
                return i
            r -= weight

        return len(weights) - 1

    def weighted_choice(self, items: List[Tuple[Any, float]]) -> Any:
        """
        Choose from items with weights.

        Args:
            items: List of (item, weight) tuples

        Returns:
            Selected item
        """
        if not items:
            raise IndexError("Cannot choose from empty sequence")
        index = self.weighted_index([weight for _, weight in items])
        return items[index][0]

    def randrange(self, low: int, high: int) -> int:
        """Return an integer N with low <= N < high."""
        return low + int(self.random() * (high - low))


def get_rng(seed: int) -> SeededRandom:
    """Create a generator for the given seed."""
    return SeededRandom(seed)


# =============================================================================
# Hashing
# =============================================================================

def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def hash_string(text: str) -> int:
    """
    Hash a string to a non-negative seed.

    Classic ``hash * 31 + code_point`` rolling hash on signed 32-bit
    arithmetic; the absolute value is returned, so the result lies in
    [0, 2**31].
    """
    h = 0
    for ch in text:
        h = _wrap_int32((h << 5) - h + ord(ch))
    return abs(h)


def hash_deterministic(concept: str, language_seed: int) -> int:
    """Combine a concept with a language seed into a generator seed."""
    return (hash_string(concept) * 31 + to_seed(language_seed)) & MASK64


__all__ = [
    'MASK64',
    'SeededRandom',
    'get_rng',
    'to_seed',
    'hash_string',
    'hash_deterministic',
]
