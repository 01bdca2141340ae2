"""
Tests for Entropy
=================
Tests for the seeded LCG and the string hashing in phylakit/generators/entropy.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phylakit.generators.entropy import (
    MASK64,
    SeededRandom,
    get_rng,
    hash_string,
    hash_deterministic,
    to_seed,
)


def reference_hash(text):
    """Java-style String.hashCode folded to its absolute value."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


class TestSeededRandom:
    """Tests for the LCG."""

    def test_first_draw_from_zero(self):
        """State 0 steps to the increment."""
        rng = SeededRandom(0)
        assert rng.random() == 49297 / 233280
        assert rng.state == 49297

    def test_recurrence(self):
        """Each draw follows state' = (state*9301 + 49297) mod 233280."""
        rng = SeededRandom(987654321)
        state = 987654321
        for _ in range(20):
            state = ((state * 9301 + 49297) & MASK64) % 233280
            assert rng.random() == state / 233280

    def test_recurrence_wraps_64_bits(self):
        """Large seeds wrap modulo 2**64 before the modulus."""
        seed = MASK64 - 5
        rng = SeededRandom(seed)
        expected = ((seed * 9301 + 49297) % 2 ** 64) % 233280
        assert rng.random() == expected / 233280

    def test_same_seed_same_sequence(self):
        a = SeededRandom(42)
        b = get_rng(42)
        assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]

    def test_range_of_random(self):
        rng = SeededRandom(7)
        for _ in range(500):
            value = rng.random()
            assert 0.0 <= value < 1.0

    def test_negative_seed_is_masked(self):
        assert SeededRandom(-1).state == MASK64
        assert to_seed(-1) == 2 ** 64 - 1


class TestChoice:
    """Tests for uniform and ranged selection."""

    def test_choice_returns_element(self):
        rng = SeededRandom(1)
        items = ['a', 'b', 'c']
        for _ in range(50):
            assert rng.choice(items) in items

    def test_choice_single_element(self):
        rng = SeededRandom(1)
        assert rng.choice(['only']) == 'only'

    def test_choice_empty_raises(self):
        with pytest.raises(IndexError):
            SeededRandom(1).choice([])

    def test_choice_index_from_draw(self):
        """Index is floor(draw * len)."""
        items = list(range(10))
        rng = SeededRandom(0)
        # First draw is 49297 / 233280 = 0.2113...
        assert rng.choice(items) == 2

    def test_randrange_bounds(self):
        rng = SeededRandom(99)
        values = {rng.randrange(2, 4) for _ in range(200)}
        assert values == {2, 3}

    def test_randrange_from_draw(self):
        rng = SeededRandom(0)
        assert rng.randrange(0, 10) == 2


class TestWeightedSelection:
    """Tests for weighted_index and weighted_choice."""

    def test_zero_sum_returns_last_index(self):
        rng = SeededRandom(5)
        assert rng.weighted_index([0.0, 0.0, 0.0]) == 2

    def test_all_weight_on_first(self):
        for seed in range(20):
            assert SeededRandom(seed).weighted_index([1.0, 0.0, 0.0]) == 0

    def test_all_weight_on_last(self):
        for seed in range(20):
            assert SeededRandom(seed).weighted_index([0.0, 0.0, 2.5]) == 2

    def test_walks_cumulative_weights(self):
        """Draw 0.2113 * total 1.0 falls in the second bucket of [0.1, 0.5, 0.4]."""
        rng = SeededRandom(0)
        assert rng.weighted_index([0.1, 0.5, 0.4]) == 1

    def test_weighted_index_empty_raises(self):
        with pytest.raises(IndexError):
            SeededRandom(0).weighted_index([])

    def test_weighted_choice_returns_item(self):
        rng = SeededRandom(0)
        assert rng.weighted_choice([('x', 0.1), ('y', 0.5), ('z', 0.4)]) == 'y'

    def test_weighted_choice_empty_raises(self):
        with pytest.raises(IndexError):
            SeededRandom(0).weighted_choice([])

    def test_weighted_distribution(self):
        """Heavier weights are chosen more often."""
        rng = SeededRandom(2024)
        counts = [0, 0]
        for _ in range(2000):
            counts[rng.weighted_index([0.9, 0.1])] += 1
        assert counts[0] > counts[1] * 3


class TestHashing:
    """Tests for hash_string and hash_deterministic."""

    def test_empty_string(self):
        assert hash_string("") == 0

    def test_known_values(self):
        assert hash_string("a") == 97
        assert hash_string("ab") == 97 * 31 + 98

    def test_matches_reference_on_long_strings(self):
        """Overflowing inputs wrap on signed 32-bit arithmetic."""
        for text in ["mountain", "name_123456789", "a much longer concept string", "ʃʒəŋ"]:
            assert hash_string(text) == reference_hash(text)

    def test_result_is_non_negative(self):
        for text in ["house", "tree", "xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx", "zzzzzzzzzzzz"]:
            assert 0 <= hash_string(text) <= 2 ** 31

    def test_hash_deterministic_combines(self):
        assert hash_deterministic("a", 5) == 97 * 31 + 5

    def test_hash_deterministic_wraps(self):
        assert hash_deterministic("a", MASK64) == (97 * 31 + MASK64) % 2 ** 64
        assert hash_deterministic("a", MASK64) == 97 * 31 - 1

    def test_different_concepts_different_seeds(self):
        assert hash_deterministic("house", 12345) != hash_deterministic("tree", 12345)
