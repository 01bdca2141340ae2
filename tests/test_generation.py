"""
Tests for Word Generation
=========================
Tests for syllable assembly and concept-to-word synthesis.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phylakit.culture import CulturalProfile, Geography
from phylakit.generators.entropy import SeededRandom, hash_deterministic
from phylakit.generators.generation import (
    build_syllable,
    build_word,
    choose_consonant,
    generate_word,
)
from phylakit.generators.genome import LinguisticGenome, MorphologyType, WordOrder
from phylakit.generators.phonology import PhonemeInventory, SyllableStructure


def make_genome(inventory, patterns=(SyllableStructure.CV,), seed=1):
    return LinguisticGenome(
        phoneme_inventory=inventory,
        syllable_patterns=tuple(patterns),
        word_order=WordOrder.SVO,
        morphology_type=MorphologyType.FUSIONAL,
        seed=seed,
    )


@pytest.fixture
def coastal_genome():
    culture = CulturalProfile(4.0, 3.0, 2.0, 3.0, 3.0, 4.0)
    return LinguisticGenome.from_culture(culture, Geography.COASTAL, 12345)


class TestGenerateWord:
    """Tests for generate_word."""

    def test_deterministic(self, coastal_genome):
        assert generate_word(coastal_genome, "house") == generate_word(coastal_genome, "house")

    def test_independent_of_call_order(self, coastal_genome):
        first = generate_word(coastal_genome, "river")
        generate_word(coastal_genome, "sky")
        generate_word(coastal_genome, "tree")
        assert generate_word(coastal_genome, "river") == first

    def test_different_concepts_differ(self, coastal_genome):
        assert generate_word(coastal_genome, "house") != generate_word(coastal_genome, "tree")

    def test_non_empty(self, coastal_genome):
        for concept in ["a", "go", "sun", "mountain", "courage"]:
            assert generate_word(coastal_genome, concept)

    def test_uses_only_inventory_symbols(self, coastal_genome):
        inventory = coastal_genome.phoneme_inventory
        allowed = set(''.join(inventory.all_consonants() + inventory.vowels))
        for concept in ["water", "fire", "stone", "wind", "x"]:
            assert set(generate_word(coastal_genome, concept)) <= allowed

    def test_short_concept_syllable_count(self):
        """Concepts under four bytes get one or two syllables."""
        genome = make_genome(PhonemeInventory(stops=["t"], vowels=["a"], category_weights=[1, 0, 0, 0, 0]))
        for concept in ["a", "go", "sun", "sky", "axe"]:
            assert generate_word(genome, concept) in {"ta", "tata"}

    def test_long_concept_syllable_count(self):
        """Concepts of four bytes or more get two or three syllables."""
        genome = make_genome(PhonemeInventory(stops=["t"], vowels=["a"], category_weights=[1, 0, 0, 0, 0]))
        for concept in ["tree", "water", "mountain", "abé"]:
            assert generate_word(genome, concept) in {"tata", "tatata"}

    def test_matches_manual_build(self, coastal_genome):
        concept = "warrior"
        rng = SeededRandom(hash_deterministic(concept, coastal_genome.seed))
        count = 2 + rng.randrange(0, 2)
        assert generate_word(coastal_genome, concept) == build_word(coastal_genome, rng, count)

    def test_seed_changes_words(self):
        culture = CulturalProfile()
        a = LinguisticGenome.from_culture(culture, Geography.PLAINS, 1)
        b = LinguisticGenome.from_culture(culture, Geography.PLAINS, 2)
        concepts = ["sun", "moon", "water", "fire", "stone", "river"]
        assert [generate_word(a, c) for c in concepts] != [generate_word(b, c) for c in concepts]


class TestSyllables:
    """Tests for syllable and consonant selection."""

    def test_build_word_zero_syllables(self, coastal_genome):
        assert build_word(coastal_genome, SeededRandom(1), 0) == ""

    def test_vowel_only_pattern(self):
        genome = make_genome(
            PhonemeInventory(stops=["t"], vowels=["o"], category_weights=[1, 0, 0, 0, 0]),
            patterns=[SyllableStructure.V],
        )
        assert build_syllable(genome, SeededRandom(3)) == "o"

    def test_pattern_shape(self):
        genome = make_genome(
            PhonemeInventory(stops=["t"], nasals=["n"], vowels=["a"], category_weights=[1, 0, 1, 0, 0]),
            patterns=[SyllableStructure.CCVC],
        )
        syllable = build_syllable(genome, SeededRandom(11))
        assert len(syllable) == 4
        assert syllable[2] == "a"
        assert set(syllable[:2] + syllable[3]) <= {"t", "n"}

    def test_glides_only_inventory(self):
        genome = make_genome(PhonemeInventory(glides=["w"], vowels=["a"], category_weights=[0.3, 0.25, 0.2, 0.2, 0.1]))
        for seed in range(10):
            assert choose_consonant(genome, SeededRandom(seed)) == "w"

    def test_no_consonants_yields_empty(self):
        genome = make_genome(PhonemeInventory(vowels=["a"], category_weights=[0.3, 0.25, 0.2, 0.2, 0.1]))
        rng = SeededRandom(4)
        assert choose_consonant(genome, rng) == ""
        assert rng.state == 4

    def test_cv_without_consonants_is_vowel(self):
        genome = make_genome(PhonemeInventory(vowels=["e"], category_weights=[0.3, 0.25, 0.2, 0.2, 0.1]))
        assert build_syllable(genome, SeededRandom(4)) == "e"

    def test_empty_category_never_chosen(self):
        """A weighted but empty category takes no part in the draw."""
        genome = make_genome(PhonemeInventory(stops=["p"], vowels=["a"], category_weights=[0.01, 0.99, 0, 0, 0]))
        for seed in range(25):
            assert choose_consonant(genome, SeededRandom(seed)) == "p"
