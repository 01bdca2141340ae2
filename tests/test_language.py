"""
Tests for Language
==================
Tests for translation, the lexicon cache and word-order reordering.
"""

import dataclasses
import threading

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phylakit import Language, apply_word_order
from phylakit.culture import CulturalProfile, Geography
from phylakit.generators.generation import generate_word
from phylakit.generators.genome import WordOrder
from phylakit.naming import NamePattern


COASTAL = CulturalProfile(4.0, 3.0, 2.0, 3.0, 3.0, 4.0)
MOUNTAIN = CulturalProfile(1.0, 2.0, 4.0, 2.0, 3.0, 2.0)
DESERT = CulturalProfile(2.0, 2.0, 3.0, 3.0, 3.0, 2.0)


@pytest.fixture
def language():
    return Language.from_culture(COASTAL, Geography.COASTAL, 12345)


def with_order(language, word_order):
    genome = dataclasses.replace(language.genome, word_order=word_order)
    return Language.from_genome(genome, language.culture, language.geography)


class TestTranslation:
    """Tests for translate_word and translate_phrase."""

    def test_word_is_concept_word(self, language):
        assert language.translate_word("house") == generate_word(language.genome, "house")

    def test_case_insensitive(self, language):
        assert language.translate_word("House") == language.translate_word("house")

    def test_deterministic_across_instances(self, language):
        other = Language.from_culture(COASTAL, Geography.COASTAL, 12345)
        for concept in ["sun", "water", "warrior", "enemy"]:
            assert other.translate_word(concept) == language.translate_word(concept)

    def test_cultures_speak_differently(self):
        coastal = Language.from_culture(COASTAL, Geography.COASTAL, 111)
        mountain = Language.from_culture(MOUNTAIN, Geography.MOUNTAINS, 222)
        desert = Language.from_culture(DESERT, Geography.DESERT, 333)

        words = {lang.translate_word("sun") for lang in (coastal, mountain, desert)}
        assert len(words) == 3

    def test_empty_phrase(self, language):
        assert language.translate_phrase("") == ""
        assert language.translate_phrase("   ") == ""

    def test_phrase_single_spaces(self, language):
        phrase = language.translate_phrase("  warrior   strikes  enemy ")
        assert "  " not in phrase
        assert len(phrase.split(" ")) == 3

    def test_short_phrase_not_reordered(self, language):
        ordered = with_order(language, WordOrder.VSO)
        a, b = ordered.translate_word("warrior"), ordered.translate_word("strikes")
        assert ordered.translate_phrase("warrior strikes") == f"{a} {b}"

    def test_phrase_uses_genome_order(self, language):
        ordered = with_order(language, WordOrder.SOV)
        s, v, o = (ordered.translate_word(w) for w in ("warrior", "strikes", "enemy"))
        assert ordered.translate_phrase("warrior strikes enemy") == f"{s} {o} {v}"


class TestWordOrder:
    """Tests for positional reordering of S-V-O tokens."""

    @pytest.mark.parametrize("word_order,expected", [
        (WordOrder.SVO, ["S", "V", "O"]),
        (WordOrder.SOV, ["S", "O", "V"]),
        (WordOrder.VSO, ["V", "S", "O"]),
        (WordOrder.VOS, ["V", "O", "S"]),
        (WordOrder.OVS, ["V", "O", "S"]),
        (WordOrder.OSV, ["S", "V", "O"]),
    ])
    def test_three_tokens(self, word_order, expected):
        assert apply_word_order(["S", "V", "O"], word_order) == expected

    def test_trailing_tokens(self):
        assert apply_word_order(["S", "V", "O", "x"], WordOrder.SOV) == ["S", "O", "V", "x"]
        assert apply_word_order(["S", "V", "O", "x"], WordOrder.VOS) == ["V", "O", "x", "S"]

    def test_fewer_than_three_unchanged(self):
        for word_order in WordOrder:
            assert apply_word_order(["S", "V"], word_order) == ["S", "V"]
            assert apply_word_order([], word_order) == []

    def test_input_not_mutated(self):
        tokens = ["S", "V", "O"]
        apply_word_order(tokens, WordOrder.VSO)
        assert tokens == ["S", "V", "O"]

    def test_method_uses_genome_order(self, language):
        ordered = with_order(language, WordOrder.VSO)
        assert ordered.word_order() is WordOrder.VSO
        assert ordered.apply_word_order(["S", "V", "O"]) == ["V", "S", "O"]


class TestLexiconCache:
    """Tests for the memoized lexicon."""

    def test_cache_counts(self, language):
        assert language.cache_size() == 0
        language.translate_word("house")
        language.translate_word("house")
        language.translate_word("HOUSE")
        assert language.cache_size() == 1
        language.translate_word("tree")
        assert language.cache_size() == 2

    def test_phrase_fills_cache(self, language):
        language.translate_phrase("warrior strikes enemy")
        assert language.cache_size() == 3

    def test_clear_cache(self, language):
        word = language.translate_word("house")
        language.clear_cache()
        assert language.cache_size() == 0
        assert language.translate_word("house") == word

    def test_concurrent_translation(self, language):
        concepts = [f"concept{i}" for i in range(50)]
        results = []

        def worker():
            results.append([language.translate_word(c) for c in concepts])

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r == results[0] for r in results)
        assert language.cache_size() == 50

    def test_lexicon_batch(self, language):
        lexicon = language.lexicon(["Sun", "moon"])
        assert list(lexicon) == ["sun", "moon"]
        assert lexicon["sun"] == language.translate_word("sun")


class TestLanguageFacade:
    """Tests for construction and description."""

    def test_id(self, language):
        assert language.id == "lang_12345"

    def test_from_genome(self, language):
        other = Language.from_genome(language.genome, COASTAL, Geography.COASTAL)
        assert other.translate_word("fire") == language.translate_word("fire")

    def test_pattern_override(self):
        language = Language.from_culture(COASTAL, Geography.COASTAL, 5, pattern=NamePattern.DESCRIPTIVE)
        assert language.naming.pattern is NamePattern.DESCRIPTIVE

    def test_pattern_none_uses_culture(self):
        language = Language.from_culture(MOUNTAIN, Geography.MOUNTAINS, 5, pattern=None)
        assert language.naming.pattern is NamePattern.from_culture(MOUNTAIN)
        assert language.naming.pattern is NamePattern.PATRONYMIC

    def test_describe(self, language):
        language.translate_word("sun")
        summary = language.describe()
        assert summary['id'] == "lang_12345"
        assert summary['geography'] == "coastal"
        assert summary['culture']['agreeableness'] == 4.0
        assert summary['seed'] == 12345
        assert summary['morphemes'] == 55
        assert summary['cache_size'] == 1

    def test_repr(self, language):
        assert "lang_12345" in repr(language)
