#!/usr/bin/env python3
"""
Language
========
The public facade: a genome, its naming system, and a memoized lexicon.

Usage:
    from phylakit import Language, CulturalProfile, Geography

    culture = CulturalProfile(4.0, 3.0, 2.0, 3.0, 3.0, 4.0)
    language = Language.from_culture(culture, Geography.COASTAL, 12345)

    language.translate_word("house")        # same input, same output
    language.translate_phrase("I bring beer")
    language.naming.generate_personal_name(PersonalNameContext.simple(42))
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from .culture import CulturalProfile, Geography
from .generators.generation import generate_word
from .generators.genome import LinguisticGenome, WordOrder
from .naming import NamePattern, NamingSystem

logger = logging.getLogger(__name__)


def apply_word_order(tokens: List[str], word_order: WordOrder) -> List[str]:
    """
    Reorder tokens assumed to start in Subject-Verb-Object order.

    Only the first three positions move; trailing tokens stay at the end.
    Fewer than three tokens are returned unchanged.
    """
    words = list(tokens)
    if len(words) < 3:
        return words

    if word_order is WordOrder.SOV:
        verb = words.pop(1)
        words.insert(2, verb)
    elif word_order is WordOrder.VSO:
        verb = words.pop(1)
        words.insert(0, verb)
    elif word_order is WordOrder.VOS:
        subject = words.pop(0)
        verb = words.pop(0)
        words.insert(0, verb)
        words.append(subject)
    elif word_order is WordOrder.OVS:
        subject = words.pop(0)
        words.append(subject)
    elif word_order is WordOrder.OSV:
        subject = words.pop(0)
        verb = words.pop(0)
        words.insert(0, verb)
        words.insert(0, subject)
    return words


class Language:
    """
    A complete language.

    The lexicon cache is the only mutable state; it is append-only and
    guarded by a lock.
    """

    def __init__(
        self,
        genome: LinguisticGenome,
        culture: CulturalProfile,
        geography: Geography,
        pattern: Optional[NamePattern] = None,
    ):
        self.id = f"lang_{genome.seed}"
        self.genome = genome
        self.culture = culture
        self.geography = geography
        self.naming = NamingSystem(genome, culture, geography, pattern=pattern)
        self._lexicon_cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_culture(
        cls,
        culture: CulturalProfile,
        geography: Geography,
        seed: int,
        pattern: Optional[NamePattern] = None,
    ) -> "Language":
        genome = LinguisticGenome.from_culture(culture, geography, seed)
        return cls(genome, culture, geography, pattern=pattern)

    @classmethod
    def from_genome(
        cls,
        genome: LinguisticGenome,
        culture: CulturalProfile,
        geography: Geography,
        pattern: Optional[NamePattern] = None,
    ) -> "Language":
        return cls(genome, culture, geography, pattern=pattern)

    def translate_word(self, concept: str) -> str:
        """Translate one concept (case-insensitive); results are memoized."""
        concept = concept.lower()

        with self._lock:
            cached = self._lexicon_cache.get(concept)
        if cached is not None:
            return cached

        word = generate_word(self.genome, concept)
        logger.debug(f"Lexicon miss: '{concept}' -> '{word}'")

        with self._lock:
            self._lexicon_cache[concept] = word
        return word

    def translate_phrase(self, phrase: str) -> str:
        """Translate word by word, then apply the language's word order."""
        tokens = phrase.split()
        if not tokens:
            return ""
        translated = [self.translate_word(token) for token in tokens]
        return ' '.join(apply_word_order(translated, self.genome.word_order))

    def apply_word_order(self, tokens: List[str]) -> List[str]:
        return apply_word_order(tokens, self.genome.word_order)

    def lexicon(self, concepts: Iterable[str]) -> Dict[str, str]:
        """Translate a batch, keyed by the lowercased concept in input order."""
        return {concept.lower(): self.translate_word(concept) for concept in concepts}

    def word_order(self) -> WordOrder:
        return self.genome.word_order

    def clear_cache(self):
        with self._lock:
            self._lexicon_cache.clear()

    def cache_size(self) -> int:
        with self._lock:
            return len(self._lexicon_cache)

    def describe(self) -> dict:
        """Genome summary plus naming parameters and cache size."""
        summary = {
            'id': self.id,
            'geography': self.geography.value,
            'culture': self.culture.to_dict(),
        }
        summary.update(self.genome.describe())
        summary.update(self.naming.describe())
        summary['cache_size'] = self.cache_size()
        return summary

    def __repr__(self):
        return f"Language(id={self.id!r}, geography={self.geography.value!r})"


__all__ = [
    'Language',
    'apply_word_order',
]
