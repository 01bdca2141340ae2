#!/usr/bin/env python3
"""
Linguistic Genome
=================
The complete "DNA" of a language: phoneme inventory, syllable patterns,
prosody, word order and morphological type, all derived from a cultural
profile, a geography and a seed.

A genome is built once and never mutated. Every word and name the language
produces is a function of it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from ..culture import CulturalProfile, Geography
from .entropy import SeededRandom, to_seed, MASK64
from .phonemes import load_phonology
from .phonology import PhonemeInventory, ProsodicSystem, SyllableStructure

logger = logging.getLogger(__name__)

# Decorrelates the word-order stream from word synthesis seeding
WORD_ORDER_SEED_MULTIPLIER = 7919


class WordOrder(Enum):
    SVO = "SVO"  # English, Mandarin
    SOV = "SOV"  # Japanese, Turkish
    VSO = "VSO"  # Irish, Arabic
    VOS = "VOS"  # Malagasy
    OVS = "OVS"  # rare
    OSV = "OSV"  # very rare


class MorphologyType(Enum):
    """
    Morphological type of the language.

    Descriptive metadata only; word synthesis does not consult it.
    """
    ISOLATING = "isolating"          # single-morpheme words
    AGGLUTINATIVE = "agglutinative"  # strung-together morphemes
    FUSIONAL = "fusional"            # fused morphemes


@dataclass(frozen=True)
class LinguisticGenome:
    """All parameters needed to generate consistent output for one language."""
    phoneme_inventory: PhonemeInventory
    syllable_patterns: Tuple[SyllableStructure, ...]
    word_order: WordOrder
    morphology_type: MorphologyType
    seed: int
    prosody: ProsodicSystem = field(default_factory=ProsodicSystem)

    @classmethod
    def from_culture(cls, culture: CulturalProfile, geography: Geography, seed: int) -> "LinguisticGenome":
        """Derive a genome from cultural traits, geography and a seed."""
        seed = to_seed(seed)
        genome = cls(
            phoneme_inventory=generate_phoneme_inventory(culture, geography),
            syllable_patterns=tuple(generate_syllable_patterns(culture, geography)),
            word_order=determine_word_order(culture, seed),
            morphology_type=determine_morphology(culture),
            seed=seed,
        )
        logger.debug(
            f"Built genome seed={seed} geography={geography.value} "
            f"order={genome.word_order.value} morphology={genome.morphology_type.value} "
            f"consonants={len(genome.phoneme_inventory.all_consonants())} "
            f"vowels={len(genome.phoneme_inventory.vowels)} patterns={len(genome.syllable_patterns)}"
        )
        return genome

    def describe(self) -> Dict[str, Any]:
        """Plain summary of the genome for display or JSON output."""
        inventory = self.phoneme_inventory
        return {
            'seed': self.seed,
            'word_order': self.word_order.value,
            'morphology_type': self.morphology_type.value,
            'stress': self.prosody.stress_pattern.value,
            'stops': list(inventory.stops),
            'fricatives': list(inventory.fricatives),
            'nasals': list(inventory.nasals),
            'liquids': list(inventory.liquids),
            'glides': list(inventory.glides),
            'vowels': list(inventory.vowels),
            'category_weights': [round(w, 4) for w in inventory.category_weights],
            'syllable_patterns': [s.pattern for s in self.syllable_patterns],
        }


# =============================================================================
# Sub-derivations
# =============================================================================

def generate_phoneme_inventory(culture: CulturalProfile, geography: Geography) -> PhonemeInventory:
    """
    Build the phoneme inventory.

    Geography appends consonants to the base set, openness grows the vowel
    set, and agreeableness shifts weight from stops to nasals and liquids.
    """
    config = load_phonology()

    consonants = config.base_inventory()
    for category, extra in config.geography_additions(geography.value).items():
        consonants[category].extend(extra)

    return PhonemeInventory(
        vowels=config.vowels_for(culture.normalized_openness()),
        category_weights=config.weights_for(culture.normalized_agreeableness()),
        **consonants,
    )


def generate_syllable_patterns(culture: CulturalProfile, geography: Geography):
    """Build the syllable pattern list (duplicates are intentional weighting)."""
    traits = {
        'openness': culture.normalized_openness(),
        'emotionality': culture.normalized_emotionality(),
        'conscientiousness': culture.normalized_conscientiousness(),
        'agreeableness': culture.normalized_agreeableness(),
        'extraversion': culture.normalized_extraversion(),
    }
    patterns = load_phonology().syllable_patterns_for(traits, geography.value)
    return [SyllableStructure(p) for p in patterns]


def determine_word_order(culture: CulturalProfile, seed: int) -> WordOrder:
    """
    Pick a word order.

    High conscientiousness leans verb-final, low leans verb-initial, the
    middle leans SVO. Draws come from a stream keyed by ``seed * 7919``.
    """
    conscientiousness = culture.normalized_conscientiousness()
    rng = SeededRandom((to_seed(seed) * WORD_ORDER_SEED_MULTIPLIER) & MASK64)

    if conscientiousness > 0.7:
        return WordOrder.SOV if rng.random() < 0.8 else WordOrder.SVO
    if conscientiousness < 0.3:
        return WordOrder.VSO if rng.random() < 0.7 else WordOrder.VOS
    if rng.random() < 0.7:
        return WordOrder.SVO
    if rng.random() < 0.5:
        return WordOrder.SOV
    return WordOrder.VSO


def determine_morphology(culture: CulturalProfile) -> MorphologyType:
    conscientiousness = culture.normalized_conscientiousness()
    openness = culture.normalized_openness()

    if conscientiousness > 0.6:
        if openness > 0.6:
            return MorphologyType.AGGLUTINATIVE
        return MorphologyType.ISOLATING
    return MorphologyType.FUSIONAL


__all__ = [
    'WordOrder',
    'MorphologyType',
    'LinguisticGenome',
    'generate_phoneme_inventory',
    'generate_syllable_patterns',
    'determine_word_order',
    'determine_morphology',
]
