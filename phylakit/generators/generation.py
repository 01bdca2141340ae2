#!/usr/bin/env python3
"""
Word Generation
===============
Turns a genome and a concept string into a surface word.

Each concept seeds its own generator from ``hash_deterministic(concept,
genome.seed)``, so a word never depends on what was generated before it.
"""

from .entropy import SeededRandom, hash_deterministic
from .genome import LinguisticGenome


# Concepts shorter than this (in UTF-8 bytes) get 1-2 syllables, others 2-3
SHORT_CONCEPT_BYTES = 4


def generate_word(genome: LinguisticGenome, concept: str) -> str:
    """
    Generate the word a language uses for a concept.

    Args:
        genome: Language genome
        concept: Concept key, used verbatim (callers normalize case)

    Returns:
        Concatenated syllables, no separators
    """
    rng = SeededRandom(hash_deterministic(concept, genome.seed))

    if len(concept.encode('utf-8')) < SHORT_CONCEPT_BYTES:
        syllable_count = 1 + rng.randrange(0, 2)
    else:
        syllable_count = 2 + rng.randrange(0, 2)

    return build_word(genome, rng, syllable_count)


def build_word(genome: LinguisticGenome, rng: SeededRandom, syllable_count: int) -> str:
    """Assemble ``syllable_count`` syllables from an already-seeded generator."""
    return ''.join(build_syllable(genome, rng) for _ in range(syllable_count))


def build_syllable(genome: LinguisticGenome, rng: SeededRandom) -> str:
    """Fill one randomly chosen syllable pattern with phonemes."""
    pattern = rng.choice(genome.syllable_patterns).pattern

    parts = []
    for slot in pattern:
        if slot == 'C':
            parts.append(choose_consonant(genome, rng))
        elif slot == 'V':
            parts.append(rng.choice(genome.phoneme_inventory.vowels))
    return ''.join(parts)


def choose_consonant(genome: LinguisticGenome, rng: SeededRandom) -> str:
    """
    Pick a consonant: category by weight, then uniformly within it.

    Empty categories take no part in the draw. An inventory with no
    consonants at all yields an empty string.
    """
    inventory = genome.phoneme_inventory
    categories = inventory.available_categories()
    if not categories:
        return ''

    category = rng.weighted_choice([(cat, inventory.weight_for(cat)) for cat in categories])
    return rng.choice(inventory.get_category(category))


__all__ = [
    'generate_word',
    'build_word',
    'build_syllable',
    'choose_consonant',
]
