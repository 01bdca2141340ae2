#!/usr/bin/env python3
"""
Language Generators
===================
The generative core:
- entropy:    seeded LCG and string hashing
- phonology:  phoneme inventories, syllable shapes, prosody
- genome:     culture + geography + seed -> LinguisticGenome
- generation: concept -> word synthesis
- morphology: morpheme database and combining rules
"""

from .entropy import (
    SeededRandom,
    get_rng,
    hash_string,
    hash_deterministic,
)
from .phonology import (
    PhonemeCategory,
    PhonemeInventory,
    SyllableStructure,
    StressPattern,
    ProsodicSystem,
)
from .genome import (
    LinguisticGenome,
    WordOrder,
    MorphologyType,
)
from .generation import (
    generate_word,
    build_word,
)
from .morphology import (
    MorphemeGroup,
    MorphemeType,
    Morpheme,
    MorphemeDatabase,
    CombiningRule,
)

__all__ = [
    # Entropy
    'SeededRandom',
    'get_rng',
    'hash_string',
    'hash_deterministic',
    # Phonology
    'PhonemeCategory',
    'PhonemeInventory',
    'SyllableStructure',
    'StressPattern',
    'ProsodicSystem',
    # Genome
    'LinguisticGenome',
    'WordOrder',
    'MorphologyType',
    # Generation
    'generate_word',
    'build_word',
    # Morphology
    'MorphemeGroup',
    'MorphemeType',
    'Morpheme',
    'MorphemeDatabase',
    'CombiningRule',
]
