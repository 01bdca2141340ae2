#!/usr/bin/env python3
"""
phylakit - Deterministic Language Generator
===========================================

Derives an artificial language (sound system, word-formation rules,
lexicon and names) from a cultural profile, a geography and a seed.
Identical inputs always produce identical text.

Quick Start
-----------
    from phylakit import Language, CulturalProfile, Geography

    culture = CulturalProfile(
        agreeableness=4.0, openness=3.0, conscientiousness=2.0,
        extraversion=3.0, honesty_humility=3.0, emotionality=4.0,
    )
    language = Language.from_culture(culture, Geography.COASTAL, 12345)

    language.translate_word("water")
    language.translate_phrase("warrior strikes enemy")

    naming = language.naming
    naming.generate_personal_name(PersonalNameContext.simple(42))
    naming.generate_place_name(PlaceNameContext(7, PlaceType.NATURAL))

Modules
-------
    phylakit.generators - RNG, phonology, genome, word synthesis, morphology
    phylakit.naming     - Personal names, place names and epithets
    phylakit.language   - Language facade with lexicon cache
    phylakit.config     - Culture presets

CLI Usage
---------
    python -m phylakit translate "warrior strikes enemy" --preset mountain_clans
    python -m phylakit names -n 10 --preset desert_nobles
    python -m phylakit presets
"""

__version__ = "0.1.0"

from .culture import CulturalProfile, Geography, normalize_score
from .generators import (
    SeededRandom,
    hash_string,
    hash_deterministic,
    LinguisticGenome,
    WordOrder,
    MorphologyType,
    PhonemeInventory,
    SyllableStructure,
    generate_word,
    MorphemeType,
    Morpheme,
    MorphemeDatabase,
    CombiningRule,
)
from .naming import (
    NamingSystem,
    NamePattern,
    PersonalNameContext,
    PlaceType,
    PlaceNameContext,
    Characteristic,
    EpithetContext,
)
from .language import Language, apply_word_order
from .config import CULTURE_PRESETS, get_preset, list_presets

__all__ = [
    '__version__',
    # Culture
    'CulturalProfile',
    'Geography',
    'normalize_score',
    # Generators
    'SeededRandom',
    'hash_string',
    'hash_deterministic',
    'LinguisticGenome',
    'WordOrder',
    'MorphologyType',
    'PhonemeInventory',
    'SyllableStructure',
    'generate_word',
    'MorphemeType',
    'Morpheme',
    'MorphemeDatabase',
    'CombiningRule',
    # Naming
    'NamingSystem',
    'NamePattern',
    'PersonalNameContext',
    'PlaceType',
    'PlaceNameContext',
    'Characteristic',
    'EpithetContext',
    # Language
    'Language',
    'apply_word_order',
    # Presets
    'CULTURE_PRESETS',
    'get_preset',
    'list_presets',
]
