#!/usr/bin/env python3
"""
Naming System Base
==================
Shared state and helpers for personal, place and epithet generation:
- NamePattern selection from culture
- Name length derivation
- Simple (phonological) and compound (morphemic) names
- Capitalization rules
"""

import logging
from enum import Enum
from typing import Optional

from ..culture import CulturalProfile, Geography
from ..generators.entropy import SeededRandom, hash_deterministic, to_seed
from ..generators.generation import build_word, generate_word
from ..generators.genome import LinguisticGenome
from ..generators.morphology import CombiningRule, MorphemeDatabase
from ..generators.phonemes import load_naming

logger = logging.getLogger(__name__)

# Scale applied to a [0, 1) draw to derive a seed for fallback names
FALLBACK_SEED_SCALE = 1_000_000


class NamePattern(Enum):
    """Structural template for personal names."""
    SIMPLE = "simple"            # Aria
    PATRONYMIC = "patronymic"    # Aran Thorson
    COMPOUND = "compound"        # Stormborn
    ELABORATE = "elaborate"      # Lord Maxim the Third
    DESCRIPTIVE = "descriptive"  # Elara Brighteyes

    @classmethod
    def from_culture(cls, culture: CulturalProfile) -> "NamePattern":
        """
        Pick the pattern a culture uses.

        Low honesty-humility (raw score) wins over everything else. DESCRIPTIVE
        is never chosen here; it has to be requested explicitly.
        """
        if culture.honesty_humility < 2.5:
            return cls.ELABORATE
        if culture.normalized_openness() > 0.7:
            return cls.COMPOUND
        if culture.normalized_conscientiousness() > 0.6:
            return cls.PATRONYMIC
        return cls.SIMPLE

    @classmethod
    def from_name(cls, name: str) -> "NamePattern":
        key = str(name).strip().lower()
        for pattern in cls:
            if pattern.value == key:
                return pattern
        available = ', '.join(p.value for p in cls)
        raise ValueError(f"Unknown name pattern '{name}'. Available patterns: {available}")


def capitalize_first_letter(text: str) -> str:
    """Uppercase the first character only; the rest is left untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def capitalize_name(name: str) -> str:
    """
    Capitalize a generated name.

    Hyphenated names capitalize every segment, genitive "a of b" names
    capitalize both sides, anything else only its first letter.
    """
    if '-' in name:
        return '-'.join(capitalize_first_letter(part) for part in name.split('-'))
    if ' of ' in name:
        parts = name.split(' of ')
        if len(parts) == 2:
            return f"{capitalize_first_letter(parts[0])} of {capitalize_first_letter(parts[1])}"
    return capitalize_first_letter(name)


def determine_name_length(culture: CulturalProfile, geography: Geography) -> int:
    """Typical syllables per name for a culture in a geography."""
    config = load_naming()

    syllables = int(config.name_length_rule('base'))
    if culture.normalized_openness() > config.name_length_rule('openness_above'):
        syllables += 1
    if culture.honesty_humility < config.name_length_rule('honesty_below'):
        syllables += 1
    syllables = max(syllables + config.name_length_geography(geography.value), 0)

    low = int(config.name_length_rule('min'))
    high = int(config.name_length_rule('max'))
    return min(max(syllables, low), high)


class NamingBase:
    """
    State shared by every naming family.

    Attributes:
        genome: Language genome
        culture: Cultural profile
        geography: Home geography
        morphemes: Morpheme database built from the three above
        pattern: Personal name pattern
        combining_rule: How compounds are joined
        syllables_per_name: Syllables in a simple name
    """

    def __init__(
        self,
        genome: LinguisticGenome,
        culture: CulturalProfile,
        geography: Geography,
        pattern: Optional[NamePattern] = None,
    ):
        self.genome = genome
        self.culture = culture
        self.geography = geography
        self.morphemes = MorphemeDatabase.from_genome(genome, culture, geography)
        self.pattern = pattern or NamePattern.from_culture(culture)
        self.combining_rule = CombiningRule.from_culture(culture)
        self.syllables_per_name = determine_name_length(culture, geography)
        self.config = load_naming()

        logger.debug(
            f"Naming system: pattern={self.pattern.value} "
            f"rule={self.combining_rule.value} syllables={self.syllables_per_name}"
        )

    def generate_simple_name(self, seed: int) -> str:
        """Phonological name keyed by ``name_{seed}``, first letter capitalized."""
        concept = f"name_{to_seed(seed)}"
        rng = SeededRandom(hash_deterministic(concept, self.genome.seed))
        return capitalize_first_letter(build_word(self.genome, rng, self.syllables_per_name))

    def generate_compound_name(self, seed: int, count: int) -> str:
        """Join ``count`` salience-weighted morphemes with the combining rule."""
        rng = SeededRandom(to_seed(seed) ^ self.genome.seed)

        forms = [self.morphemes.select_weighted(rng).form for _ in range(count)]
        if not forms:
            return self.generate_simple_name(seed)

        name = forms[0]
        for form in forms[1:]:
            name = self.combining_rule.combine(name, form)
        return capitalize_name(name)

    def translate_concept(self, concept: str) -> str:
        """Word for a free-form concept, as the language would say it."""
        return generate_word(self.genome, concept)

    def _fallback_name(self, rng: SeededRandom) -> str:
        return self.generate_simple_name(int(rng.random() * FALLBACK_SEED_SCALE))


__all__ = [
    'NamePattern',
    'NamingBase',
    'capitalize_first_letter',
    'capitalize_name',
    'determine_name_length',
]
