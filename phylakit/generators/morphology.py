#!/usr/bin/env python3
"""
Morphology
==========
Morphemes are the smallest meaningful units of a language. This module maps
a fixed set of semantic concepts onto synthesized forms, weights them by
cultural salience, and joins them into compounds.

Usage:
    db = MorphemeDatabase.from_genome(genome, culture, geography)
    fire = db.get(MorphemeType.FIRE).form
    pick = db.select_weighted(rng)

    rule = CombiningRule.from_culture(culture)
    rule.combine("fire", "stone")  # "firestone", "fire-stone" or "stone of fire"
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Sequence

from ..culture import CulturalProfile, Geography
from .entropy import SeededRandom
from .generation import generate_word
from .genome import LinguisticGenome
from .phonemes import load_morphemes

logger = logging.getLogger(__name__)


class MorphemeGroup(Enum):
    ELEMENT = "element"
    QUALITY = "quality"
    ACTION = "action"
    VIRTUE = "virtue"
    ABSTRACT = "abstract"


class MorphemeType(Enum):
    """
    Fixed semantic concepts.

    Declaration order is significant: weighted draws walk the database in
    this order.
    """
    # Natural elements
    FIRE = "fire"
    WATER = "water"
    EARTH = "earth"
    AIR = "air"
    STONE = "stone"
    MOUNTAIN = "mountain"
    RIVER = "river"
    FOREST = "forest"
    SEA = "sea"
    SKY = "sky"
    STORM = "storm"
    SUN = "sun"
    MOON = "moon"
    STAR = "star"

    # Qualities
    GREAT = "great"
    SMALL = "small"
    ANCIENT = "ancient"
    YOUNG = "young"
    STRONG = "strong"
    WISE = "wise"
    SWIFT = "swift"
    BRAVE = "brave"
    GENTLE = "gentle"
    DARK = "dark"
    BRIGHT = "bright"
    COLD = "cold"
    WARM = "warm"

    # Actions
    STRIKE = "strike"
    PROTECT = "protect"
    CREATE = "create"
    DESTROY = "destroy"
    WALK = "walk"
    FLY = "fly"
    SWIM = "swim"
    SPEAK = "speak"
    SEE = "see"
    HEAR = "hear"

    # Virtues
    HONOR = "honor"
    COURAGE = "courage"
    PEACE = "peace"
    WAR = "war"
    LOVE = "love"
    HOPE = "hope"
    FAITH = "faith"
    TRUTH = "truth"
    JUSTICE = "justice"

    # Abstract
    SPIRIT = "spirit"
    SOUL = "soul"
    HEART = "heart"
    MIND = "mind"
    POWER = "power"
    LIFE = "life"
    DEATH = "death"
    TIME = "time"
    FATE = "fate"

    @classmethod
    def from_key(cls, key: str) -> "MorphemeType":
        """Resolve a concept from its lowercase key ("fire")."""
        try:
            return cls(str(key).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown morpheme concept '{key}'") from None

    @property
    def group(self) -> MorphemeGroup:
        return _GROUPS[self]

    def cultural_weight(self, geography: Geography, culture: CulturalProfile) -> float:
        """
        Salience of this concept for a culture in a geography.

        Base weight, plus a bonus when the concept is thematic to the
        geography, plus trait-driven bonuses (which may be negative), floored.
        """
        config = load_morphemes()
        traits = {
            'openness': culture.normalized_openness(),
            'agreeableness': culture.normalized_agreeableness(),
            'emotionality': culture.normalized_emotionality(),
            'conscientiousness': culture.normalized_conscientiousness(),
            'extraversion': culture.normalized_extraversion(),
        }

        weight = config.base_weight()
        weight += config.geography_bonus(geography.value, self.value)
        weight += config.trait_bonus(traits, self.value)
        return max(weight, config.floor())


def _build_groups() -> Dict[MorphemeType, MorphemeGroup]:
    members = list(MorphemeType)
    spans = [
        (MorphemeGroup.ELEMENT, MorphemeType.FIRE, MorphemeType.STAR),
        (MorphemeGroup.QUALITY, MorphemeType.GREAT, MorphemeType.WARM),
        (MorphemeGroup.ACTION, MorphemeType.STRIKE, MorphemeType.HEAR),
        (MorphemeGroup.VIRTUE, MorphemeType.HONOR, MorphemeType.JUSTICE),
        (MorphemeGroup.ABSTRACT, MorphemeType.SPIRIT, MorphemeType.FATE),
    ]
    groups = {}
    for group, first, last in spans:
        for member in members[members.index(first):members.index(last) + 1]:
            groups[member] = group
    return groups


_GROUPS = _build_groups()


@dataclass(frozen=True)
class Morpheme:
    """A sound paired with a meaning and its cultural weight."""
    form: str
    meaning: MorphemeType
    weight: float


class MorphemeDatabase:
    """
    Every MorphemeType mapped to exactly one Morpheme for a language.

    Built once per (genome, culture, geography) and read-only afterwards.
    """

    def __init__(self, morphemes: Dict[MorphemeType, Morpheme]):
        # Normalize to declaration order so weighted draws are reproducible
        self._morphemes = {t: morphemes[t] for t in MorphemeType if t in morphemes}

    @classmethod
    def from_genome(
        cls,
        genome: LinguisticGenome,
        culture: CulturalProfile,
        geography: Geography,
    ) -> "MorphemeDatabase":
        morphemes = {}
        for meaning in MorphemeType:
            morphemes[meaning] = Morpheme(
                form=generate_word(genome, meaning.value),
                meaning=meaning,
                weight=meaning.cultural_weight(geography, culture),
            )
        logger.debug(f"Built morpheme database: {len(morphemes)} concepts for seed {genome.seed}")
        return cls(morphemes)

    def __len__(self) -> int:
        return len(self._morphemes)

    def __iter__(self) -> Iterator[Morpheme]:
        return iter(self._morphemes.values())

    def __contains__(self, meaning: MorphemeType) -> bool:
        return meaning in self._morphemes

    def get(self, meaning: MorphemeType) -> Optional[Morpheme]:
        return self._morphemes.get(meaning)

    def select_weighted(self, rng: SeededRandom) -> Morpheme:
        """Draw one morpheme from the whole database, weighted by salience."""
        return rng.weighted_choice([(m, m.weight) for m in self._morphemes.values()])

    def select_from_types(self, types: Sequence[MorphemeType], rng: SeededRandom) -> Optional[Morpheme]:
        """
        Draw one morpheme among the given types, weighted by salience.

        Returns None (without consuming a draw) if none of the types are known.
        """
        available = [self._morphemes[t] for t in types if t in self._morphemes]
        if not available:
            return None
        return rng.weighted_choice([(m, m.weight) for m in available])


class CombiningRule(Enum):
    """How two forms are joined into one compound."""
    CONCATENATE = "concatenate"  # fire + stone = firestone
    HYPHENATED = "hyphenated"    # fire + stone = fire-stone
    GENITIVE = "genitive"        # fire + stone = stone of fire

    @classmethod
    def from_culture(cls, culture: CulturalProfile) -> "CombiningRule":
        if culture.normalized_conscientiousness() > 0.6:
            return cls.HYPHENATED
        if culture.normalized_openness() > 0.7:
            return cls.GENITIVE
        return cls.CONCATENATE

    def combine(self, first: str, second: str) -> str:
        if self is CombiningRule.HYPHENATED:
            return f"{first}-{second}"
        if self is CombiningRule.GENITIVE:
            # The second form becomes the head noun
            return f"{second} of {first}"
        return f"{first}{second}"


__all__ = [
    'MorphemeGroup',
    'MorphemeType',
    'Morpheme',
    'MorphemeDatabase',
    'CombiningRule',
]
