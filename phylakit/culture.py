#!/usr/bin/env python3
"""
Cultural Parameters
===================
HEXACO-style personality scores and the geographic environment that together
drive every generation step.

Scores are nominally on a 1-5 scale. Values outside it are clamped, never
rejected.
"""

from dataclasses import dataclass
from enum import Enum


TRAIT_MIN = 1.0
TRAIT_MAX = 5.0


def normalize_score(score: float) -> float:
    """Clamp a 1-5 score and map it linearly onto 0-1."""
    clamped = min(max(float(score), TRAIT_MIN), TRAIT_MAX)
    return (clamped - TRAIT_MIN) / (TRAIT_MAX - TRAIT_MIN)


@dataclass(frozen=True)
class CulturalProfile:
    """
    Personality profile of a culture.

    - agreeableness: high -> softer sounds (nasals, liquids), low -> stops
    - openness: high -> larger inventory, complex syllables, epithets
    - conscientiousness: high -> regular patterns, verb-final order
    - extraversion: carried for completeness, not consumed yet
    - honesty_humility: low -> elaborate, titled names (used raw)
    - emotionality: high -> vowel-heavy syllables
    """
    agreeableness: float = 3.0
    openness: float = 3.0
    conscientiousness: float = 3.0
    extraversion: float = 3.0
    honesty_humility: float = 3.0
    emotionality: float = 3.0

    def normalized_agreeableness(self) -> float:
        return normalize_score(self.agreeableness)

    def normalized_openness(self) -> float:
        return normalize_score(self.openness)

    def normalized_conscientiousness(self) -> float:
        return normalize_score(self.conscientiousness)

    def normalized_extraversion(self) -> float:
        return normalize_score(self.extraversion)

    def normalized_emotionality(self) -> float:
        return normalize_score(self.emotionality)

    def to_dict(self) -> dict:
        return {
            'agreeableness': self.agreeableness,
            'openness': self.openness,
            'conscientiousness': self.conscientiousness,
            'extraversion': self.extraversion,
            'honesty_humility': self.honesty_humility,
            'emotionality': self.emotionality,
        }


class Geography(Enum):
    """Geographic environment that shapes phonology and vocabulary."""
    MOUNTAINS = "mountains"
    COASTAL = "coastal"
    DESERT = "desert"
    FOREST = "forest"
    PLAINS = "plains"
    RIVER_VALLEY = "river_valley"

    @classmethod
    def from_name(cls, name: str) -> "Geography":
        """
        Resolve a geography from a loose name ("River Valley", "river-valley").

        Raises:
            ValueError: If the name is unknown
        """
        key = str(name).strip().lower().replace('-', '_').replace(' ', '_')
        if key == 'rivervalley':
            key = 'river_valley'
        for geography in cls:
            if geography.value == key:
                return geography
        available = ', '.join(g.value for g in cls)
        raise ValueError(f"Unknown geography '{name}'. Available geographies: {available}")


__all__ = [
    'CulturalProfile',
    'Geography',
    'normalize_score',
]
