#!/usr/bin/env python3
"""
Phonology
=========
Phonological building blocks: consonant categories, phoneme inventories,
syllable shapes and prosody.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class PhonemeCategory(Enum):
    """Consonant categories by manner of articulation, in weight-index order."""
    STOPS = "stops"
    FRICATIVES = "fricatives"
    NASALS = "nasals"
    LIQUIDS = "liquids"
    GLIDES = "glides"

    @property
    def index(self) -> int:
        return _CATEGORY_ORDER.index(self)


_CATEGORY_ORDER = list(PhonemeCategory)


@dataclass
class PhonemeInventory:
    """
    The complete set of sounds available to a language.

    ``category_weights`` holds one weight per PhonemeCategory, in category
    order. Weights need not sum to 1; the sampler normalizes.
    """
    stops: List[str] = field(default_factory=list)
    fricatives: List[str] = field(default_factory=list)
    nasals: List[str] = field(default_factory=list)
    liquids: List[str] = field(default_factory=list)
    glides: List[str] = field(default_factory=list)
    vowels: List[str] = field(default_factory=list)
    category_weights: List[float] = field(default_factory=lambda: [0.0] * len(_CATEGORY_ORDER))

    def __post_init__(self):
        if len(self.category_weights) != len(_CATEGORY_ORDER):
            raise ValueError(
                f"category_weights needs {len(_CATEGORY_ORDER)} entries, got {len(self.category_weights)}"
            )

    def get_category(self, category: PhonemeCategory) -> List[str]:
        """Get consonants by category."""
        return getattr(self, category.value)

    def weight_for(self, category: PhonemeCategory) -> float:
        return self.category_weights[category.index]

    def available_categories(self) -> List[PhonemeCategory]:
        """Categories that have at least one consonant, in category order."""
        return [cat for cat in _CATEGORY_ORDER if self.get_category(cat)]

    def all_consonants(self) -> List[str]:
        """All consonants as a flat list."""
        result = []
        for cat in _CATEGORY_ORDER:
            result.extend(self.get_category(cat))
        return result


class SyllableStructure(Enum):
    """Syllable shapes over consonant (C) and vowel (V) slots."""
    V = "V"        # a, i
    CV = "CV"      # ma, to
    VC = "VC"      # am, it
    CVC = "CVC"    # mat, tok
    CCV = "CCV"    # pra, kli
    VCC = "VCC"    # amp, ost
    CCVC = "CCVC"  # prak, klin
    CVCC = "CVCC"  # mask, tors
    CVV = "CVV"    # vowel-heavy languages

    @property
    def pattern(self) -> str:
        return self.value


class StressPattern(Enum):
    NONE = "none"
    INITIAL = "initial"
    FINAL = "final"
    PENULTIMATE = "penultimate"


@dataclass(frozen=True)
class ProsodicSystem:
    """Stress, tone and intonation. Only stress is modelled, and it is inert."""
    stress_pattern: StressPattern = StressPattern.NONE


__all__ = [
    'PhonemeCategory',
    'PhonemeInventory',
    'SyllableStructure',
    'StressPattern',
    'ProsodicSystem',
]
