#!/usr/bin/env python3
"""
Epithets
========
Reputation names: "the Wise", "Dragonslayer", "Stormborn".

Openness acts as a direct probability: one draw decides whether an
epithet is produced at all.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional

from ..generators.entropy import SeededRandom, to_seed
from ..generators.morphology import MorphemeType
from .base import capitalize_first_letter, capitalize_name


class Characteristic(Enum):
    """A defining trait an epithet can be built from."""
    # Physical
    TALL = "tall"
    SHORT = "short"
    STRONG = "strong"
    SWIFT = "swift"

    # Mental
    WISE = "wise"
    CUNNING = "cunning"
    MAD = "mad"

    # Moral
    HONEST = "honest"
    BRAVE = "brave"
    CRUEL = "cruel"
    JUST = "just"

    # Social
    SILENT = "silent"
    LOUD = "loud"
    BELOVED = "beloved"
    FEARED = "feared"

    @classmethod
    def from_name(cls, name: str) -> "Characteristic":
        key = str(name).strip().lower()
        for characteristic in cls:
            if characteristic.value == key:
                return characteristic
        available = ', '.join(c.value for c in cls)
        raise ValueError(f"Unknown characteristic '{name}'. Available characteristics: {available}")

    def morpheme_types(self, config) -> List[MorphemeType]:
        return [MorphemeType.from_key(k) for k in config.characteristic_concepts(self.value)]


@dataclass(frozen=True)
class EpithetContext:
    """
    Inputs for one epithet.

    Only one hint is used, by priority: achievement, then birth event,
    then characteristic.
    """
    entity_id: int
    birth_event: Optional[str] = None
    achievement: Optional[str] = None
    characteristic: Optional[Characteristic] = None

    def with_birth_event(self, event: str) -> "EpithetContext":
        return replace(self, birth_event=event)

    def with_achievement(self, achievement: str) -> "EpithetContext":
        return replace(self, achievement=achievement)

    def with_characteristic(self, characteristic: Characteristic) -> "EpithetContext":
        return replace(self, characteristic=characteristic)


class EpithetMixin:
    """Epithet generation for NamingSystem."""

    def generate_epithet(self, context: EpithetContext) -> Optional[str]:
        """
        Generate an epithet, or None.

        None when the openness draw fails or when the context carries no hint.
        """
        rng = SeededRandom(to_seed(context.entity_id) ^ self.genome.seed)
        if rng.random() > self.culture.normalized_openness():
            return None

        if context.achievement is not None:
            return self._achievement_epithet(context.achievement, rng)
        if context.birth_event is not None:
            return self._birth_epithet(context.birth_event, rng)
        if context.characteristic is not None:
            return self._characteristic_epithet(context.characteristic, rng)
        return None

    def generate_name_with_epithet(self, base_name: str, context: EpithetContext) -> str:
        epithet = self.generate_epithet(context)
        if epithet is None:
            return base_name
        return f"{base_name} {epithet}"

    def _achievement_epithet(self, achievement: str, rng: SeededRandom) -> str:
        word = capitalize_first_letter(self.translate_concept(achievement))

        if rng.random() < 0.5:
            return f"the {word}"

        keys = self.config.epithet_pool('achievement_actions')
        action = self.morphemes.select_from_types([MorphemeType.from_key(k) for k in keys], rng)
        if action is None:
            return f"the {word}"
        return f"{word}{action.form}"

    def _birth_epithet(self, birth_event: str, rng: SeededRandom) -> str:
        event_word = self.translate_concept(birth_event)

        keys = self.config.epithet_pool('birth')
        born = self.morphemes.select_from_types([MorphemeType.from_key(k) for k in keys], rng)
        if born is None:
            return f"{capitalize_first_letter(event_word)}-Born"
        return capitalize_name(self.combining_rule.combine(event_word, born.form))

    def _characteristic_epithet(self, characteristic: Characteristic, rng: SeededRandom) -> str:
        morpheme = self.morphemes.select_from_types(characteristic.morpheme_types(self.config), rng)
        if morpheme is None:
            return self.config.fallback('epithet', 'fallback')
        return f"the {capitalize_first_letter(morpheme.form)}"


__all__ = [
    'Characteristic',
    'EpithetContext',
    'EpithetMixin',
]
