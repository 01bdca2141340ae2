#!/usr/bin/env python3
"""
Personal Names
==============
Names for individuals, dispatched on the culture's NamePattern.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..generators.entropy import SeededRandom, to_seed
from ..generators.morphology import CombiningRule, MorphemeType
from .base import NamePattern, capitalize_first_letter

# Seeds the language-wide patronymic marker ("PATRONYM" in ASCII)
PATRONYMIC_SEED = 0x504154524F4E594D
PATRONYMIC_MARKER_LENGTH = 3


@dataclass(frozen=True)
class PersonalNameContext:
    """Inputs for one personal name."""
    entity_id: int
    parent_name: Optional[str] = None
    birth_order: Optional[int] = None

    @classmethod
    def simple(cls, entity_id: int) -> "PersonalNameContext":
        return cls(entity_id=entity_id)

    def with_parent(self, parent_name: str) -> "PersonalNameContext":
        return replace(self, parent_name=parent_name)

    def with_birth_order(self, birth_order: int) -> "PersonalNameContext":
        return replace(self, birth_order=birth_order)


def _morpheme_types(keys):
    return [MorphemeType.from_key(k) for k in keys]


class PersonalNamesMixin:
    """Personal name generation for NamingSystem."""

    def generate_personal_name(self, context: PersonalNameContext) -> str:
        pattern = self.pattern
        if pattern is NamePattern.SIMPLE:
            return self.generate_simple_name(context.entity_id)
        if pattern is NamePattern.PATRONYMIC:
            return self._patronymic_name(context)
        if pattern is NamePattern.COMPOUND:
            rng = SeededRandom(to_seed(context.entity_id) ^ self.genome.seed)
            count = 2 + rng.randrange(0, 2)
            return self.generate_compound_name(context.entity_id, count)
        if pattern is NamePattern.ELABORATE:
            return self._elaborate_name(context)
        if pattern is NamePattern.DESCRIPTIVE:
            return self._descriptive_name(context)
        raise ValueError(f"Unhandled name pattern: {pattern}")

    # -------------------------------------------------------------------------
    # Patronymic: "Aran Thorinsek"
    # -------------------------------------------------------------------------

    def _patronymic_name(self, context: PersonalNameContext) -> str:
        given = self.generate_simple_name(context.entity_id)
        if context.parent_name is None:
            return given
        return f"{given} {self.patronymic_of(context.parent_name)}"

    def patronymic_marker(self) -> str:
        """The fixed suffix this language uses to mark descent."""
        marker_word = self.generate_simple_name(self.genome.seed ^ PATRONYMIC_SEED)
        return marker_word[:PATRONYMIC_MARKER_LENGTH]

    def patronymic_of(self, parent_name: str) -> str:
        marker = self.patronymic_marker()
        if self.culture.normalized_conscientiousness() > 0.6:
            return f"{parent_name}-{marker}"
        return f"{parent_name}{marker}"

    # -------------------------------------------------------------------------
    # Elaborate: "{Title} {Given} {lineage}"
    # -------------------------------------------------------------------------

    def _elaborate_name(self, context: PersonalNameContext) -> str:
        rng = SeededRandom(to_seed(context.entity_id) ^ self.genome.seed)

        title = self._title(rng)
        given = self.generate_simple_name(context.entity_id)
        lineage = self._lineage(rng)

        return f"{title} {given} {lineage}"

    def _title(self, rng: SeededRandom) -> str:
        morpheme = self.morphemes.select_from_types(
            _morpheme_types(self.config.personal_pool('title')), rng
        )
        if morpheme is None:
            return capitalize_first_letter(self._fallback_name(rng))
        return capitalize_first_letter(morpheme.form)

    def _lineage(self, rng: SeededRandom) -> str:
        if rng.random() < 0.5:
            ordinals = self.config.personal_pool('ordinals')
            return f"the {ordinals[rng.randrange(0, len(ordinals))]}"

        morpheme = self.morphemes.select_from_types(
            _morpheme_types(self.config.personal_pool('lineage_features')), rng
        )
        if morpheme is None:
            return self.config.fallback('personal', 'lineage_fallback')
        return f"of the {capitalize_first_letter(morpheme.form)}"

    # -------------------------------------------------------------------------
    # Descriptive: "Given Characteristic" / "Given-Characteristic"
    # -------------------------------------------------------------------------

    def _descriptive_name(self, context: PersonalNameContext) -> str:
        rng = SeededRandom(to_seed(context.entity_id) ^ self.genome.seed)

        given = self.generate_simple_name(context.entity_id)
        morpheme = self.morphemes.select_from_types(
            _morpheme_types(self.config.personal_pool('characteristic')), rng
        )
        if morpheme is None:
            characteristic = capitalize_first_letter(self._fallback_name(rng))
        else:
            characteristic = capitalize_first_letter(morpheme.form)

        if self.combining_rule is CombiningRule.HYPHENATED:
            return f"{given}-{characteristic}"
        return f"{given} {characteristic}"


__all__ = [
    'PersonalNameContext',
    'PersonalNamesMixin',
    'PATRONYMIC_SEED',
]
