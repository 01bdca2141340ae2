#!/usr/bin/env python3
"""
Place Names
===========
Names for settlements, natural features, landmarks and regions.

A strategy is picked first (descriptive, founder, historical or
mythopoetic) from culture and the hints available, then the name is
synthesized from morphemes. All draws for one place come from a single
generator seeded by ``place_id ^ genome.seed``.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..culture import Geography
from ..generators.entropy import SeededRandom, to_seed
from ..generators.morphology import MorphemeType
from .base import capitalize_name


class PlaceType(Enum):
    SETTLEMENT = "settlement"  # village, town, city
    NATURAL = "natural"        # mountain, river, forest
    LANDMARK = "landmark"      # bridge, tower, fortress
    REGION = "region"          # valley, plains, territory

    @classmethod
    def from_name(cls, name: str) -> "PlaceType":
        key = str(name).strip().lower()
        for place_type in cls:
            if place_type.value == key:
                return place_type
        available = ', '.join(p.value for p in cls)
        raise ValueError(f"Unknown place type '{name}'. Available place types: {available}")


class PlaceNamingStrategy(Enum):
    DESCRIPTIVE = "descriptive"  # Redmountain, Deepwater
    FOUNDER = "founder"          # Jamestown, Alexandria
    HISTORICAL = "historical"    # Battleford
    MYTHOPOETIC = "mythopoetic"  # Moonhaven


@dataclass(frozen=True)
class PlaceNameContext:
    """
    Inputs for one place name.

    ``local_geography`` overrides the culture's home geography for
    descriptive names only.
    """
    place_id: int
    place_type: PlaceType = PlaceType.SETTLEMENT
    local_geography: Optional[Geography] = None
    founder_name: Optional[str] = None
    historical_event: Optional[str] = None

    def with_geography(self, geography: Geography) -> "PlaceNameContext":
        return replace(self, local_geography=geography)

    def with_founder(self, founder_name: str) -> "PlaceNameContext":
        return replace(self, founder_name=founder_name)

    def with_event(self, event: str) -> "PlaceNameContext":
        return replace(self, historical_event=event)


def _types(keys):
    return [MorphemeType.from_key(k) for k in keys]


class PlaceNamesMixin:
    """Place name generation for NamingSystem."""

    def generate_place_name(self, context: PlaceNameContext) -> str:
        rng = SeededRandom(to_seed(context.place_id) ^ self.genome.seed)
        strategy = self.place_strategy(context, rng)

        if strategy is PlaceNamingStrategy.FOUNDER and context.founder_name is not None:
            return self._founder_place_name(context.founder_name, context, rng)
        if strategy is PlaceNamingStrategy.HISTORICAL and context.historical_event is not None:
            return self._historical_place_name(context.historical_event, context, rng)
        if strategy is PlaceNamingStrategy.MYTHOPOETIC:
            return self._mythopoetic_place_name(rng)
        return self._descriptive_place_name(context, rng)

    def place_strategy(self, context: PlaceNameContext, rng: SeededRandom) -> PlaceNamingStrategy:
        """
        Pick the naming strategy.

        Trait thresholds are checked before any draw; founder and event hints
        each cost one draw, and only when present.
        """
        config = self.config
        if self.culture.normalized_openness() > config.place_strategy('mythopoetic_openness_above'):
            return PlaceNamingStrategy.MYTHOPOETIC
        if self.culture.normalized_conscientiousness() > config.place_strategy('descriptive_conscientiousness_above'):
            return PlaceNamingStrategy.DESCRIPTIVE
        if context.founder_name is not None and rng.random() < config.place_strategy('founder_probability'):
            return PlaceNamingStrategy.FOUNDER
        if context.historical_event is not None and rng.random() < config.place_strategy('historical_probability'):
            return PlaceNamingStrategy.HISTORICAL
        return PlaceNamingStrategy.DESCRIPTIVE

    def _feature_morpheme(self, place_type: PlaceType, geography: Geography, rng: SeededRandom) -> str:
        keys = self.config.place_features(place_type.value, geography.value)
        morpheme = self.morphemes.select_from_types(_types(keys), rng)
        if morpheme is None:
            return self._fallback_name(rng)
        return morpheme.form

    def _quality_morpheme(self, rng: SeededRandom) -> str:
        morpheme = self.morphemes.select_from_types(_types(self.config.place_pool('quality')), rng)
        if morpheme is None:
            return self._fallback_name(rng)
        return morpheme.form

    def _descriptive_place_name(self, context: PlaceNameContext, rng: SeededRandom) -> str:
        geography = context.local_geography or self.geography

        feature = self._feature_morpheme(context.place_type, geography, rng)
        quality = self._quality_morpheme(rng)

        return capitalize_name(self.combining_rule.combine(quality, feature))

    def _founder_place_name(self, founder: str, context: PlaceNameContext, rng: SeededRandom) -> str:
        form = rng.randrange(0, 3)

        if form == 0:
            suffix = self.translate_concept(self.config.founder_suffix_concept(context.place_type.value))
            return f"{founder}{suffix}"
        if form == 1:
            return f"{founder}'s {self.config.founder_possessive(context.place_type.value)}"
        return f"New {founder}"

    def _historical_place_name(self, event: str, context: PlaceNameContext, rng: SeededRandom) -> str:
        event_word = self.translate_concept(event)
        # Uses the home geography, not the local one
        feature = self._feature_morpheme(context.place_type, self.geography, rng)
        return capitalize_name(self.combining_rule.combine(event_word, feature))

    def _mythopoetic_place_name(self, rng: SeededRandom) -> str:
        mythic = self.morphemes.select_from_types(_types(self.config.place_pool('mythic')), rng)
        feature = self.morphemes.select_from_types(_types(self.config.place_pool('mythic_features')), rng)

        mythic_form = mythic.form if mythic else self.config.fallback('place', 'mythic_fallback')
        feature_form = feature.form if feature else self.config.fallback('place', 'mythic_feature_fallback')

        return capitalize_name(self.combining_rule.combine(mythic_form, feature_form))


__all__ = [
    'PlaceType',
    'PlaceNamingStrategy',
    'PlaceNameContext',
    'PlaceNamesMixin',
]
