#!/usr/bin/env python3
"""
Naming System
=============
Culturally consistent names for people, places and reputations, built
from the same genome as the language itself.

Usage:
    naming = NamingSystem(genome, culture, geography)
    naming.generate_personal_name(PersonalNameContext.simple(42))
    naming.generate_place_name(PlaceNameContext(7, PlaceType.NATURAL))
    naming.generate_epithet(EpithetContext(42).with_characteristic(Characteristic.WISE))
"""

from .base import (
    NamePattern,
    NamingBase,
    capitalize_first_letter,
    capitalize_name,
    determine_name_length,
)
from .personal import PersonalNameContext, PersonalNamesMixin
from .place import PlaceType, PlaceNamingStrategy, PlaceNameContext, PlaceNamesMixin
from .epithet import Characteristic, EpithetContext, EpithetMixin


class NamingSystem(PersonalNamesMixin, PlaceNamesMixin, EpithetMixin, NamingBase):
    """
    Naming for one language.

    Pass ``pattern`` to override the culture-derived NamePattern (this is
    the only way to get DESCRIPTIVE names).
    """

    def describe(self) -> dict:
        return {
            'pattern': self.pattern.value,
            'combining_rule': self.combining_rule.value,
            'syllables_per_name': self.syllables_per_name,
            'morphemes': len(self.morphemes),
        }


__all__ = [
    'NamingSystem',
    'NamePattern',
    'PersonalNameContext',
    'PlaceType',
    'PlaceNamingStrategy',
    'PlaceNameContext',
    'Characteristic',
    'EpithetContext',
    'capitalize_first_letter',
    'capitalize_name',
    'determine_name_length',
]
