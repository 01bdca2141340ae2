#!/usr/bin/env python3
"""
Phoneme Configuration Loader
============================
Loads the linguistic tables used by the generators from YAML files.

Usage:
    from phylakit.generators.phonemes import (
        load_phonology, load_morphemes, load_naming
    )

    phonology = load_phonology()
    stops = phonology.base_inventory()['stops']
"""

import yaml
from pathlib import Path
from typing import Dict, List, Any
from dataclasses import dataclass
from functools import lru_cache


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent

CONSONANT_CATEGORIES = ('stops', 'fricatives', 'nasals', 'liquids', 'glides')


def _require_cfg(cfg: Dict[str, Any], key: str, context: str):
    value = cfg.get(key) if isinstance(cfg, dict) else None
    if value is None:
        raise ValueError(f"{context}.{key} must be set in {context.split('.')[0]}.yaml")
    return value


def _passes(rule: Dict[str, Any], value: float) -> bool:
    """Check a threshold rule ({above: x} or {below: x}) against a value."""
    if 'above' in rule and not value > float(rule['above']):
        return False
    if 'below' in rule and not value < float(rule['below']):
        return False
    return True


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

@dataclass
class PhonologyConfig:
    """Inventories, category weights and syllable rules."""
    inventory: Dict[str, Any]
    vowels: Dict[str, Any]
    category_weights: Dict[str, Any]
    syllables: Dict[str, Any]
    raw: Dict[str, Any]

    def base_inventory(self) -> Dict[str, List[str]]:
        """Get the base consonant lists, one per category."""
        base = _require_cfg(self.inventory, 'base', 'phonology.inventory')
        return {cat: list(base.get(cat) or []) for cat in CONSONANT_CATEGORIES}

    def geography_additions(self, geography: str) -> Dict[str, List[str]]:
        """Get the consonants a geography appends to each category."""
        additions = (self.inventory.get('geography') or {}).get(geography) or {}
        return {cat: list(additions.get(cat) or []) for cat in CONSONANT_CATEGORIES}

    def vowels_for(self, openness: float) -> List[str]:
        """Get the vowel inventory for a normalized openness score."""
        result = list(_require_cfg(self.vowels, 'base', 'phonology.vowels'))
        for tier in self.vowels.get('tiers') or []:
            if _passes(tier, openness):
                result.extend(tier.get('vowels') or [])
        return result

    def weights_for(self, agreeableness: float) -> List[float]:
        """Get category weights (fixed category order) for normalized agreeableness."""
        weights = []
        for cat in CONSONANT_CATEGORIES:
            formula = _require_cfg(self.category_weights, cat, 'phonology.category_weights')
            weights.append(float(formula.get('base', 0.0)) + float(formula.get('slope', 0.0)) * agreeableness)
        return weights

    def syllable_patterns_for(self, traits: Dict[str, float], geography: str) -> List[str]:
        """
        Get the syllable pattern list for normalized traits and a geography.

        Duplicates are kept: they weight uniform sampling.
        """
        patterns = list(_require_cfg(self.syllables, 'base', 'phonology.syllables'))
        for rule in self.syllables.get('rules') or []:
            trait = _require_cfg(rule, 'trait', 'phonology.syllables.rules')
            if _passes(rule, traits.get(trait, 0.0)):
                patterns.extend(rule.get('add') or [])
        patterns.extend((self.syllables.get('geography') or {}).get(geography) or [])
        return patterns


@dataclass
class MorphemesConfig:
    """Cultural salience tables for morpheme concepts."""
    salience: Dict[str, Any]
    raw: Dict[str, Any]

    def base_weight(self) -> float:
        return float(_require_cfg(self.salience, 'base', 'morphemes.salience'))

    def floor(self) -> float:
        return float(_require_cfg(self.salience, 'floor', 'morphemes.salience'))

    def geography_bonus(self, geography: str, concept: str) -> float:
        """Bonus for a concept that is thematic to a geography."""
        table = (self.salience.get('geography') or {}).get(geography) or {}
        if concept in (table.get('primary') or []):
            return float(_require_cfg(self.salience, 'primary_bonus', 'morphemes.salience'))
        if concept in (table.get('secondary') or []):
            return float(_require_cfg(self.salience, 'secondary_bonus', 'morphemes.salience'))
        return 0.0

    def trait_bonus(self, traits: Dict[str, float], concept: str) -> float:
        """Sum of trait-rule bonuses that apply to a concept."""
        bonus = 0.0
        for rule in self.salience.get('traits') or []:
            if concept not in (rule.get('concepts') or []):
                continue
            trait = _require_cfg(rule, 'trait', 'morphemes.salience.traits')
            if _passes(rule, traits.get(trait, 0.0)):
                bonus += float(rule.get('bonus', 0.0))
        return bonus


@dataclass
class NamingConfig:
    """Concept pools and formats for personal, place and epithet names."""
    name_length: Dict[str, Any]
    personal: Dict[str, Any]
    place: Dict[str, Any]
    epithet: Dict[str, Any]
    raw: Dict[str, Any]

    def name_length_rule(self, key: str) -> float:
        return float(_require_cfg(self.name_length, key, 'naming.name_length'))

    def name_length_geography(self, geography: str) -> int:
        """Syllable adjustment for a geography (0 when unlisted)."""
        return int((self.name_length.get('geography') or {}).get(geography, 0))

    def personal_pool(self, key: str) -> List[str]:
        return list(_require_cfg(self.personal, key, 'naming.personal'))

    def place_pool(self, key: str) -> List[str]:
        return list(_require_cfg(self.place, key, 'naming.place'))

    def place_features(self, place_type: str, geography: str) -> List[str]:
        """Get feature concepts for a place type (natural features follow geography)."""
        features = _require_cfg(self.place, 'features', 'naming.place')
        table = _require_cfg(features, place_type, 'naming.place.features')
        if isinstance(table, dict):
            return list(_require_cfg(table, geography, f'naming.place.features.{place_type}'))
        return list(table)

    def place_strategy(self, key: str) -> float:
        strategy = _require_cfg(self.place, 'strategy', 'naming.place')
        return float(_require_cfg(strategy, key, 'naming.place.strategy'))

    def founder_suffix_concept(self, place_type: str) -> str:
        founder = _require_cfg(self.place, 'founder', 'naming.place')
        concepts = _require_cfg(founder, 'suffix_concepts', 'naming.place.founder')
        return concepts.get(place_type) or _require_cfg(concepts, 'default', 'naming.place.founder.suffix_concepts')

    def founder_possessive(self, place_type: str) -> str:
        founder = _require_cfg(self.place, 'founder', 'naming.place')
        possessive = _require_cfg(founder, 'possessive', 'naming.place.founder')
        return _require_cfg(possessive, place_type, 'naming.place.founder.possessive')

    def epithet_pool(self, key: str) -> List[str]:
        return list(_require_cfg(self.epithet, key, 'naming.epithet'))

    def characteristic_concepts(self, characteristic: str) -> List[str]:
        table = _require_cfg(self.epithet, 'characteristics', 'naming.epithet')
        return list(_require_cfg(table, characteristic, 'naming.epithet.characteristics'))

    def fallback(self, section: str, key: str) -> str:
        table = getattr(self, section)
        return str(_require_cfg(table, key, f'naming.{section}'))


# =============================================================================
# Loaders
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the phonemes directory."""
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Missing phoneme config: {filepath}")
    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_phonology() -> PhonologyConfig:
    """Load inventories and syllable rules."""
    raw = _load_yaml('phonology.yaml')
    return PhonologyConfig(
        inventory=raw.get('inventory', {}),
        vowels=raw.get('vowels', {}),
        category_weights=raw.get('category_weights', {}),
        syllables=raw.get('syllables', {}),
        raw=raw,
    )


@lru_cache(maxsize=1)
def load_morphemes() -> MorphemesConfig:
    """Load morpheme salience tables."""
    raw = _load_yaml('morphemes.yaml')
    return MorphemesConfig(
        salience=raw.get('salience', {}),
        raw=raw,
    )


@lru_cache(maxsize=1)
def load_naming() -> NamingConfig:
    """Load naming tables."""
    raw = _load_yaml('naming.yaml')
    return NamingConfig(
        name_length=raw.get('name_length', {}),
        personal=raw.get('personal', {}),
        place=raw.get('place', {}),
        epithet=raw.get('epithet', {}),
        raw=raw,
    )


def reload_configs():
    """Clear cached configs so the YAML files are re-read on next access."""
    load_phonology.cache_clear()
    load_morphemes.cache_clear()
    load_naming.cache_clear()


__all__ = [
    'PHONEMES_DIR',
    'CONSONANT_CATEGORIES',
    'PhonologyConfig',
    'MorphemesConfig',
    'NamingConfig',
    'load_phonology',
    'load_morphemes',
    'load_naming',
    'reload_configs',
]
