#!/usr/bin/env python3
"""
Culture Presets
===============
Named cultural profiles with a default geography and seed, so a language
can be requested by name instead of six trait scores.
"""

from dataclasses import dataclass
from typing import Optional

from .culture import CulturalProfile, Geography


# =============================================================================
# Preset Table
# =============================================================================
# Traits are listed as (agreeableness, openness, conscientiousness,
# extraversion, honesty_humility, emotionality).

CULTURE_PRESETS = {
    "coastal_folk": {
        "traits": (4.0, 3.0, 2.0, 3.0, 3.0, 4.0),
        "geography": "coastal",
        "seed": 1001,
        "description": "Agreeable, emotional seafarers; open syllables and flowing names",
    },
    "mountain_warriors": {
        "traits": (1.0, 2.0, 4.0, 3.0, 3.0, 2.0),
        "geography": "mountains",
        "seed": 1002,
        "description": "Disagreeable, disciplined highlanders; harsh stops and patronymics",
    },
    "river_scholars": {
        "traits": (3.0, 4.0, 4.0, 3.0, 4.0, 3.0),
        "geography": "river_valley",
        "seed": 1003,
        "description": "Curious, orderly valley folk; rich inventory and hyphenated compounds",
    },
    "coastal_mariners": {
        "traits": (4.5, 3.0, 2.5, 4.0, 4.0, 4.5),
        "geography": "coastal",
        "seed": 12345,
        "description": "Warm, expressive sailors",
    },
    "mountain_clans": {
        "traits": (2.0, 2.5, 4.5, 3.0, 3.5, 2.0),
        "geography": "mountains",
        "seed": 54321,
        "description": "Stern clan society with verb-final grammar",
    },
    "desert_nobles": {
        "traits": (2.5, 4.0, 3.0, 4.5, 1.5, 3.0),
        "geography": "desert",
        "seed": 99999,
        "description": "Status-conscious nobility with titled, elaborate names",
    },
    "forest_dwellers": {
        "traits": (4.0, 4.8, 3.0, 3.0, 3.5, 3.5),
        "geography": "forest",
        "seed": 77777,
        "description": "Imaginative woodland culture; compound names and mythic places",
    },
    "balanced": {
        "traits": (3.0, 3.0, 3.0, 3.0, 3.0, 3.0),
        "geography": "plains",
        "seed": 12345,
        "description": "Neutral midpoint on every trait",
    },
}


@dataclass(frozen=True)
class CulturePreset:
    """A resolved preset."""
    name: str
    culture: CulturalProfile
    geography: Geography
    seed: int
    description: str = ""


def get_preset(name: Optional[str]) -> CulturePreset:
    """
    Resolve a culture preset by name.

    Raises:
        ValueError: If the preset name is not found
    """
    key = str(name or "").strip().lower().replace('-', '_')
    entry = CULTURE_PRESETS.get(key)
    if entry is None:
        available = ', '.join(sorted(CULTURE_PRESETS.keys()))
        raise ValueError(f"Unknown preset '{name}'. Available presets: {available}")

    return CulturePreset(
        name=key,
        culture=CulturalProfile(*entry["traits"]),
        geography=Geography.from_name(entry["geography"]),
        seed=entry["seed"],
        description=entry["description"],
    )


def list_presets() -> dict:
    """List all presets with their traits, geography, seed and description."""
    return {
        name: {
            "traits": CulturalProfile(*p["traits"]).to_dict(),
            "geography": p["geography"],
            "seed": p["seed"],
            "description": p["description"],
        }
        for name, p in CULTURE_PRESETS.items()
    }


__all__ = [
    "CULTURE_PRESETS",
    "CulturePreset",
    "get_preset",
    "list_presets",
]
