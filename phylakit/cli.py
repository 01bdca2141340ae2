#!/usr/bin/env python3
"""
phylakit CLI
============
Command-line interface for generating languages and names.

Usage:
    phylakit translate "warrior strikes enemy" --preset mountain_clans
    phylakit lexicon sun moon fire --geography desert --seed 7
    phylakit names -n 5 --preset desert_nobles --epithets
    phylakit places --type natural --local-geo mountains
    phylakit genome --preset forest_dwellers
    phylakit presets
"""

import argparse
import dataclasses
import json
import logging
import sys

from phylakit import __version__
from phylakit.config import get_preset, list_presets
from phylakit.culture import Geography
from phylakit.language import Language
from phylakit.naming import (
    Characteristic,
    EpithetContext,
    NamePattern,
    PersonalNameContext,
    PlaceNameContext,
    PlaceType,
)
from phylakit.settings import get_setting
from phylakit.ui import get_ui

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

TRAITS = [
    'agreeableness', 'openness', 'conscientiousness',
    'extraversion', 'honesty_humility', 'emotionality',
]

GEOGRAPHIES = [g.value for g in Geography]
PLACE_TYPES = [p.value for p in PlaceType]
NAME_PATTERNS = [p.value for p in NamePattern]
CHARACTERISTICS = list(Characteristic)

DEFAULT_NAME_COUNT = 10

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet and JSON modes."""

    def __init__(self, quiet: bool = False, as_json: bool = False):
        self.quiet = quiet
        self.as_json = as_json
        self.ui = get_ui(force_plain=quiet)

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def json(self, data):
        print(json.dumps(data, indent=2, ensure_ascii=False))

    def values(self, values):
        """Bare values, one per line (used by --quiet)."""
        for value in values:
            print(value)


def setup_logging(verbose: bool = False):
    level_name = 'DEBUG' if verbose else str(get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=get_setting('logging.format', '%(levelname)s %(name)s: %(message)s'),
        stream=sys.stderr,
    )


def build_language(args) -> Language:
    """Resolve preset, geography, seed and trait overrides into a Language."""
    preset = get_preset(args.preset or get_setting('defaults.preset', 'balanced'))

    culture = preset.culture
    overrides = {t: getattr(args, t) for t in TRAITS if getattr(args, t, None) is not None}
    if overrides:
        culture = dataclasses.replace(culture, **overrides)

    geography_name = args.geography or get_setting('defaults.geography')
    geography = Geography.from_name(geography_name) if geography_name else preset.geography

    seed = args.seed
    if seed is None:
        seed = get_setting('defaults.seed')
    if seed is None:
        seed = preset.seed

    pattern = NamePattern.from_name(args.pattern) if getattr(args, 'pattern', None) else None

    logger.debug(f"Building language: preset={preset.name} geography={geography.value} seed={seed}")
    return Language.from_culture(culture, geography, int(seed), pattern=pattern)


def default_count() -> int:
    return int(get_setting('cli.name_count', DEFAULT_NAME_COUNT))


# =============================================================================
# Commands
# =============================================================================

def cmd_translate(args, out: Output):
    """Translate a phrase."""
    language = build_language(args)
    phrase = ' '.join(args.words)
    translation = language.translate_phrase(phrase)

    if out.as_json:
        out.json({
            'language': language.id,
            'word_order': language.word_order().value,
            'phrase': phrase,
            'translation': translation,
        })
    elif out.quiet:
        out.values([translation])
    else:
        out.ui.show_line(f"{phrase}  ->  {translation}")
        out.ui.show_line(f"({language.id}, {language.word_order().value})", style="dim")
    return 0


def cmd_lexicon(args, out: Output):
    """Translate concepts word by word."""
    language = build_language(args)
    lexicon = language.lexicon(args.concepts)

    if out.as_json:
        out.json(lexicon)
    elif out.quiet:
        out.values(f"{concept}\t{word}" for concept, word in lexicon.items())
    else:
        out.ui.show_pairs(f"Lexicon ({language.id})", ("Concept", "Word"), lexicon.items())
    return 0


def cmd_names(args, out: Output):
    """Generate personal names."""
    language = build_language(args)
    naming = language.naming
    count = args.count if args.count is not None else default_count()

    rows = []
    for entity_id in range(args.start_id, args.start_id + count):
        context = PersonalNameContext.simple(entity_id)
        if args.parent:
            context = context.with_parent(args.parent)
        name = naming.generate_personal_name(context)

        if args.epithets:
            characteristic = CHARACTERISTICS[entity_id % len(CHARACTERISTICS)]
            epithet_context = EpithetContext(entity_id).with_characteristic(characteristic)
            name = naming.generate_name_with_epithet(name, epithet_context)
        rows.append((entity_id, name))

    if out.as_json:
        out.json({
            'language': language.id,
            'pattern': naming.pattern.value,
            'names': [{'id': i, 'name': n} for i, n in rows],
        })
    elif out.quiet:
        out.values(name for _, name in rows)
    else:
        out.ui.show_pairs(f"Names ({naming.pattern.value})", ("ID", "Name"), rows)
    return 0


def cmd_places(args, out: Output):
    """Generate place names."""
    language = build_language(args)
    naming = language.naming
    count = args.count if args.count is not None else default_count()
    place_type = PlaceType.from_name(args.type)
    local_geography = Geography.from_name(args.local_geo) if args.local_geo else None

    rows = []
    for place_id in range(args.start_id, args.start_id + count):
        context = PlaceNameContext(place_id, place_type)
        if local_geography is not None:
            context = context.with_geography(local_geography)
        if args.founder:
            context = context.with_founder(args.founder)
        if args.event:
            context = context.with_event(args.event)
        rows.append((place_id, naming.generate_place_name(context)))

    if out.as_json:
        out.json({
            'language': language.id,
            'place_type': place_type.value,
            'places': [{'id': i, 'name': n} for i, n in rows],
        })
    elif out.quiet:
        out.values(name for _, name in rows)
    else:
        out.ui.show_pairs(f"Places ({place_type.value})", ("ID", "Name"), rows)
    return 0


def cmd_genome(args, out: Output):
    """Show the language's genome."""
    language = build_language(args)
    summary = language.describe()

    if out.as_json or out.quiet:
        out.json(summary)
    else:
        out.ui.show_genome(summary)
    return 0


def cmd_presets(args, out: Output):
    """List culture presets."""
    presets = list_presets()

    if out.as_json:
        out.json(presets)
    elif out.quiet:
        out.values(presets.keys())
    else:
        out.ui.show_presets(presets)
    return 0


# =============================================================================
# Main
# =============================================================================

def _language_options() -> argparse.ArgumentParser:
    """Options shared by every command that builds a language."""
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument('--preset', '-p', help='Culture preset (see `presets`)')
    p.add_argument('--geography', '-g', help=f'Geography ({", ".join(GEOGRAPHIES)})')
    p.add_argument('--seed', '-s', type=int, help='Language seed')
    for trait in TRAITS:
        p.add_argument(f'--{trait.replace("_", "-")}', dest=trait, type=float, metavar='SCORE',
                       help=f'Override {trait.replace("_", "-")} (1-5)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    return p


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='phylakit',
        description='phylakit - Deterministic language and name generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s translate "warrior strikes enemy" --preset mountain_clans
  %(prog)s lexicon sun moon fire --geography desert --seed 7
  %(prog)s names -n 5 --preset desert_nobles --epithets
  %(prog)s names --pattern descriptive --preset river_scholars
  %(prog)s places --type natural --local-geo mountains
  %(prog)s genome --preset forest_dwellers
  %(prog)s presets
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Print bare results only')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')

    common = _language_options()
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- translate ---
    p = subparsers.add_parser('translate', aliases=['t'], parents=[common], help='Translate a phrase')
    p.add_argument('words', nargs='+', help='Phrase (Subject Verb Object ...)')

    # --- lexicon ---
    p = subparsers.add_parser('lexicon', parents=[common], help='Translate concepts word by word')
    p.add_argument('concepts', nargs='+', help='Concepts to translate')

    # --- names ---
    p = subparsers.add_parser('names', aliases=['n'], parents=[common], help='Generate personal names')
    p.add_argument('-n', '--count', type=int, help='Number of names (default: cli.name_count)')
    p.add_argument('--start-id', type=int, default=1, help='First entity ID (default: 1)')
    p.add_argument('--parent', help='Parent name for patronymic cultures')
    p.add_argument('--pattern', choices=NAME_PATTERNS, help='Override the culture\'s naming pattern')
    p.add_argument('--epithets', '-e', action='store_true', help='Append epithets where the culture uses them')

    # --- places ---
    p = subparsers.add_parser('places', parents=[common], help='Generate place names')
    p.add_argument('-n', '--count', type=int, help='Number of places (default: cli.name_count)')
    p.add_argument('--start-id', type=int, default=1, help='First place ID (default: 1)')
    p.add_argument('--type', '-t', choices=PLACE_TYPES, default='settlement', help='Place type')
    p.add_argument('--founder', help='Founder name')
    p.add_argument('--event', help='Historical event concept')
    p.add_argument('--local-geo', help='Local geography for descriptive names')

    # --- genome ---
    subparsers.add_parser('genome', aliases=['g'], parents=[common], help='Show the language genome')

    # --- presets ---
    p = subparsers.add_parser('presets', help='List culture presets')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        't': 'translate',
        'n': 'names',
        'g': 'genome',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet, as_json=getattr(args, 'json', False))

    commands = {
        'translate': cmd_translate,
        'lexicon': cmd_lexicon,
        'names': cmd_names,
        'places': cmd_places,
        'genome': cmd_genome,
        'presets': cmd_presets,
    }

    handler = commands.get(command)
    if handler:
        try:
            setup_logging(args.verbose)
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
