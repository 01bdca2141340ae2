#!/usr/bin/env python3
"""
Terminal UI
===========
Rich-based rendering for CLI results, with a plain-text fallback for pipes
and redirected output.

Usage:
    from phylakit.ui import get_ui

    ui = get_ui()
    ui.show_genome(language.describe())
    ui.show_pairs("Lexicon", ("Concept", "Word"), language.lexicon(["sun", "moon"]).items())
"""

import sys
from typing import Any, Dict, Iterable, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


# Genome summary keys shown as phoneme rows, in display order
PHONEME_ROWS = [
    ("stops", "Stops"),
    ("fricatives", "Fricatives"),
    ("nasals", "Nasals"),
    ("liquids", "Liquids"),
    ("glides", "Glides"),
    ("vowels", "Vowels"),
]


class LanguageUI:
    """Rich renderer for language summaries and name lists."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def show_genome(self, summary: Dict[str, Any]):
        header = Table.grid(padding=(0, 2))
        header.add_column(justify="left")
        header.add_column(justify="left")
        header.add_row(Text("Geography: ", style="dim") + Text(summary['geography'], style="bold"),
                       Text("Seed: ", style="dim") + Text(str(summary['seed']), style="bold"))
        header.add_row(Text("Word order: ", style="dim") + Text(summary['word_order'], style="bold cyan"),
                       Text("Morphology: ", style="dim") + Text(summary['morphology_type'], style="bold"))
        header.add_row(Text("Name pattern: ", style="dim") + Text(summary['pattern'], style="bold green"),
                       Text("Combining: ", style="dim") + Text(summary['combining_rule'], style="bold"))
        self.console.print(Panel(header, title=f"[bold]{summary['id']}[/bold]",
                                 border_style="blue", box=box.ROUNDED))

        table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
        table.add_column("Category")
        table.add_column("Phonemes")
        table.add_column("Weight", justify="right")
        weights = summary.get('category_weights', [])
        for i, (key, label) in enumerate(PHONEME_ROWS):
            phonemes = ' '.join(summary.get(key, [])) or Text("-", style="dim")
            weight = f"{weights[i]:.2f}" if i < len(weights) else ""
            table.add_row(label, phonemes, weight)
        self.console.print(table)

        patterns = ', '.join(summary.get('syllable_patterns', []))
        self.console.print(Text("Syllables: ", style="dim") + Text(patterns))

    def show_pairs(self, title: str, headers: Tuple[str, str], rows: Iterable[Sequence[Any]]):
        table = Table(title=title, box=box.SIMPLE, header_style="bold")
        table.add_column(headers[0], style="dim")
        table.add_column(headers[1], style="bold")
        for left, right in rows:
            table.add_row(str(left), str(right))
        self.console.print(table)

    def show_line(self, text: str, style: str = "bold"):
        self.console.print(Text(text, style=style))

    def show_presets(self, presets: Dict[str, Dict[str, Any]]):
        table = Table(title="Culture Presets", box=box.SIMPLE, header_style="bold")
        table.add_column("Preset", style="bold")
        table.add_column("A/O/C/E/H/Em")
        table.add_column("Geography")
        table.add_column("Seed", justify="right")
        table.add_column("Description", style="dim")
        for name, info in presets.items():
            traits = '/'.join(f"{v:g}" for v in info['traits'].values())
            table.add_row(name, traits, info['geography'], str(info['seed']), info['description'])
        self.console.print(table)


class SimpleUI:
    """Plain-text renderer used when stdout is not a terminal."""

    def show_genome(self, summary: Dict[str, Any]):
        print(f"{summary['id']}")
        print("=" * 60)
        print(f"Geography:    {summary['geography']}")
        print(f"Seed:         {summary['seed']}")
        print(f"Word order:   {summary['word_order']}")
        print(f"Morphology:   {summary['morphology_type']}")
        print(f"Name pattern: {summary['pattern']}")
        print(f"Combining:    {summary['combining_rule']}")
        for key, label in PHONEME_ROWS:
            print(f"{label + ':':<14}{' '.join(summary.get(key, [])) or '-'}")
        print(f"{'Syllables:':<14}{', '.join(summary.get('syllable_patterns', []))}")

    def show_pairs(self, title: str, headers: Tuple[str, str], rows: Iterable[Sequence[Any]]):
        rows = [(str(left), str(right)) for left, right in rows]
        width = max([len(headers[0])] + [len(left) for left, _ in rows]) + 2
        print(title)
        print(f"{headers[0]:<{width}}{headers[1]}")
        print('-' * (width + len(headers[1])))
        for left, right in rows:
            print(f"{left:<{width}}{right}")

    def show_line(self, text: str, style: str = None):
        print(text)

    def show_presets(self, presets: Dict[str, Dict[str, Any]]):
        print("Culture Presets")
        print("=" * 60)
        for name, info in presets.items():
            traits = '/'.join(f"{v:g}" for v in info['traits'].values())
            print(f"  {name:<18} {traits:<22} {info['geography']:<13} seed {info['seed']}")
            print(f"  {'':<18} {info['description']}")


def get_ui(force_plain: bool = False):
    """Get the appropriate renderer for the current stdout."""
    if force_plain or not sys.stdout.isatty():
        return SimpleUI()
    return LanguageUI()


__all__ = [
    'LanguageUI',
    'SimpleUI',
    'get_ui',
]
