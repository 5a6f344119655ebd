#!/usr/bin/env python3
"""
Analysis UI
===========
Rich-based terminal rendering of structural analyses.

Segments are coloured by role: prefix, vowel sound, consonant sound, suffix.

Usage:
    from phonicskit.ui import AnalysisView
    from phonicskit.analysis import analyze

    view = AnalysisView()
    view.show(analyze("unhappy"))
"""

import sys
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from phonicskit.analysis import StructuralAnalysis

# Segment role -> style
ROLE_STYLES = {
    "prefix": "bold cyan",
    "vowel": "bold green",
    "consonant": "yellow",
    "suffix": "bold magenta",
}


def segment_roles(analysis: StructuralAnalysis) -> list:
    """Pair every segment with its role, in word order."""
    roles = []
    last = len(analysis.segments) - 1
    for i, seg in enumerate(analysis.segments):
        if i == 0 and analysis.prefixes:
            roles.append((seg, "prefix"))
        elif i == last and analysis.suffixes:
            roles.append((seg, "suffix"))
        elif seg in analysis.vowel_sounds:
            roles.append((seg, "vowel"))
        else:
            roles.append((seg, "consonant"))
    return roles


class AnalysisView:
    """
    Renders analyses as a table on a Rich console.

    Falls back to plain lines when output is not a terminal or quiet is set.
    """

    def __init__(self, console: Optional[Console] = None, quiet: bool = False):
        self.console = console or Console()
        self.quiet = quiet
        self.use_rich = console is not None or sys.stdout.isatty()

    def _highlight(self, analysis: StructuralAnalysis) -> Text:
        text = Text()
        for i, (seg, role) in enumerate(segment_roles(analysis)):
            if i:
                text.append(" · ", style="dim")
            text.append(seg, style=ROLE_STYLES[role])
        return text

    def _table(self, analyses: Iterable[StructuralAnalysis]) -> Table:
        table = Table(box=box.SIMPLE)
        table.add_column("Word", style="bold")
        table.add_column("Segments")
        table.add_column("Syllables", justify="right")
        table.add_column("Prefix")
        table.add_column("Suffix")

        for a in analyses:
            table.add_row(
                a.word,
                self._highlight(a),
                str(a.syllable_count),
                ", ".join(a.prefixes) or "-",
                ", ".join(a.suffixes) or "-",
            )
        return table

    def show(self, *analyses: StructuralAnalysis):
        """Print one or more analyses."""
        if self.quiet:
            return
        if self.use_rich:
            self.console.print(self._table(analyses))
            return
        for a in analyses:
            print(f"{a.word}: {a.pronunciation_guide} ({a.syllable_count} syllables)")
