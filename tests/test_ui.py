"""
Tests for the Analysis UI
=========================
Tests for segment_roles() and AnalysisView in phonicskit/ui.py.
"""

import sys
from pathlib import Path

from rich.console import Console

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonicskit.analysis import analyze
from phonicskit.ui import AnalysisView, segment_roles


class TestSegmentRoles:
    """Tests for segment_roles()."""

    def test_prefix_and_vowels(self):
        """Roles follow the analysis buckets in word order."""
        assert segment_roles(analyze("unhappy")) == [
            ("un", "prefix"), ("hap", "vowel"), ("py", "vowel"),
        ]

    def test_suffix(self):
        """A trailing suffix is marked."""
        assert segment_roles(analyze("kindness"))[-1] == ("ness", "suffix")

    def test_consonant(self):
        """Vowelless segments are consonant sounds."""
        assert segment_roles(analyze("crwth")) == [("crwth", "consonant")]


class TestAnalysisView:
    """Tests for AnalysisView rendering."""

    def test_rich_table(self):
        """With a console the analyses render as a table."""
        console = Console(record=True, width=100)
        AnalysisView(console=console).show(analyze("unhappy"), analyze("kindness"))
        text = console.export_text()
        assert "Syllables" in text
        assert "unhappy" in text
        assert "ness" in text

    def test_plain_fallback(self, capsys):
        """Without a terminal plain lines are printed."""
        AnalysisView().show(analyze("happy"))
        assert capsys.readouterr().out.strip() == "happy: hap · py (2 syllables)"

    def test_quiet(self, capsys):
        """Quiet views print nothing."""
        console = Console(record=True)
        AnalysisView(console=console, quiet=True).show(analyze("happy"))
        assert console.export_text() == ""
        assert capsys.readouterr().out == ""
