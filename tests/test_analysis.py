"""
Tests for Structural Analysis
=============================
Tests for analyze(), StructuralAnalysis and voiced_segments() in
phonicskit/analysis.py.
"""

import pytest
import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonicskit.analysis import StructuralAnalysis, analyze, voiced_segments
from phonicskit.segmenter import segment


class TestAnalyze:
    """Tests for analyze()."""

    def test_plain_word(self):
        """A word with no affixes has only vowel sounds."""
        result = analyze("happy")
        assert result.segments == ("hap", "py")
        assert result.syllable_count == 2
        assert result.vowel_sounds == ("hap", "py")
        assert result.consonant_sounds == ()
        assert result.prefixes == ()
        assert result.suffixes == ()
        assert result.pronunciation_guide == "hap · py"

    def test_prefix(self):
        """A leading prefix segment is reported as a prefix."""
        result = analyze("unhappy")
        assert result.prefixes == ("un",)
        assert result.vowel_sounds == ("hap", "py")
        assert result.syllable_count == 3
        assert result.pronunciation_guide == "un · hap · py"

    def test_suffix(self):
        """A trailing suffix segment is reported as a suffix."""
        result = analyze("kindness")
        assert result.suffixes == ("ness",)
        assert result.vowel_sounds == ("kind",)
        assert result.syllable_count == 2

    def test_consonant_y_ending_not_suffix(self):
        """A final consonant + y syllable is a vowel sound, as in happy."""
        result = analyze("pretty")
        assert result.segments == ("pret", "ty")
        assert result.suffixes == ()
        assert result.vowel_sounds == ("pret", "ty")

    def test_final_y_counts(self):
        """A lone final y is voiced."""
        result = analyze("library")
        assert result.segments == ("li", "brar", "y")
        assert result.syllable_count == 3

    def test_single_segment_prefix(self):
        """A one-segment word listed as a prefix is classified as a prefix."""
        result = analyze("in")
        assert result.prefixes == ("in",)
        assert result.syllable_count == 1

    def test_no_vowels(self):
        """A vowelless word is a consonant sound with no syllables."""
        result = analyze("crwth")
        assert result.consonant_sounds == ("crwth",)
        assert result.syllable_count == 0

    def test_empty(self):
        """Empty input gives an empty analysis."""
        result = analyze("")
        assert result.segments == ()
        assert result.syllable_count == 0
        assert result.pronunciation_guide == ""

    def test_not_a_string(self):
        """Non-string input raises TypeError."""
        with pytest.raises(TypeError):
            analyze(42)

    def test_word_preserved(self):
        """The word field keeps the input as given."""
        assert analyze("Water").word == "Water"

    def test_custom_separator(self):
        """The pronunciation separator can be overridden."""
        assert analyze("water", separator="-").pronunciation_guide == "wa-ter"

    @pytest.mark.parametrize("word", ["unhappy", "kindness", "computer", "international", "library"])
    def test_segments_match_segment(self, word):
        """analyze() reuses segment()."""
        assert list(analyze(word).segments) == segment(word)

    @pytest.mark.parametrize("word", ["unhappy", "kindness", "computer", "crwth", "apple"])
    def test_every_segment_classified(self, word):
        """Each segment lands in exactly one bucket."""
        result = analyze(word)
        buckets = (result.vowel_sounds + result.consonant_sounds
                   + result.prefixes + result.suffixes)
        assert sorted(buckets) == sorted(result.segments)


class TestStructuralAnalysis:
    """Tests for the StructuralAnalysis record."""

    def test_frozen(self):
        """Analyses cannot be modified."""
        result = analyze("happy")
        with pytest.raises(FrozenInstanceError):
            result.syllable_count = 5

    def test_to_dict_keys(self):
        """to_dict() uses camelCase keys."""
        data = analyze("unhappy").to_dict()
        assert data == {
            "word": "unhappy",
            "segments": ["un", "hap", "py"],
            "syllableCount": 3,
            "vowelSounds": ["hap", "py"],
            "consonantSounds": [],
            "prefixes": ["un"],
            "suffixes": [],
            "pronunciationGuide": "un · hap · py",
        }

    def test_construct_directly(self):
        """Records can be built by hand."""
        record = StructuralAnalysis(
            word="cat", segments=("cat",), syllable_count=1,
            vowel_sounds=("cat",), consonant_sounds=(), prefixes=(),
            suffixes=(), pronunciation_guide="cat",
        )
        assert record.to_dict()["syllableCount"] == 1


class TestVoicedSegments:
    """Tests for voiced_segments()."""

    def test_word_context(self):
        """Letters are judged within the whole word."""
        assert voiced_segments(["li", "brar", "y"]) == [True, True, True]

    def test_consonant_y(self):
        """A y before a vowel is not voiced."""
        assert voiced_segments(["y", "es"]) == [False, True]

    def test_no_vowel(self):
        """Vowelless segments are not voiced."""
        assert voiced_segments(["crwth"]) == [False]
