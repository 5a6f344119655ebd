"""
Tests for Single-Syllable Classification
========================================
Tests for is_single_syllable() in phonicskit/classifier.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonicskit.classifier import is_single_syllable


class TestLengthRules:
    """Length short-circuits."""

    @pytest.mark.parametrize("word", ["a", "at", "cat", "sky"])
    def test_short_words(self, word):
        """Words of three letters or fewer are one syllable."""
        assert is_single_syllable(word)

    def test_long_words(self):
        """Words longer than six letters are never one syllable."""
        assert not is_single_syllable("strength")
        assert not is_single_syllable("thoughts")


class TestWordLists:
    """Confirmed single / multi syllable lists."""

    @pytest.mark.parametrize("word", ["house", "knife", "rhythm", "tough", "bought"])
    def test_confirmed_single(self, word):
        """Listed single-syllable words."""
        assert is_single_syllable(word)

    @pytest.mark.parametrize("word", ["happy", "table", "circle", "apple", "water"])
    def test_confirmed_multi(self, word):
        """Listed multi-syllable words."""
        assert not is_single_syllable(word)


class TestPatternRules:
    """Ending patterns and nucleus counting."""

    @pytest.mark.parametrize("word", ["candle", "bottle", "ample"])
    def test_consonant_le_is_multi(self, word):
        """Consonant + le endings are multi-syllable."""
        assert not is_single_syllable(word)

    @pytest.mark.parametrize("word", ["spite", "strife", "blouse"])
    def test_single_endings(self, word):
        """Known one-syllable endings."""
        assert is_single_syllable(word)

    @pytest.mark.parametrize("word", ["bike", "make", "knight", "style", "play"])
    def test_one_nucleus(self, word):
        """Words with a single vowel nucleus."""
        assert is_single_syllable(word)

    @pytest.mark.parametrize("word", ["large", "badge", "judge", "hinge", "shoe"])
    def test_final_e_not_counted(self, word):
        """Any final e of a short word is silent for the nucleus count."""
        assert is_single_syllable(word)

    @pytest.mark.parametrize("word", ["lion", "riot"])
    def test_io_counted_once(self, word):
        """io is one nucleus for the count."""
        assert is_single_syllable(word)

    @pytest.mark.parametrize("word", ["basket", "radio", "sadly", "center"])
    def test_several_nuclei(self, word):
        """Words with more than one nucleus."""
        assert not is_single_syllable(word)

    def test_case_insensitive(self):
        """Classification ignores case."""
        assert is_single_syllable("Bike")
        assert not is_single_syllable("HAPPY")
