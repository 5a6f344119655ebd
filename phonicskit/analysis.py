#!/usr/bin/env python3
"""
Structural Analysis
===================
Classifies the segments of a word into prefix, suffix, vowel-sound and
consonant-sound buckets and builds a pronunciation guide.

Usage:
    from phonicskit.analysis import analyze

    result = analyze("unhappy")
    result.prefixes             # ('un',)
    result.syllable_count       # 3
    result.pronunciation_guide  # 'un · hap · py'
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from phonicskit.config import engine_config
from phonicskit.scanner import is_vowel_at
from phonicskit.segmenter import segment
from phonicskit.tables import load_tables


@dataclass(frozen=True)
class StructuralAnalysis:
    """Structural report for a single word."""
    word: str
    segments: Tuple[str, ...]
    syllable_count: int
    vowel_sounds: Tuple[str, ...]
    consonant_sounds: Tuple[str, ...]
    prefixes: Tuple[str, ...]
    suffixes: Tuple[str, ...]
    pronunciation_guide: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys consumers expect."""
        return {
            'word': self.word,
            'segments': list(self.segments),
            'syllableCount': self.syllable_count,
            'vowelSounds': list(self.vowel_sounds),
            'consonantSounds': list(self.consonant_sounds),
            'prefixes': list(self.prefixes),
            'suffixes': list(self.suffixes),
            'pronunciationGuide': self.pronunciation_guide,
        }


def voiced_segments(segments: Sequence[str]) -> List[bool]:
    """
    For each segment, whether it contains a vowel letter.

    Letters are judged in the context of the whole word, so the final "y" of
    "li-brar-y" counts as a vowel even though it stands alone.
    """
    word = ''.join(segments).lower()
    flags = []
    offset = 0
    for seg in segments:
        flags.append(any(is_vowel_at(word, offset + k) for k in range(len(seg))))
        offset += len(seg)
    return flags


def analyze(word: str, separator: Optional[str] = None) -> StructuralAnalysis:
    """
    Segment a word and classify its segments.

    The first segment is a prefix if the prefix table lists it, the last a
    suffix if the suffix table lists it; everything else is a vowel sound or,
    when it has no vowel letter, a consonant sound.
    """
    if separator is None:
        separator = engine_config().pronunciation_separator
    tables = load_tables()

    segments = segment(word)
    voiced = voiced_segments(segments)
    last = len(segments) - 1

    vowel_sounds = []
    consonant_sounds = []
    prefixes = []
    suffixes = []
    for i, seg in enumerate(segments):
        key = seg.lower()
        if i == 0 and tables.is_prefix(key):
            prefixes.append(seg)
        elif i == last and tables.is_suffix(key):
            suffixes.append(seg)
        elif voiced[i]:
            vowel_sounds.append(seg)
        else:
            consonant_sounds.append(seg)

    return StructuralAnalysis(
        word=word,
        segments=tuple(segments),
        syllable_count=sum(voiced),
        vowel_sounds=tuple(vowel_sounds),
        consonant_sounds=tuple(consonant_sounds),
        prefixes=tuple(prefixes),
        suffixes=tuple(suffixes),
        pronunciation_guide=separator.join(segments),
    )
