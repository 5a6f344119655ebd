#!/usr/bin/env python3
"""
Vowel Group Scanner
===================
Finds vowel nuclei in a word: single vowel letters or the multi-letter
combinations listed in the phonics tables (digraphs, diphthongs, r-controlled
vowels). Every other stage of the pipeline counts syllables through here.

Usage:
    from phonicskit.scanner import scan, count_nuclei

    scan("radio")          # [VowelGroup(1, 1, 'a'), VowelGroup(3, 3, 'i'), VowelGroup(4, 4, 'o')]
    count_nuclei("bike")   # 1 (silent e)
"""

from dataclasses import dataclass
from typing import List, Optional

from phonicskit.tables import PhonicsTables, load_tables

VOWEL_LETTERS = frozenset('aeiou')


@dataclass(frozen=True)
class VowelGroup:
    """A vowel nucleus spanning word[start:end + 1]."""
    start: int
    end: int  # inclusive
    text: str


# =============================================================================
# Letter Classification
# =============================================================================

def is_vowel_at(word: str, index: int) -> bool:
    """
    Check whether the letter at index acts as a vowel.

    a, e, i, o and u always do. y does when it follows a consonant and is
    not followed by a vowel (happy, system, cry; not yes, lawyer).
    """
    char = word[index]
    if char in VOWEL_LETTERS:
        return True
    if char != 'y' or index == 0:
        return False
    if word[index - 1] in VOWEL_LETTERS:
        return False
    return index == len(word) - 1 or word[index + 1] not in VOWEL_LETTERS


def has_vowel(word: str) -> bool:
    """Check whether any letter of the word acts as a vowel."""
    return any(is_vowel_at(word, i) for i in range(len(word)))


def has_syllabic_le(word: str) -> bool:
    """Word ends in consonant + "le" (apple, circle): the "le" is its own syllable."""
    return len(word) >= 3 and word.endswith('le') and not is_vowel_at(word, len(word) - 3)


def has_silent_e(word: str, tables: Optional[PhonicsTables] = None) -> bool:
    """Word ends in a final "e" that carries no vowel sound (bike, hope)."""
    if len(word) <= 3 or not word.endswith('e'):
        return False
    if is_vowel_at(word, len(word) - 2):
        return False
    if has_syllabic_le(word):
        return False
    tables = tables or load_tables()
    # large, badge: keep the vowel count of short words
    if len(word) == 5 and word[-3:-1] in tables.silent_e_keepers:
        return False
    return True


def _is_hiatus_io(word: str, index: int) -> bool:
    """The "io" at index is two syllables (ra-di-o), not one (na-tion)."""
    if index == 0:
        return False
    prev = word[index - 1]
    if prev in ('t', 's') and index + 2 < len(word) and word[index + 2] == 'n':
        return False
    return not is_vowel_at(word, index - 1)


# =============================================================================
# Scanning
# =============================================================================

def _has_loose_silent_e(word: str) -> bool:
    """Final "e" of a word longer than three letters, unless it ends in consonant + "le"."""
    return len(word) > 3 and word.endswith('e') and not has_syllabic_le(word)


def scan(word: str, tables: Optional[PhonicsTables] = None, strict: bool = True) -> List[VowelGroup]:
    """
    Scan a word left to right for vowel nuclei.

    At each position the longest matching vowel combination wins; otherwise a
    single vowel letter forms a group. A silent final "e" forms no group.
    Returns non-overlapping groups ordered by start.

    With strict=False the scan is the rough count used for single-syllable
    detection: "io" is never split, and any final "e" after the third letter
    is silent unless the word ends in consonant + "le" (shoe, large).
    """
    tables = tables or load_tables()
    word = word.lower()
    silent_e = has_silent_e(word, tables) if strict else _has_loose_silent_e(word)
    last = len(word) - 1

    groups = []
    i = 0
    while i < len(word):
        combo = next(
            (c for c in tables.vowel_combinations if word.startswith(c, i)),
            None,
        )
        if combo is not None:
            if strict and combo == 'io' and _is_hiatus_io(word, i):
                groups.append(VowelGroup(i, i, 'i'))
                groups.append(VowelGroup(i + 1, i + 1, 'o'))
                i += 2
                continue
            groups.append(VowelGroup(i, i + len(combo) - 1, combo))
            i += len(combo)
            continue

        if is_vowel_at(word, i) and not (silent_e and i == last):
            groups.append(VowelGroup(i, i, word[i]))
        i += 1

    return groups


def count_nuclei(word: str, tables: Optional[PhonicsTables] = None, strict: bool = True) -> int:
    """Count vowel nuclei (greedy longest-match, silent e ignored). See scan() for strict."""
    return len(scan(word, tables, strict))


__all__ = [
    'VOWEL_LETTERS',
    'VowelGroup',
    'is_vowel_at',
    'has_vowel',
    'has_syllabic_le',
    'has_silent_e',
    'scan',
    'count_nuclei',
]
