#!/usr/bin/env python3
"""
Single-syllable classification: decides whether a word needs no splitting.
"""

from typing import Optional

from phonicskit.scanner import count_nuclei, has_syllabic_le
from phonicskit.tables import PhonicsTables, load_tables

MAX_SINGLE_SYLLABLE_LENGTH = 6
MIN_MULTI_SYLLABLE_LENGTH = 4


def is_single_syllable(word: str, tables: Optional[PhonicsTables] = None) -> bool:
    """
    Heuristically decide whether a word is a single syllable.

    Rules are tried in order and the first that applies decides:
    length, the confirmed word lists, the consonant + "le" ending,
    known one-syllable endings, then a vowel nucleus count.
    """
    tables = tables or load_tables()
    word = word.lower()

    if len(word) > MAX_SINGLE_SYLLABLE_LENGTH:
        return False
    if len(word) < MIN_MULTI_SYLLABLE_LENGTH:
        return True
    if word in tables.single_syllable_words:
        return True
    if word in tables.multi_syllable_words:
        return False

    # table, circle, apple
    if has_syllabic_le(word):
        return False

    if any(word.endswith(ending) for ending in tables.single_syllable_endings):
        return True

    # Rough count: keeps large, shoe and lion whole
    return count_nuclei(word, tables, strict=False) == 1
