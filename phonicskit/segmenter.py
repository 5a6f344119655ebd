#!/usr/bin/env python3
"""
Word Segmentation
=================
Splits an English word into pronunciation units: an optional prefix, one or
more root syllables, and an optional suffix.

Pipeline:
    1. Exception dictionary (authoritative, short-circuits)
    2. Single-syllable classifier (short-circuits)
    3. Affix stripping
    4. Vowel nucleus scan of the root
    5. Boundary assignment and cutting
    6. Silent-e merge with -ful / -less

Usage:
    from phonicskit.segmenter import segment, hint_text

    segment("apple")      # ['ap', 'ple']
    segment("library")    # ['li', 'brar', 'y']
    hint_text("water")    # 'wa  ter'

Segmentation never raises for string input; a word that matches no rule
comes back as a single lower-cased segment.
"""

import logging
from typing import List, Optional, Sequence

from phonicskit.affixes import strip_affixes
from phonicskit.boundaries import assign_boundaries, cut
from phonicskit.classifier import is_single_syllable
from phonicskit.config import CASE_LEGACY, engine_config
from phonicskit.scanner import scan
from phonicskit.tables import PhonicsTables, load_exceptions, load_tables

logger = logging.getLogger(__name__)


def lookup_exception(word: str) -> Optional[List[str]]:
    """Get the hand-authored segmentation for a word, or None."""
    segments = load_exceptions().get(word.lower())
    if segments is None:
        return None
    return list(segments)


def merge_silent_e(syllables: Sequence[str], tables: Optional[PhonicsTables] = None) -> List[str]:
    """Join a syllable ending in "e" with a following "ful" or "less" (hope+less)."""
    tables = tables or load_tables()
    merged = []
    i = 0
    while i < len(syllables):
        current = syllables[i]
        if (i + 1 < len(syllables) and current.endswith('e')
                and syllables[i + 1] in tables.merge_targets):
            current += syllables[i + 1]
            i += 1
        merged.append(current)
        i += 1
    return merged


def _is_word_form(word: str) -> bool:
    return word.isascii() and word.isalpha()


def segment(word: str, case_policy: Optional[str] = None) -> List[str]:
    """
    Split a word into prefix, syllable and suffix segments.

    Args:
        word: A single alphabetic word
        case_policy: "lower" or "legacy" (default from app.yaml). Under
            "legacy" a single-syllable word keeps its original casing.

    Returns:
        Segments whose concatenation equals the lower-cased word. Empty
        input yields []; input with non-letters is returned whole.
    """
    if not isinstance(word, str):
        raise TypeError(f"word must be a string, not {type(word).__name__}")
    if case_policy is None:
        case_policy = engine_config().case_policy

    if not word:
        logger.debug("Empty word, nothing to segment")
        return []

    lowered = word.lower()
    if not _is_word_form(word):
        logger.debug(f"Passing through non-alphabetic input '{word}'")
        return [lowered]

    segments = lookup_exception(lowered)
    if segments is not None:
        logger.debug(f"Exception hit for '{lowered}': {segments}")
        return segments

    tables = load_tables()

    if is_single_syllable(lowered, tables):
        logger.debug(f"'{lowered}' is a single syllable")
        return [word if case_policy == CASE_LEGACY else lowered]

    prefix, root, suffix = strip_affixes(lowered, tables)

    groups = scan(root, tables)
    if not groups:
        return [s for s in (prefix, root, suffix) if s]

    syllables = cut(root, assign_boundaries(root, groups, tables))
    syllables = merge_silent_e(syllables, tables)

    result = []
    if prefix:
        result.append(prefix)
    result.extend(syllables)
    if suffix:
        result.append(suffix)
    return result


def hint_text(word: str, separator: Optional[str] = None) -> str:
    """
    Render a word as spaced-out syllables for display.

    A word that does not split comes back unchanged.
    """
    if separator is None:
        separator = engine_config().hint_separator
    segments = segment(word)
    if len(segments) > 1:
        return separator.join(segments)
    return word
