#!/usr/bin/env python3
"""
Affix Stripping
===============
Removes at most one recognized prefix and one recognized suffix from a word
before its root is split into syllables.

Both passes scan their table longest-first and take the first entry that
survives the legitimacy checks, so "station" loses "tion" rather than "on".
"""

import logging
from typing import Optional, Tuple

from phonicskit.scanner import count_nuclei, has_syllabic_le
from phonicskit.tables import PhonicsTables, load_tables

logger = logging.getLogger(__name__)

MIN_ROOT_LENGTH = 3
SHORT_SUFFIX_MAX = 3
WORDLIKE_ROOT_LENGTH = 4
WORDLIKE_ROOT_NUCLEI = 2
UNRULED_ROOT_LIMIT = 6


def strip_prefix(word: str, tables: Optional[PhonicsTables] = None) -> Tuple[Optional[str], str]:
    """
    Strip one prefix from the start of a word.

    A prefix is accepted when the rest of the word is at least two letters
    longer than the prefix and still contains a vowel nucleus.

    Returns (prefix or None, remainder).
    """
    tables = tables or load_tables()
    for prefix in tables.prefixes:
        if not word.startswith(prefix):
            continue
        remainder = word[len(prefix):]
        if len(remainder) < len(prefix) + 2:
            continue
        if count_nuclei(remainder, tables) < 1:
            continue
        return prefix, remainder
    return None, word


def _suffix_rejection(word: str, suffix: str, tables: PhonicsTables) -> Optional[str]:
    """Return why suffix cannot be stripped from word, or None if it can."""
    if suffix == 'le' and has_syllabic_le(word):
        return "syllabic le"

    remainder = word[:-len(suffix)]
    if len(remainder) < MIN_ROOT_LENGTH:
        return "root too short"
    nuclei = count_nuclei(remainder, tables)
    if nuclei == 0:
        return "root has no vowel"

    # Root already looks like a whole word: only well-attested short suffixes
    if (len(suffix) <= SHORT_SUFFIX_MAX and nuclei >= WORDLIKE_ROOT_NUCLEI
            and len(remainder) >= WORDLIKE_ROOT_LENGTH):
        rule = tables.get_short_suffix_rule(suffix)
        if rule is not None:
            if not rule.allows(remainder):
                return f"root ending not valid before -{suffix}"
        elif len(remainder) >= UNRULED_ROOT_LIMIT:
            return "long root"

    if any(remainder.endswith(root) for root in tables.false_positive_roots):
        return "false-positive root"

    return None


def strip_suffix(word: str, tables: Optional[PhonicsTables] = None) -> Tuple[str, Optional[str]]:
    """
    Strip one suffix from the end of a word.

    Returns (remainder, suffix or None).
    """
    tables = tables or load_tables()
    for suffix in tables.suffixes:
        if not word.endswith(suffix):
            continue
        reason = _suffix_rejection(word, suffix, tables)
        if reason is not None:
            logger.debug(f"Rejected suffix -{suffix} for '{word}': {reason}")
            continue
        return word[:-len(suffix)], suffix
    return word, None


def strip_affixes(word: str, tables: Optional[PhonicsTables] = None
                  ) -> Tuple[Optional[str], str, Optional[str]]:
    """
    Strip a prefix, then a suffix, from a lower-case word.

    Returns (prefix or None, root, suffix or None).
    """
    tables = tables or load_tables()
    prefix, rest = strip_prefix(word, tables)
    root, suffix = strip_suffix(rest, tables)
    if prefix or suffix:
        logger.debug(f"Affixes for '{word}': prefix={prefix!r} root={root!r} suffix={suffix!r}")
    return prefix, root, suffix
