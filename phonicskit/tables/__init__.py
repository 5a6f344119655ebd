#!/usr/bin/env python3
"""
Phonics Table Loader
====================
Loads the static reference tables used by the segmentation pipeline from the
YAML files in this directory.

Usage:
    from phonicskit.tables import load_tables, load_exceptions

    tables = load_tables()
    tables.vowel_combinations   # longest-first
    exceptions = load_exceptions()
    exceptions["library"]       # ('li', 'brar', 'y')
"""

import yaml
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Tuple, Any, Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache


# =============================================================================
# Configuration Path
# =============================================================================

TABLES_DIR = Path(__file__).parent


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

@dataclass(frozen=True)
class ShortSuffixRule:
    """A short suffix and the root endings it may follow."""
    suffix: str
    endings: Tuple[str, ...]

    def allows(self, remainder: str) -> bool:
        """Check whether the root left after stripping ends acceptably."""
        return any(remainder.endswith(ending) for ending in self.endings)


@dataclass(frozen=True)
class PhonicsTables:
    """Container for the loaded phonics tables. All sequences are longest-first."""
    vowel_combinations: Tuple[str, ...]
    onset_blends: Tuple[str, ...]
    prefixes: Tuple[str, ...]
    suffixes: Tuple[str, ...]
    single_syllable_words: frozenset
    multi_syllable_words: frozenset
    single_syllable_endings: Tuple[str, ...]
    short_suffix_rules: Mapping[str, ShortSuffixRule]
    false_positive_roots: Tuple[str, ...]
    silent_e_keepers: frozenset
    merge_targets: frozenset

    def is_prefix(self, segment: str) -> bool:
        return segment in self.prefixes

    def is_suffix(self, segment: str) -> bool:
        return segment in self.suffixes

    def get_short_suffix_rule(self, suffix: str):
        """Get the root-ending rule for a short suffix, or None."""
        return self.short_suffix_rules.get(suffix)


# =============================================================================
# Helpers
# =============================================================================

REQUIRED_KEYS = (
    'vowel_combinations',
    'onset_blends',
    'prefixes',
    'suffixes',
    'single_syllable_words',
    'multi_syllable_words',
    'single_syllable_endings',
    'short_suffix_rules',
    'false_positive_roots',
    'silent_e_keepers',
    'merge_targets',
)


def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the tables directory."""
    filepath = TABLES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Phonics table not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _words(values: Iterable[Any], key: str) -> Tuple[str, ...]:
    """Normalize a YAML list to lower-case strings, rejecting non-strings."""
    words = []
    for value in values:
        if not isinstance(value, str) or not value:
            raise ValueError(f"{key} entries must be non-empty strings, got {value!r}")
        words.append(value.lower())
    return tuple(words)


def longest_first(entries: Iterable[str]) -> Tuple[str, ...]:
    """
    Order table entries for greedy longest-match scanning.

    Duplicates are dropped (first occurrence wins) and equal-length entries
    keep their relative order.
    """
    unique = list(dict.fromkeys(entries))
    return tuple(sorted(unique, key=len, reverse=True))


# =============================================================================
# Loader Functions
# =============================================================================

@lru_cache(maxsize=1)
def load_tables() -> PhonicsTables:
    """Load the phonics reference tables."""
    raw = _load_yaml('phonics.yaml')

    missing = [key for key in REQUIRED_KEYS if not raw.get(key)]
    if missing:
        raise ValueError(f"phonics.yaml is missing tables: {', '.join(missing)}")

    rules = {}
    for suffix, endings in raw['short_suffix_rules'].items():
        suffix = str(suffix).lower()
        rules[suffix] = ShortSuffixRule(
            suffix=suffix,
            endings=_words(endings or [], f'short_suffix_rules.{suffix}'),
        )

    return PhonicsTables(
        vowel_combinations=longest_first(_words(raw['vowel_combinations'], 'vowel_combinations')),
        onset_blends=longest_first(_words(raw['onset_blends'], 'onset_blends')),
        prefixes=longest_first(_words(raw['prefixes'], 'prefixes')),
        suffixes=longest_first(_words(raw['suffixes'], 'suffixes')),
        single_syllable_words=frozenset(_words(raw['single_syllable_words'], 'single_syllable_words')),
        multi_syllable_words=frozenset(_words(raw['multi_syllable_words'], 'multi_syllable_words')),
        single_syllable_endings=longest_first(
            _words(raw['single_syllable_endings'], 'single_syllable_endings')
        ),
        short_suffix_rules=MappingProxyType(rules),
        false_positive_roots=_words(raw['false_positive_roots'], 'false_positive_roots'),
        silent_e_keepers=frozenset(_words(raw['silent_e_keepers'], 'silent_e_keepers')),
        merge_targets=frozenset(_words(raw['merge_targets'], 'merge_targets')),
    )


@lru_cache(maxsize=1)
def load_exceptions() -> Mapping[str, Tuple[str, ...]]:
    """
    Load the exception dictionary (word -> hand-authored segments).

    Raises ValueError when an entry does not spell its own word back.
    """
    raw = _load_yaml('exceptions.yaml')

    exceptions = {}
    for word, segments in raw.items():
        word = str(word).lower()
        segments = _words(segments or [], f'exceptions.{word}')
        if ''.join(segments) != word:
            raise ValueError(
                f"Exception entry '{word}' does not reconstruct its word: {'-'.join(segments)}"
            )
        exceptions[word] = segments

    return MappingProxyType(exceptions)


def reload_tables():
    """Clear cached tables and reload from disk."""
    load_tables.cache_clear()
    load_exceptions.cache_clear()


__all__ = [
    'TABLES_DIR',
    'PhonicsTables',
    'ShortSuffixRule',
    'load_tables',
    'load_exceptions',
    'reload_tables',
    'longest_first',
]
