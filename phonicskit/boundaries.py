#!/usr/bin/env python3
"""
Syllable boundary assignment.

Given the vowel nuclei of a root, decides where each consonant run between
two nuclei is cut:

    V-V      boundary before the second vowel     (li-on)
    V-CV     single consonant opens the syllable  (wa-ter)
    VC-CV    doubled or unrelated pair is split   (hap-py, win-ter)
    V-CCV    onset blend stays together           (ba-sket)
    VC-CCV   longest blend at the tail opens      (hun-dred)
    -Cle     consonant + le forms the last syllable (ap-ple, cir-cle)
"""

from typing import List, Optional, Sequence

from phonicskit.scanner import VowelGroup, has_syllabic_le
from phonicskit.tables import PhonicsTables, load_tables


def _is_trailing_le(root: str, group: VowelGroup) -> bool:
    return has_syllabic_le(root) and group.start == group.end == len(root) - 1


def _boundary(root: str, current: VowelGroup, following: VowelGroup,
              is_last_pair: bool, tables: PhonicsTables) -> int:
    """Cut index for the consonant run between two adjacent nuclei."""
    after = current.end + 1
    consonants = root[after:following.start]

    if is_last_pair and consonants and _is_trailing_le(root, following):
        if len(consonants) == 1:
            return after
        # Keep the consonant before "l" with the -le syllable
        return current.end + len(consonants) - 1

    if len(consonants) <= 1:
        return after

    if len(consonants) == 2:
        if consonants[0] == consonants[1]:
            return after + 1
        if consonants in tables.onset_blends:
            return after
        return after + 1

    for blend in tables.onset_blends:
        if consonants.endswith(blend):
            return following.start - len(blend)
    return after + 1


def assign_boundaries(root: str, groups: Sequence[VowelGroup],
                      tables: Optional[PhonicsTables] = None) -> List[int]:
    """
    Compute syllable cut indices for a root.

    Returns increasing indices starting at 0 and ending at len(root); with
    fewer than two nuclei the root is a single syllable.
    """
    tables = tables or load_tables()
    boundaries = [0]
    for i in range(len(groups) - 1):
        is_last_pair = i == len(groups) - 2
        boundaries.append(_boundary(root, groups[i], groups[i + 1], is_last_pair, tables))
    boundaries.append(len(root))
    return boundaries


def cut(root: str, boundaries: Sequence[int]) -> List[str]:
    """Slice a root at the given boundaries, dropping empty pieces."""
    pieces = (root[start:end] for start, end in zip(boundaries, boundaries[1:]))
    return [piece for piece in pieces if piece]
