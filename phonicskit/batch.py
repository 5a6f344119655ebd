#!/usr/bin/env python3
"""
Batch Segmentation
==================
Fans segmentation and analysis of many words out over a thread pool.

The engine holds no mutable state, so workers share nothing but the
read-only tables; results come back in input order.

Usage:
    from phonicskit.batch import segment_many, analyze_many

    segment_many(["apple", "water"])           # [['ap', 'ple'], ['wa', 'ter']]
    analyze_many(words, max_workers=4)
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, TypeVar

from phonicskit.analysis import StructuralAnalysis, analyze
from phonicskit.config import engine_config
from phonicskit.segmenter import segment
from phonicskit.tables import load_exceptions, load_tables

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _run(func: Callable[[str], T], words: Iterable[str], max_workers: Optional[int]) -> List[T]:
    words = list(words)
    if not words:
        return []
    # Resolve config and tables before the pool starts so workers only read them
    cfg = engine_config()
    if max_workers is None:
        max_workers = cfg.max_workers
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")
    load_tables()
    load_exceptions()

    workers = min(max_workers, len(words))
    start = time.time()
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(func, words))
    logger.debug(f"Processed {len(words)} words with {workers} workers in {time.time() - start:.3f}s")
    return results


def segment_many(words: Iterable[str], max_workers: Optional[int] = None) -> List[List[str]]:
    """Segment many words concurrently, preserving input order."""
    return _run(segment, words, max_workers)


def analyze_many(words: Iterable[str], max_workers: Optional[int] = None) -> List[StructuralAnalysis]:
    """Analyze many words concurrently, preserving input order."""
    return _run(analyze, words, max_workers)


def read_word_list(lines: Iterable[str]) -> List[str]:
    """Extract words from lines of text, skipping blanks and # comments."""
    words = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        words.append(line)
    return words
