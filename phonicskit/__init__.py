#!/usr/bin/env python3
"""
phonicskit - English Syllable Segmentation
==========================================

Splits English words into prefix, syllable and suffix segments for
pronunciation hints, and reports their structure.

Quick Start
-----------
    from phonicskit import segment, analyze

    segment("apple")             # ['ap', 'ple']
    segment("library")           # ['li', 'brar', 'y']

    result = analyze("happy")
    result.segments              # ('hap', 'py')
    result.syllable_count        # 2
    result.pronunciation_guide   # 'hap · py'

Modules
-------
    phonicskit.tables     - Static phonics tables and exception dictionary
    phonicskit.scanner    - Vowel nucleus scanning
    phonicskit.classifier - Single-syllable detection
    phonicskit.affixes    - Prefix / suffix stripping
    phonicskit.boundaries - Syllable boundary assignment
    phonicskit.segmenter  - The segmentation pipeline
    phonicskit.analysis   - Structural analysis
    phonicskit.batch      - Concurrent batch processing
    phonicskit.config     - Engine configuration (app.yaml)

CLI Usage
---------
    python -m phonicskit segment apple water
    python -m phonicskit analyze unhappy --json
"""

__version__ = "0.2.0"
__author__ = "phonicskit"

# =============================================================================
# Submodule Imports
# =============================================================================

from . import tables
from . import config

# =============================================================================
# Engine Imports
# =============================================================================

from .segmenter import (
    segment,
    hint_text,
    lookup_exception,
    merge_silent_e,
)

from .analysis import (
    StructuralAnalysis,
    analyze,
)

from .batch import (
    segment_many,
    analyze_many,
)

from .scanner import (
    VowelGroup,
    scan,
    count_nuclei,
)

from .classifier import is_single_syllable
from .affixes import strip_affixes
from .boundaries import assign_boundaries

# =============================================================================
# Table / Config Imports
# =============================================================================

from .tables import (
    PhonicsTables,
    load_tables,
    load_exceptions,
    reload_tables,
)

from .config import (
    EngineConfig,
    engine_config,
    CASE_LOWER,
    CASE_LEGACY,
)


__all__ = [
    '__version__',
    # Pipeline
    'segment',
    'hint_text',
    'analyze',
    'segment_many',
    'analyze_many',
    'StructuralAnalysis',
    # Stages
    'lookup_exception',
    'is_single_syllable',
    'strip_affixes',
    'scan',
    'count_nuclei',
    'VowelGroup',
    'assign_boundaries',
    'merge_silent_e',
    # Tables
    'PhonicsTables',
    'load_tables',
    'load_exceptions',
    'reload_tables',
    # Config
    'EngineConfig',
    'engine_config',
    'CASE_LOWER',
    'CASE_LEGACY',
]
