#!/usr/bin/env python3
"""
Engine Configuration
====================
Runtime options for segmentation and analysis, resolved from app.yaml.

Usage:
    from phonicskit.config import EngineConfig, engine_config

    cfg = engine_config()                      # defaults from app.yaml
    cfg = EngineConfig(case_policy="legacy")   # override a single field
"""

from dataclasses import dataclass
from typing import Optional

from phonicskit.settings import get_setting


# =============================================================================
# Case Policies
# =============================================================================
# lower:  every segment is lower-cased
# legacy: a word classified as single-syllable is returned with its original
#         casing, every other path is lower-cased

CASE_LOWER = "lower"
CASE_LEGACY = "legacy"
CASE_POLICIES = (CASE_LOWER, CASE_LEGACY)


@dataclass
class EngineConfig:
    """Configuration for the segmentation engine."""
    case_policy: Optional[str] = None
    pronunciation_separator: Optional[str] = None   # Used by analyze()
    hint_separator: Optional[str] = None            # Used by hint_text()
    max_workers: Optional[int] = None               # Batch fan-out width

    def __post_init__(self):
        engine = get_setting("engine", {}) or {}
        batch = get_setting("batch", {}) or {}
        if self.case_policy is None:
            self.case_policy = engine.get("case_policy")
        if self.pronunciation_separator is None:
            self.pronunciation_separator = engine.get("pronunciation_separator")
        if self.hint_separator is None:
            self.hint_separator = engine.get("hint_separator")
        if self.max_workers is None:
            self.max_workers = batch.get("max_workers")

        missing = [
            name for name, value in (
                ("engine.case_policy", self.case_policy),
                ("engine.pronunciation_separator", self.pronunciation_separator),
                ("engine.hint_separator", self.hint_separator),
                ("batch.max_workers", self.max_workers),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"engine settings missing in app.yaml: {', '.join(missing)}")

        if self.case_policy not in CASE_POLICIES:
            available = ', '.join(CASE_POLICIES)
            raise ValueError(
                f"Unknown case policy '{self.case_policy}'. "
                f"Available policies: {available}"
            )
        self.max_workers = int(self.max_workers)
        if self.max_workers < 1:
            raise ValueError(f"batch.max_workers must be at least 1, got {self.max_workers}")


# Singleton config
_config = None

def engine_config() -> EngineConfig:
    """Get the singleton engine config instance."""
    global _config
    if _config is None:
        _config = EngineConfig()
    return _config


def reset_engine_config():
    """Drop the cached config so the next call re-reads app.yaml."""
    global _config
    _config = None
