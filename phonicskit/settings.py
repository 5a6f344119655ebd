#!/usr/bin/env python3
"""
Application settings for phonicskit, read from configs/app.yaml.

    get_setting("engine.case_policy")   # 'lower'
    get_setting("batch.max_workers")    # 8
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"

# Sections the engine cannot start without
REQUIRED_SECTIONS = ("engine", "batch")


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Load app.yaml, checking that the engine and batch sections are present."""
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{APP_CONFIG_PATH.name} must contain a mapping of sections")

    missing = [name for name in REQUIRED_SECTIONS if not isinstance(data.get(name), dict)]
    if missing:
        raise ValueError(
            f"{APP_CONFIG_PATH.name} is missing sections: {', '.join(missing)}"
        )
    return data


def reload_settings():
    """Clear the cached app.yaml so the next lookup re-reads it."""
    load_app_config.cache_clear()


def get_setting(path: str, default: Any = None) -> Any:
    """Get a nested setting by dotted path, e.g. "logging.level"."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a word-list path against base (default: the working directory)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if path.is_absolute():
        return path
    return ((base or Path.cwd()) / path).resolve()


__all__ = [
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
    "REQUIRED_SECTIONS",
    "load_app_config",
    "reload_settings",
    "get_setting",
    "resolve_path",
]
