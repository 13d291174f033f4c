from __future__ import annotations

"""Spawner configuration loaded from environment variables and ``settings.json``.

The module provides a central location for runtime options.  Environment
variables take precedence over values stored in the JSON file found next to
this module.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

# Path to the JSON configuration file shipped next to the code
SETTINGS_FILE = Path(__file__).with_name("settings.json")

try:
    with SETTINGS_FILE.open("r", encoding="utf-8") as f:
        _FILE_SETTINGS: Dict[str, Any] = json.load(f)
except Exception:
    # If the settings file is missing or invalid, fall back to defaults
    _FILE_SETTINGS = {}


def _get_str(env_var: str, key: str, default: str) -> str:
    """Return a string setting from ``env_var`` or ``key`` in the JSON file."""
    value = os.environ.get(env_var)
    if value is not None:
        return value
    return str(_FILE_SETTINGS.get(key, default))


def _get_optional_int(env_var: str, key: str) -> Optional[int]:
    """Return an integer setting or ``None`` when unset or malformed."""
    value = os.environ.get(env_var)
    if value is None:
        value = _FILE_SETTINGS.get(key)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _get_paths(env_var: str, key: str, default: str) -> List[str]:
    """Return a list of directories, ``os.pathsep`` separated in the env."""
    value = os.environ.get(env_var)
    if value:
        return [p for p in value.split(os.pathsep) if p]
    stored = _FILE_SETTINGS.get(key, default)
    if isinstance(stored, list):
        return [str(p) for p in stored]
    return [str(stored)]


# ---------------------------------------------------------------------------
# Public settings
# ---------------------------------------------------------------------------
# Directories searched for ``MapXXX.json`` data files, relative to the repo
DATA_DIRS: List[str] = _get_paths("SPAWNER_DATA_DIR", "data_dir", "data")

# Seed for the spawner's random generator; ``None`` uses system entropy
RNG_SEED: Optional[int] = _get_optional_int("SPAWNER_SEED", "rng_seed")

# Level name handed to :func:`logging.basicConfig` by ``main.py``
LOG_LEVEL: str = _get_str("SPAWNER_LOG_LEVEL", "log_level", "INFO").upper()


__all__ = [
    "DATA_DIRS",
    "RNG_SEED",
    "LOG_LEVEL",
]
