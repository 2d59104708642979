"""
MatrixSpaces — configuration.

Hard limits of the engine live here as module constants; the presentation
layers (CLI, HTTP API) read their defaults from ``DEFAULT_SETTINGS``.
"""

import os
from typing import Optional

MAX_DIMENSION = 5           # rows and columns are both limited to 1..5
MAX_DENOMINATOR = 10000     # search bound for decimal → fraction conversion
DECIMAL_EPSILON = 1e-10     # early exit of that search

LOG_LEVEL_ENV = "MATRIXSPACES_LOG_LEVEL"

# ── Defaults for the presentation layers ────────────────────────────────
DEFAULT_SETTINGS = {
    "track_operations": True,   # include the elementary-operation log
    "decimals": 4,              # digits shown for lossy numeric output
    "log_level": "WARNING",
}


def get_settings(overrides: Optional[dict] = None) -> dict:
    """Return a copy of the defaults with *overrides* applied.

    Unknown keys are rejected so typos don't silently fall back to defaults.
    """
    settings = dict(DEFAULT_SETTINGS)
    for key, value in (overrides or {}).items():
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key}")
        settings[key] = value
    return settings


def log_level_from_env(default: str = DEFAULT_SETTINGS["log_level"]) -> str:
    """Read the log level name from ``MATRIXSPACES_LOG_LEVEL``."""
    return os.environ.get(LOG_LEVEL_ENV, default).strip().upper() or default
