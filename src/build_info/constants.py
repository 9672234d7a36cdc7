# src/build_info/constants.py
"""
Central constants used across the project.
"""

# --- sentinels ---
UNKNOWN: str = "unknown"
DEFAULT_VENDOR: str = "oss"

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

# --- runtime defaults ---
DEFAULT_LOG_LEVEL: str = "info"

LEVEL_ORDER: tuple[str, ...] = (
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "silent",  # disables all logging
)

# --- legacy `--version` report keys, in the order older components print them ---
LEGACY_KEYS: tuple[str, ...] = (
    "Version",
    "GitRevision",
    "GolangVersion",
    "BuildStatus",
    "GitTag",
)
