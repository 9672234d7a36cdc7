# src/build_info/runtime.py
"""Live logging context shared across modules, seeded from the environment."""

import os
from typing import TypedDict

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL, LEVEL_ORDER
from .meta import PROGRAM_ENV
from .utils import safe_log, should_use_color


class Runtime(TypedDict):
    log_level: str
    use_color: bool


def _initial_log_level() -> str:
    """First of BUILD_INFO_LOG_LEVEL, LOG_LEVEL, default; names are case-insensitive.

    An unrecognised name is reported and replaced by the default instead of
    reaching the logger.
    """
    for key in (f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL):
        raw = os.getenv(key, "").strip().lower()
        if not raw:
            continue
        if raw in LEVEL_ORDER:
            return raw
        safe_log(f"[LOGGER ERROR] ❌ Ignoring unknown {key}={raw!r}")
    return DEFAULT_LOG_LEVEL


current_runtime: Runtime = {
    "log_level": _initial_log_level(),
    "use_color": should_use_color(),
}
