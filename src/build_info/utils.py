# src/build_info/utils.py

import os
import sys
from contextlib import suppress
from pathlib import Path
from typing import TextIO, cast


def should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    # Respect explicit overrides
    if "NO_COLOR" in os.environ:
        return False
    if os.getenv("FORCE_COLOR", "").lower() in {"1", "true", "yes"}:
        return True

    return sys.stdout.isatty()


def safe_log(msg: str) -> None:
    """Emergency logger that never fails."""
    stream = cast("TextIO", sys.__stderr__)
    try:
        print(msg, file=stream)
    except Exception:  # noqa: BLE001
        # never crash during crash reporting
        with suppress(Exception):
            stream.write(f"[INTERNAL] {msg}\n")


def read_text_file(path: Path) -> str:
    """Read a UTF-8 text file, rejecting missing paths and directories."""
    if not path.exists():
        xmsg = f"File not found: {path}"
        raise FileNotFoundError(xmsg)

    if not path.is_file():
        xmsg = f"Expected a file: {path}"
        raise ValueError(xmsg)

    return path.read_text(encoding="utf-8")
