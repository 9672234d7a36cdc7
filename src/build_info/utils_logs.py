# src/build_info/utils_logs.py

import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, TextIO, cast

from .constants import LEVEL_ORDER
from .meta import PROGRAM_PACKAGE
from .runtime import current_runtime
from .utils import safe_log


# --- ANSI Colors -------------------------------------------------------------


RESET = "\033[0m"
CYAN = "\033[36m"
GRAY = "\033[90m"


TAG_STYLES = {
    "TRACE": (GRAY, "[TRACE]"),
    "DEBUG": (CYAN, "[DEBUG]"),
    "WARNING": ("", "⚠️ "),
    "ERROR": ("", "❌ "),
    "CRITICAL": ("", "💥 "),
}


# --- Custom TRACE level ------------------------------------------------------


TRACE_LEVEL = logging.DEBUG - 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


class LoggerWithTrace(logging.Logger):
    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, **kwargs)


_LEVEL_MAP = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "SILENT": logging.CRITICAL + 1,
}


# --- Formatting / handlers ---------------------------------------------------


class TagFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        tag_color, tag_text = TAG_STYLES.get(record.levelname, ("", ""))
        msg = super().format(record)
        if not tag_text:
            return msg
        if current_runtime.get("use_color", False) and tag_color:
            return f"{tag_color}{tag_text}{RESET} {msg}"
        return f"{tag_text} {msg}"


class DualStreamHandler(logging.StreamHandler[TextIO]):
    """Send info/debug/trace to stdout, everything else to stderr."""

    def __init__(self) -> None:
        super().__init__(stream=sys.stdout)

    def emit(self, record: logging.LogRecord) -> None:
        # stream is looked up per record
        self.stream = sys.stderr if record.levelno >= logging.WARNING else sys.stdout
        super().emit(record)


# --- Logger initialization ---------------------------------------------------


def _make_logger() -> LoggerWithTrace:
    # only our own logger gets the TRACE-capable class
    previous = logging.getLoggerClass()
    logging.setLoggerClass(LoggerWithTrace)
    try:
        logger = logging.getLogger(PROGRAM_PACKAGE)
    finally:
        logging.setLoggerClass(previous)
    return cast("LoggerWithTrace", logger)


_logger = _make_logger()


def _ensure_logger_initialized() -> None:
    """Configure the logger once."""
    if getattr(_ensure_logger_initialized, "_done", False):
        return

    handler = DualStreamHandler()
    handler.setFormatter(TagFormatter("%(message)s"))
    _logger.addHandler(handler)
    _logger.propagate = False
    _ensure_logger_initialized._done = True  # type: ignore[attr-defined]  # noqa: SLF001


def _sync_level() -> None:
    level_name = current_runtime.get("log_level")
    if level_name is None:  # pyright: ignore[reportUnnecessaryComparison]
        safe_log("[LOGGER ERROR] ❌ Runtime does not specify log_level")
        level_name = "error"
    _logger.setLevel(_LEVEL_MAP.get(str(level_name).upper(), logging.INFO))


def get_logger() -> LoggerWithTrace:
    """Return the configured build_info logger."""
    _ensure_logger_initialized()
    _sync_level()
    return _logger


def get_log_level() -> str:
    """Return the current log level, or 'error' if undefined or invalid."""
    level = cast("str | None", current_runtime.get("log_level"))
    if level is None or level not in LEVEL_ORDER:
        safe_log(f"[LOGGER ERROR] ❌ Unknown log level: {level!r}")
        return "error"
    return level


def set_log_level(level: str) -> None:
    if level not in LEVEL_ORDER:
        xmsg = f"Unknown log level: {level!r}"
        raise ValueError(xmsg)
    current_runtime["log_level"] = level
    _sync_level()


@contextmanager
def temporary_log_level(level: str) -> Generator[None, None, None]:
    prev = current_runtime["log_level"]
    set_log_level(level)
    try:
        yield
    finally:
        current_runtime["log_level"] = prev
        _sync_level()
