# src/build_info/meta.py

"""Centralized program identity constants for Build Info."""

_BASE = "build-info"

# Python package / import name (also the logger name)
PROGRAM_PACKAGE = _BASE.replace("-", "_")

# Environment variable prefix (used for BUILD_INFO_LOG_LEVEL, etc.)
PROGRAM_ENV = _BASE.replace("-", "_").upper()

# Product token placed before the vendor in User-Agent strings
USER_AGENT_PRODUCT = "istio"
