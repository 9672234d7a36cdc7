# src/build_info/stamp.py
"""Build-time injection points.

Packaging rewrites these literals in place (the same way the single-file
bundle stamps its `# Version:` header). Anything left alone stays at the
"unknown" sentinel; vendor defaults to "oss".

Date is deliberately not stamped so builds stay reproducible.
"""

BUILD_VERSION = "unknown"
BUILD_GIT_REVISION = "unknown"
BUILD_STATUS = "unknown"
BUILD_TAG = "unknown"
BUILD_HUB = "unknown"
BUILD_VENDOR = "oss"
