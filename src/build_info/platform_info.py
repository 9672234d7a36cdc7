# src/build_info/platform_info.py
"""Thin wrappers over the interpreter's platform queries.

Names follow the `<os>/<arch>` convention used in User-Agent strings
(`linux/amd64`, `darwin/arm64`) rather than Python's raw spellings.
"""

import platform
import sys

from .constants import UNKNOWN

_ARCH_ALIASES: dict[str, str] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
    "riscv64": "riscv64",
}


def program_path() -> str:
    """Return argv[0] of the running process ('' when unavailable)."""
    return sys.argv[0] if sys.argv else ""


def os_name() -> str:
    return platform.system().lower() or UNKNOWN


def arch_name() -> str:
    machine = platform.machine().lower()
    if not machine:
        return UNKNOWN
    return _ARCH_ALIASES.get(machine, machine)


def runtime_version() -> str:
    """Identifier of the interpreter running this code, e.g. `cpython3.12.4`."""
    return f"{platform.python_implementation().lower()}{platform.python_version()}"
