# src/build_info/__init__.py

"""Build Info: stamp, render, and parse build version metadata.

Full developer API
==================
This package re-exports all non-private symbols from its submodules.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - load_build_info()   → BuildInfo for this process (call once, pass around)
    - parse_legacy()      → BuildInfo from an older component's `Key: value` report
    - BuildInfo.user_agent() / .to_compact_string() / .long_form()
    - to_wire() / to_json() → structured form with the stable field names
"""

from .constants import DEFAULT_VENDOR, LEGACY_KEYS, UNKNOWN
from .errors import BuildInfoParseError
from .loader import (
    load_build_info,
    load_docker_info,
    load_legacy_file,
    read_stamp,
)
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE
from .runtime import Runtime, current_runtime
from .serialize import (
    WIRE_FIELD_NAMES,
    from_json,
    from_wire,
    mesh_info_from_wire,
    mesh_info_to_wire,
    proxy_info_to_wire,
    server_info_to_wire,
    to_json,
    to_wire,
)
from .types import (
    BuildInfoWire,
    DockerBuildInfo,
    MeshInfo,
    ProxyInfo,
    ProxyInfoWire,
    ServerInfo,
    ServerInfoWire,
)
from .utils_logs import (
    get_log_level,
    get_logger,
    set_log_level,
    temporary_log_level,
)
from .version import BuildInfo, parse_legacy, program_name


__all__ = [  # noqa: RUF022
    # --- Records ---
    "BuildInfo",
    "DockerBuildInfo",
    "MeshInfo",
    "ProxyInfo",
    "ServerInfo",
    #
    # --- Construction / parsing ---
    "BuildInfoParseError",
    "load_build_info",
    "load_docker_info",
    "load_legacy_file",
    "parse_legacy",
    "program_name",
    "read_stamp",
    #
    # --- Serialization ---
    "BuildInfoWire",
    "ProxyInfoWire",
    "ServerInfoWire",
    "WIRE_FIELD_NAMES",
    "from_json",
    "from_wire",
    "mesh_info_from_wire",
    "mesh_info_to_wire",
    "proxy_info_to_wire",
    "server_info_to_wire",
    "to_json",
    "to_wire",
    #
    # --- Constants / runtime ---
    "DEFAULT_VENDOR",
    "LEGACY_KEYS",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "Runtime",
    "UNKNOWN",
    "current_runtime",
    "get_log_level",
    "get_logger",
    "set_log_level",
    "temporary_log_level",
]
