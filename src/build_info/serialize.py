# src/build_info/serialize.py
"""Structured (JSON) form of build version records.

The external field names are a compatibility contract with diagnostics
endpoints and `version` subcommands; WIRE_FIELD_NAMES is the only place
they are spelled out.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any, cast

from .types import (
    BuildInfoWire,
    MeshInfo,
    ProxyInfo,
    ProxyInfoWire,
    ServerInfo,
    ServerInfoWire,
)
from .version import BuildInfo

# BuildInfo attribute -> external field name
WIRE_FIELD_NAMES: dict[str, str] = {
    "version": "version",
    "git_revision": "revision",
    "golang_version": "golang_version",
    "build_status": "status",
    "git_tag": "tag",
    "vendor": "vendor",
}

# sanity check: every record field has exactly one wire name
assert set(WIRE_FIELD_NAMES) == {f.name for f in fields(BuildInfo)}, (  # noqa: S101
    "WIRE_FIELD_NAMES out of sync with BuildInfo"
)
assert len(set(WIRE_FIELD_NAMES.values())) == len(WIRE_FIELD_NAMES)  # noqa: S101


def to_wire(info: BuildInfo) -> BuildInfoWire:
    return cast(
        "BuildInfoWire",
        {wire: getattr(info, attr) for attr, wire in WIRE_FIELD_NAMES.items()},
    )


def from_wire(data: Mapping[str, Any], base: BuildInfo | None = None) -> BuildInfo:
    """Rebuild a BuildInfo from its wire form.

    Keys missing from `data` keep their value from `base`; unknown keys
    are ignored so reports from newer components still load.
    """
    if not isinstance(data, Mapping):
        xmsg = f"Expected a mapping for BuildInfo, got {type(data).__name__}"
        raise TypeError(xmsg)

    updates: dict[str, str] = {}
    for attr, wire in WIRE_FIELD_NAMES.items():
        if wire not in data:
            continue
        value = data[wire]
        if not isinstance(value, str):
            xmsg = (
                f"BuildInfo field {wire!r} must be a string,"
                f" got {type(value).__name__}"
            )
            raise TypeError(xmsg)
        updates[attr] = value

    return replace(base if base is not None else BuildInfo(), **updates)


def to_json(info: BuildInfo, *, indent: int | None = None) -> str:
    return json.dumps(to_wire(info), indent=indent)


def from_json(text: str, base: BuildInfo | None = None) -> BuildInfo:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        xmsg = f"Invalid BuildInfo JSON: {e.msg} (line {e.lineno}, column {e.colno})"
        raise ValueError(xmsg) from e

    if not isinstance(data, dict):
        xmsg = f"Invalid BuildInfo JSON root type: {type(data).__name__}"
        raise ValueError(xmsg)  # noqa: TRY004

    return from_wire(cast("dict[str, Any]", data), base)


# --- aggregated reports ------------------------------------------------------


def server_info_to_wire(server: ServerInfo) -> ServerInfoWire:
    return {"Component": server.component, "Info": to_wire(server.info)}


def mesh_info_to_wire(mesh: MeshInfo) -> list[ServerInfoWire]:
    return [server_info_to_wire(s) for s in mesh]


def mesh_info_from_wire(data: list[Mapping[str, Any]]) -> MeshInfo:
    mesh: MeshInfo = []
    for entry in data:
        if not isinstance(entry, Mapping):
            xmsg = f"Expected a mapping for ServerInfo, got {type(entry).__name__}"
            raise TypeError(xmsg)
        try:
            component = entry["Component"]
            info = entry["Info"]
        except KeyError as e:
            xmsg = f"ServerInfo entry is missing {e.args[0]!r}"
            raise ValueError(xmsg) from e
        if not isinstance(component, str):
            xmsg = (
                "ServerInfo field 'Component' must be a string,"
                f" got {type(component).__name__}"
            )
            raise TypeError(xmsg)
        mesh.append(ServerInfo(component=component, info=from_wire(info)))
    return mesh


def proxy_info_to_wire(proxy: ProxyInfo) -> ProxyInfoWire:
    return {"ID": proxy.id, "IstioVersion": proxy.istio_version}
