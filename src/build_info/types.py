# src/build_info/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict

from typing_extensions import NotRequired

from .version import BuildInfo


@dataclass(frozen=True)
class DockerBuildInfo:
    """Image coordinates stamped alongside the build: hub and tag."""

    hub: str
    tag: str


@dataclass(frozen=True)
class ServerInfo:
    """Version of a single control plane component."""

    component: str
    info: BuildInfo


# versions of every control plane component, in report order
MeshInfo = list[ServerInfo]


@dataclass(frozen=True)
class ProxyInfo:
    """Version of a single data plane proxy."""

    id: str
    istio_version: str


# --- wire shapes -------------------------------------------------------------


class BuildInfoWire(TypedDict):
    version: str
    revision: str
    golang_version: str
    status: str
    tag: str
    vendor: NotRequired[str]  # absent from reports of older components


class ServerInfoWire(TypedDict):
    Component: str
    Info: BuildInfoWire


class ProxyInfoWire(TypedDict):
    ID: str
    IstioVersion: str
