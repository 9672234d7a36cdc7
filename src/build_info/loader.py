# src/build_info/loader.py
"""Construct the process's build records.

Call these once at startup and hand the results to whatever needs them;
nothing here caches or publishes a global.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from . import platform_info, stamp
from .meta import PROGRAM_ENV
from .types import DockerBuildInfo
from .utils import read_text_file
from .utils_logs import get_logger
from .version import BuildInfo, parse_legacy

STAMP_NAMES: tuple[str, ...] = (
    "BUILD_VERSION",
    "BUILD_GIT_REVISION",
    "BUILD_STATUS",
    "BUILD_TAG",
    "BUILD_HUB",
    "BUILD_VENDOR",
)


def stamp_env_key(name: str) -> str:
    """Environment variable that overrides stamp literal `name`."""
    return f"{PROGRAM_ENV}_{name}"


def read_stamp(env: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the six stamp literals, with non-empty env overrides applied."""
    logger = get_logger()
    if env is None:
        env = os.environ

    values: dict[str, str] = {}
    for name in STAMP_NAMES:
        value = getattr(stamp, name)
        override = env.get(stamp_env_key(name), "").strip()
        if override:
            logger.trace("stamp %s overridden from env: %r -> %r", name, value, override)
            value = override
        values[name] = value
    return values


def load_build_info(env: Mapping[str, str] | None = None) -> BuildInfo:
    """Build the BuildInfo describing this process."""
    logger = get_logger()
    values = read_stamp(env)
    info = BuildInfo(
        version=values["BUILD_VERSION"],
        git_revision=values["BUILD_GIT_REVISION"],
        golang_version=platform_info.runtime_version(),
        build_status=values["BUILD_STATUS"],
        git_tag=values["BUILD_TAG"],
        vendor=values["BUILD_VENDOR"],
    )
    logger.debug("Loaded build info: %s", info.long_form())
    return info


def load_docker_info(env: Mapping[str, str] | None = None) -> DockerBuildInfo:
    """Image hub and tag; the tag is the stamped version."""
    values = read_stamp(env)
    return DockerBuildInfo(hub=values["BUILD_HUB"], tag=values["BUILD_VERSION"])


def load_legacy_file(path: Path | str, base: BuildInfo | None = None) -> BuildInfo:
    """Parse a saved `--version` report of an older component.

    BuildInfoParseError from malformed content propagates unchanged.
    """
    logger = get_logger()
    path = Path(path)
    logger.trace("reading legacy version report: %s", path)
    try:
        text = read_text_file(path)
    except (FileNotFoundError, ValueError) as e:
        logger.debug("Cannot read legacy version report %s: %s", path, e)
        raise
    return parse_legacy(text, base)
