# src/build_info/version.py
"""Build version record, its renderers, and the legacy report parser."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import PurePath

from . import platform_info
from .constants import DEFAULT_VENDOR, LEGACY_KEYS, UNKNOWN
from .errors import BuildInfoParseError
from .meta import USER_AGENT_PRODUCT


@dataclass(frozen=True)
class BuildInfo:
    """Version information about the binary build.

    Every field is a plain string; anything not stamped at build time
    holds the literal "unknown" (vendor defaults to "oss").
    """

    version: str = UNKNOWN
    git_revision: str = UNKNOWN
    golang_version: str = UNKNOWN
    build_status: str = UNKNOWN
    git_tag: str = UNKNOWN
    # who built the image
    vendor: str = DEFAULT_VENDOR

    def __str__(self) -> str:
        return self.to_compact_string()

    def to_compact_string(self) -> str:
        """Single-line version info: `<version>-<revision>-<status>`.

        Hyphens inside field values are not escaped, so the result is
        not meant to be split back apart.
        """
        return f"{self.version}-{self.git_revision}-{self.build_status}"

    def user_agent(
        self,
        argv0: str | None = None,
        os_name: str | None = None,
        arch_name: str | None = None,
    ) -> str:
        """Self-identifying User-Agent string.

        istioctl/1.11.2 (linux/amd64) istio/oss

        Arguments left as None are read from the running interpreter.
        """
        if argv0 is None:
            argv0 = platform_info.program_path()
        if os_name is None:
            os_name = platform_info.os_name()
        if arch_name is None:
            arch_name = platform_info.arch_name()
        return (
            f"{program_name(argv0)}/{self.version} ({os_name}/{arch_name})"
            f" {USER_AGENT_PRODUCT}/{self.vendor}"
        )

    def long_form(self) -> str:
        """Debug dump naming every field; not a stable format."""
        return repr(self)

    def to_legacy_string(self) -> str:
        """Render the `Key: value` report older components print."""
        return "".join(
            f"{key}: {getattr(self, _LEGACY_FIELDS[key])}\n" for key in LEGACY_KEYS
        )

    @classmethod
    def from_legacy(cls, text: str, base: BuildInfo | None = None) -> BuildInfo:
        return parse_legacy(text, base)


# legacy report key -> BuildInfo attribute
_LEGACY_FIELDS: dict[str, str] = {
    "Version": "version",
    "GitRevision": "git_revision",
    "GolangVersion": "golang_version",
    "BuildStatus": "build_status",
    "GitTag": "git_tag",
}
assert set(_LEGACY_FIELDS) == set(LEGACY_KEYS)  # noqa: S101


def program_name(argv0: str) -> str:
    """Last path segment of `argv0`, or "unknown" when it is empty."""
    if not argv0:
        return UNKNOWN
    # a path made only of separators names the root
    return PurePath(argv0).name or "/"


def parse_legacy(text: str, base: BuildInfo | None = None) -> BuildInfo:
    """Build a BuildInfo from the `Key: value` output of older components.

    - Blank lines are skipped.
    - Only the first colon separates key from value; the value is
      stripped, the key is matched verbatim.
    - Unknown keys are ignored, as older versions may report other fields.
    - Fields missing from `text` keep their value from `base`
      (a default BuildInfo when omitted). `vendor` is never parsed.

    Raises BuildInfoParseError on the first non-blank line without a colon.
    """
    updates: dict[str, str] = {}

    for line in text.split("\n"):
        if not line.strip():
            continue
        key, sep, raw_value = line.partition(":")
        if not sep:
            raise BuildInfoParseError(key)
        attr = _LEGACY_FIELDS.get(key)
        if attr is None:
            continue
        updates[attr] = raw_value.strip()

    return replace(base if base is not None else BuildInfo(), **updates)
