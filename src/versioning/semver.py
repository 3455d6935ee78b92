"""Thin wrapper around semantic_version for parsing release versions.

Release strings are accepted leniently: an optional leading 'v' and omitted
minor/patch parts (filled with 0) are tolerated, the way semver tooling for
Go and npm accepts them. Ordering follows SemVer 2.0 precedence as
implemented by semantic_version.Version; build metadata does not take part.
"""

import re
from typing import Optional

from semantic_version import Version

_VERSION_RE = re.compile(
    r"^v?(?P<major>0|[1-9]\d*)"
    r"(?:\.(?P<minor>0|[1-9]\d*))?"
    r"(?:\.(?P<patch>0|[1-9]\d*))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


def parse_version(version_str: str) -> Version:
    """Parse a release version string.

    Args:
        version_str: Version as published, e.g. "3.1.5", "3.2.0-SNAPSHOT" or "v3.2".

    Returns:
        The parsed Version.

    Raises:
        ValueError: If the string is not a semantic version.
    """
    m = _VERSION_RE.match(version_str.strip())
    if m is None:
        raise ValueError(f"Invalid semver version: {version_str!r}")
    normalized = "{}.{}.{}".format(m.group("major"), m.group("minor") or 0, m.group("patch") or 0)
    if m.group("prerelease"):
        normalized += "-" + m.group("prerelease")
    if m.group("build"):
        normalized += "+" + m.group("build")
    return Version(normalized)


def is_greater(candidate: Version, current: Optional[Version]) -> bool:
    """Return True when candidate strictly outranks current (or current is unset)."""
    return current is None or candidate > current
