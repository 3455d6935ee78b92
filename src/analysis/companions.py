"""BOM (companion library) version extraction from project properties."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from constants import Constants


@dataclass(frozen=True)
class Companion:
    """A BOM name and the version the generated project pins it to."""
    prefix: str
    value: str


def first_matching_prefix(key: str, prefixes: Sequence[str]) -> Optional[str]:
    """Return the first prefix key starts with, in list order.

    This is a plain string-prefix test: with prefixes ["spring-cloud",
    "spring-cloud-gcp"], "spring-cloud-gcp.version" maps to "spring-cloud".
    """
    for prefix in prefixes:
        if key.startswith(prefix):
            return prefix
    return None


def extract(
    properties: Mapping[str, str],
    prefixes: Sequence[str] = Constants.SUPPORTED_BOMS,
) -> List[Companion]:
    """Pick the BOM version properties out of a project property map.

    Keys are visited in the mapping's iteration order (POM document order for
    maps built by registry.pom.parse_properties); keys matching no prefix are
    skipped and each key yields at most one Companion.
    """
    companions: List[Companion] = []
    for key, value in properties.items():
        prefix = first_matching_prefix(key, prefixes)
        if prefix is not None:
            companions.append(Companion(prefix=prefix, value=value))
    return companions
