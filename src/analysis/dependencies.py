"""Dependency identifier normalization."""

from typing import Iterable, List


def normalize(raw: Iterable[str]) -> List[str]:
    """Flatten comma-joined dependency identifiers.

    ["web,devtools", " native "] becomes ["web", "devtools", "native"]. Order is
    preserved, blanks are dropped and repeated identifiers are kept.
    """
    dependencies: List[str] = []
    for item in raw:
        for part in item.split(","):
            trimmed = part.strip()
            if trimmed:
                dependencies.append(trimmed)
    return dependencies
