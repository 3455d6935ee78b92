"""Data models for release and project type catalogs."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Release:
    """A published Spring Boot release as listed by the metadata server."""
    version: str
    is_current: bool = False


class ReleaseCatalog:
    """Ordered, read-only view of known releases (server order, not sorted)."""

    def __init__(self, releases: Iterable[Release]):
        self._releases: Tuple[Release, ...] = tuple(releases)

    @property
    def releases(self) -> Tuple[Release, ...]:
        return self._releases

    def versions(self) -> List[str]:
        """Return every version string in catalog order."""
        return [r.version for r in self._releases]

    def current(self) -> Optional[Release]:
        """Return the first release flagged current, if any."""
        for release in self._releases:
            if release.is_current:
                return release
        return None

    def __len__(self) -> int:
        return len(self._releases)

    def __iter__(self):
        return iter(self._releases)

    def __repr__(self) -> str:
        return f"ReleaseCatalog({list(self._releases)!r})"


@dataclass(frozen=True)
class TypeEntry:
    """A project type offered by the starter and the action generating it."""
    id: str  # pylint: disable=invalid-name
    action: str
    name: Optional[str] = None


class TypeCatalog:
    """Ordered, read-only sequence of project types. Ids are not checked for uniqueness."""

    def __init__(self, entries: Iterable[TypeEntry]):
        self._entries: Tuple[TypeEntry, ...] = tuple(entries)

    @property
    def entries(self) -> Tuple[TypeEntry, ...]:
        return self._entries

    def ids(self) -> List[str]:
        return [e.id for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"TypeCatalog({list(self._entries)!r})"
