from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from throbbers.data import ArtistRepository


class NameLookup(ABC):
    """One strategy for turning a safe key back into a display name."""

    @abstractmethod
    def lookup(self, safe: str) -> Optional[str]:
        raise NotImplementedError


class OrderEntryLookup(NameLookup):
    """Matches {"safe": ..., "original": ...} entries of an artist order."""

    def __init__(self, order: Sequence[Any]):
        self._order = order

    def lookup(self, safe: str) -> Optional[str]:
        for entry in self._order:
            if isinstance(entry, dict) and entry.get("safe") == safe:
                original = entry.get("original")
                if original:
                    return str(original)
        return None


class NameMapLookup(NameLookup):
    """Reads the persisted artistNames map, once, on first miss."""

    def __init__(self, artists: ArtistRepository):
        self._artists = artists
        self._names: Optional[Dict[str, str]] = None

    def lookup(self, safe: str) -> Optional[str]:
        if self._names is None:
            self._names = self._artists.load_names()
        return self._names.get(safe) or None


class NameResolver:
    """
    Tries each lookup in order; the first match wins. When every lookup
    misses, the safe key itself is returned as a degraded display name.
    """

    def __init__(self, lookups: List[NameLookup]):
        self._lookups = lookups

    def resolve(self, safe: str) -> str:
        for lookup in self._lookups:
            name = lookup.lookup(safe)
            if name:
                return name
        return safe


def build_resolver(order: Sequence[Any], artists: ArtistRepository) -> NameResolver:
    return NameResolver([OrderEntryLookup(order), NameMapLookup(artists)])
