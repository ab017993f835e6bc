"""Read-only fused view over the borders, code and capital-distance tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .models import DistanceLookup


def _freeze_adjacency(raw: Mapping[str, Iterable[str]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({country: tuple(neighbors) for country, neighbors in raw.items()})


@dataclass(frozen=True, slots=True)
class GraphModel:
    """Country graph built once from the three source tables.

    ``adjacency`` is directed as declared in the borders file: a country that
    only appears as somebody's neighbor is not a key and is unknown to every
    query. ``distances`` holds both orderings of each loaded code pair.
    """

    adjacency: Mapping[str, tuple[str, ...]]
    codes: Mapping[str, str]
    distances: Mapping[tuple[str, str], int]
    snapshot_date: str | None = field(default=None)

    @classmethod
    def build(
        cls,
        *,
        adjacency: Mapping[str, Iterable[str]],
        codes: Mapping[str, str],
        distances: Mapping[tuple[str, str], int],
        snapshot_date: str | None = None,
    ) -> GraphModel:
        return cls(
            adjacency=_freeze_adjacency(adjacency),
            codes=MappingProxyType(dict(codes)),
            distances=MappingProxyType(dict(distances)),
            snapshot_date=snapshot_date,
        )

    @property
    def countries(self) -> list[str]:
        return sorted(self.adjacency)

    def has_country(self, name: str) -> bool:
        return name in self.adjacency

    def neighbors(self, name: str) -> tuple[str, ...]:
        return self.adjacency.get(name, ())

    def code_for(self, name: str) -> str | None:
        return self.codes.get(name)

    def resolve(self, country_a: str, country_b: str) -> DistanceLookup:
        """Capital-to-capital distance between two declared countries."""
        if country_a not in self.adjacency or country_b not in self.adjacency:
            return DistanceLookup.unknown_country()
        code_a = self.codes.get(country_a)
        code_b = self.codes.get(country_b)
        if code_a is None or code_b is None:
            return DistanceLookup.unknown_distance()
        km = self.distances.get((code_a, code_b))
        if km is None:
            km = self.distances.get((code_b, code_a))
        if km is None:
            return DistanceLookup.unknown_distance()
        return DistanceLookup.found(km)

    def get_distance(self, country_a: str, country_b: str) -> int:
        """Legacy query boundary: kilometres, or -1 when not found or unknown."""
        return self.resolve(country_a, country_b).as_legacy()

    def stats(self) -> dict[str, int]:
        return {
            "countries": len(self.adjacency),
            "border_entries": sum(len(neighbors) for neighbors in self.adjacency.values()),
            "codes": len(self.codes),
            "distance_entries": len(self.distances),
        }
