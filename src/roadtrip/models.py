"""Value types returned by distance and route queries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

NOT_FOUND = -1
"""Legacy sentinel for both an unknown country and an unknown distance."""


class DistanceStatus(Enum):
    FOUND = "found"
    UNKNOWN_COUNTRY = "unknown_country"
    UNKNOWN_DISTANCE = "unknown_distance"


@dataclass(frozen=True, slots=True)
class DistanceLookup:
    """Tagged outcome of a capital-distance lookup."""

    status: DistanceStatus
    km: int | None = None

    @classmethod
    def found(cls, km: int) -> DistanceLookup:
        return cls(status=DistanceStatus.FOUND, km=km)

    @classmethod
    def unknown_country(cls) -> DistanceLookup:
        return cls(status=DistanceStatus.UNKNOWN_COUNTRY)

    @classmethod
    def unknown_distance(cls) -> DistanceLookup:
        return cls(status=DistanceStatus.UNKNOWN_DISTANCE)

    def as_legacy(self) -> int:
        return self.km if self.km is not None else NOT_FOUND


@dataclass(frozen=True, slots=True)
class PathStep:
    """One border crossing of a route."""

    origin: str
    destination: str
    km: int | None

    def describe(self) -> str:
        if self.km is None:
            return f"{self.origin} --> {self.destination} (Distance unknown)"
        return f"{self.origin} --> {self.destination} ({self.km} km.)"

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.origin, "to": self.destination, "km": self.km}


@dataclass(frozen=True, slots=True)
class Route:
    """Result of a shortest-path query. No steps means no route."""

    origin: str
    destination: str
    steps: tuple[PathStep, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.steps)

    @property
    def total_km(self) -> int:
        return sum(step.km for step in self.steps if step.km is not None)

    def describe(self) -> list[str]:
        return [step.describe() for step in self.steps]

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.origin,
            "to": self.destination,
            "found": self.found,
            "total_km": self.total_km,
            "steps": [step.to_dict() for step in self.steps],
        }
