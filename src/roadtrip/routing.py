"""Shortest border-crossing routes weighted by capital distance."""

from __future__ import annotations

import heapq

from .graph import GraphModel
from .models import PathStep, Route


def _search(model: GraphModel, source: str, target: str) -> dict[str, str]:
    """Dijkstra from ``source`` until ``target`` is settled; returns predecessors.

    Edges whose capital distance cannot be resolved are never relaxed.
    """
    best: dict[str, int] = {source: 0}
    previous: dict[str, str] = {}
    frontier: list[tuple[int, str]] = [(0, source)]

    while frontier:
        current_km, country = heapq.heappop(frontier)
        if current_km > best.get(country, current_km):
            continue  # stale entry
        if country == target:
            break
        for neighbor in model.neighbors(country):
            edge = model.resolve(country, neighbor)
            if edge.km is None:
                continue
            total = current_km + edge.km
            if neighbor not in best or total < best[neighbor]:
                best[neighbor] = total
                previous[neighbor] = country
                heapq.heappush(frontier, (total, neighbor))
    return previous


def find_route(model: GraphModel, source: str, target: str) -> Route:
    """Minimum total capital-distance route between two declared countries.

    Returns a route with no steps when either country is unknown, when
    ``source == target`` or when no chain of resolvable border edges exists.
    """
    if not model.has_country(source) or not model.has_country(target):
        return Route(origin=source, destination=target)

    previous = _search(model, source, target)

    steps: list[PathStep] = []
    country = target
    while country in previous:
        parent = previous[country]
        # Re-resolved for display rather than reusing the relaxed weight.
        steps.append(PathStep(parent, country, model.resolve(parent, country).km))
        country = parent
    steps.reverse()
    return Route(origin=source, destination=target, steps=tuple(steps))


def find_path(model: GraphModel, source: str, target: str) -> list[str]:
    """Legacy form of :func:`find_route`: one ``"A --> B (N km.)"`` line per hop."""
    return find_route(model, source, target).describe()
