"""Interactive route prompt and diagnostic table dump."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from .graph import GraphModel
from .routing import find_route

EXIT_WORD = "EXIT"
INVALID_COUNTRY_MESSAGE = "Invalid country name. Please enter a valid country name."


def format_route_lines(model: GraphModel, source: str, target: str) -> list[str]:
    route = find_route(model, source, target)
    if not route.found:
        return [f"No valid path exists between {source} and {target}"]
    return [f"Route from {source} to {target}:", *(f"* {line}" for line in route.describe())]


def run_interactive(
    model: GraphModel,
    *,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    """Prompt for pairs of countries until EXIT (any case) or end of input.

    ``read`` and ``write`` default to :func:`input` and :func:`print`.
    """
    reader = read if read is not None else input
    writer = write if write is not None else print

    def ask(which: str) -> str | None:
        try:
            answer = reader(f"Enter the name of the {which} country (type {EXIT_WORD} to quit): ")
        except EOFError:
            return None
        answer = answer.strip()
        if answer.casefold() == EXIT_WORD.casefold():
            return None
        return answer

    while True:
        source = ask("first")
        if source is None:
            return
        if not model.has_country(source):
            writer(INVALID_COUNTRY_MESSAGE)
            continue
        target = ask("second")
        if target is None:
            return
        if not model.has_country(target):
            writer(INVALID_COUNTRY_MESSAGE)
            continue
        for line in format_route_lines(model, source, target):
            writer(line)


def dump_lines(model: GraphModel) -> Iterable[str]:
    yield "Country Borders:"
    for country in model.countries:
        yield f"{country} borders: {list(model.neighbors(country))}"
    yield ""
    yield "Country Abbreviations:"
    for name in sorted(model.codes):
        yield f"{name} abbreviation: {model.codes[name]}"
    yield ""
    yield "Capital Distances:"
    for (code_a, code_b), km in sorted(model.distances.items()):
        yield f"{code_a}_{code_b} distance: {km}"


def dump_payload(model: GraphModel) -> dict[str, Any]:
    return {
        "snapshot_date": model.snapshot_date,
        "stats": model.stats(),
        "borders": {country: list(model.neighbors(country)) for country in model.countries},
        "codes": dict(model.codes),
        "capital_distances": {
            f"{code_a}_{code_b}": km for (code_a, code_b), km in model.distances.items()
        },
    }
