"""Parsers for the borders, capital-distance and state-name source files."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Iterator

from .config import AppConfig, CapitalDistancesConfig, StateNamesConfig
from .graph import GraphModel
from .names import neighbor_name, normalize_name

_LOGGER = logging.getLogger("roadtrip.loader")


class DatasetLoadError(ValueError):
    """Raised when a source file cannot be read or holds a malformed value."""

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"Error reading {source}: {reason}")
        self.source = source
        self.reason = reason


def _read_lines(path: Path) -> list[str]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return fh.read().splitlines()
    except FileNotFoundError as exc:
        raise DatasetLoadError(path, "file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(path, str(exc)) from exc


def _data_rows(lines: list[str]) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, line) after the header, skipping blanks."""
    for lineno, line in enumerate(lines[1:], start=2):
        if line.strip():
            yield lineno, line


def parse_borders(path: Path) -> dict[str, list[str]]:
    """Parse ``Name (alias) = Neighbor 12 km; Other 3 km`` records.

    Keys and neighbors are canonical names; border-length annotations are
    dropped. A record without ``=`` or with nothing after it declares a
    country with no neighbors.
    """
    adjacency: dict[str, list[str]] = {}
    for lineno, line in enumerate(_read_lines(path), start=1):
        if not line.strip():
            continue
        declared, _, rest = line.partition("=")
        country = normalize_name(declared)
        if not country:
            _LOGGER.debug("Skipping borders line %d without a country name", lineno)
            continue
        neighbors = [name for name in (neighbor_name(entry) for entry in rest.split(";")) if name]
        adjacency[country] = neighbors
    _LOGGER.info("Loaded %d countries from %s", len(adjacency), path)
    return adjacency


def _parse_km(raw: str, path: Path, lineno: int) -> int:
    value = raw.strip()
    if not (value.isascii() and value.isdigit()):
        raise DatasetLoadError(path, f"line {lineno}: invalid distance '{raw}'")
    return int(value)


def parse_capital_distances(
    path: Path,
    columns: CapitalDistancesConfig | None = None,
) -> dict[tuple[str, str], int]:
    """Parse the comma-delimited capital-distance table into a symmetric map."""
    cols = columns or CapitalDistancesConfig()
    distances: dict[tuple[str, str], int] = {}
    for lineno, line in _data_rows(_read_lines(path)):
        parts = line.split(",")
        if len(parts) < cols.min_columns:
            raise DatasetLoadError(
                path,
                f"line {lineno}: expected at least {cols.min_columns} columns, got {len(parts)}",
            )
        code_a = parts[cols.code_a_column].strip()
        code_b = parts[cols.code_b_column].strip()
        km = _parse_km(parts[cols.distance_column], path, lineno)
        distances[(code_a, code_b)] = km
        distances[(code_b, code_a)] = km
    _LOGGER.info("Loaded %d capital distance entries from %s", len(distances), path)
    return distances


def _parse_date(raw: str) -> date | None:
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return None


def parse_state_names(
    path: Path,
    columns: StateNamesConfig | None = None,
) -> tuple[dict[str, str], str | None]:
    """Parse the tab-delimited name/code table.

    Only rows dated at the snapshot date are kept: the configured
    ``snapshot_date`` or else the latest date present in the file. Returns
    the name->code map and the snapshot date used.
    """
    cols = columns or StateNamesConfig()
    rows: list[tuple[str, str, date]] = []
    for lineno, line in _data_rows(_read_lines(path)):
        parts = line.split("\t")
        if len(parts) < cols.min_columns:
            _LOGGER.debug("Skipping short state-name row at %s:%d", path, lineno)
            continue
        row_date = _parse_date(parts[cols.date_column])
        if row_date is None:
            _LOGGER.debug("Skipping state-name row with bad date at %s:%d", path, lineno)
            continue
        rows.append((parts[cols.code_column].strip(), normalize_name(parts[cols.name_column]), row_date))

    if cols.snapshot_date is not None:
        snapshot: date | None = date.fromisoformat(cols.snapshot_date)
    else:
        snapshot = max((row_date for _, _, row_date in rows), default=None)

    codes: dict[str, str] = {}
    for code, name, row_date in rows:
        if row_date == snapshot:
            codes[name] = code
    snapshot_text = snapshot.isoformat() if snapshot is not None else None
    _LOGGER.info("Loaded %d country codes from %s (snapshot %s)", len(codes), path, snapshot_text)
    return codes, snapshot_text


def load_graph(
    borders_path: Path,
    capital_distances_path: Path,
    state_names_path: Path,
    *,
    distance_columns: CapitalDistancesConfig | None = None,
    name_columns: StateNamesConfig | None = None,
) -> GraphModel:
    """Load all three sources and fuse them into one read-only model."""
    adjacency = parse_borders(borders_path)
    distances = parse_capital_distances(capital_distances_path, distance_columns)
    codes, snapshot_date = parse_state_names(state_names_path, name_columns)
    return GraphModel.build(
        adjacency=adjacency,
        codes=codes,
        distances=distances,
        snapshot_date=snapshot_date,
    )


def load_graph_from_config(cfg: AppConfig) -> GraphModel:
    return load_graph(
        cfg.paths.borders,
        cfg.paths.capital_distances,
        cfg.paths.state_names,
        distance_columns=cfg.capital_distances,
        name_columns=cfg.state_names,
    )
