"""Typed configuration loader for `config.yaml`."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Mapping, cast

import yaml


def _mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"Expected mapping for '{field_name}'")
    return cast(Mapping[str, Any], value)


def _optional_mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _mapping(value, field_name)


def _str(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Expected non-empty string for '{field_name}'")
    return value.strip()


def _column(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected integer for '{field_name}'")
    if value < 0:
        raise ValueError(f"{field_name} must be >= 0")
    return value


def _optional_date(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    # YAML turns unquoted 2020-12-31 into a date object.
    if isinstance(value, date):
        return value.isoformat()
    raw = _str(value, field_name)
    try:
        return date.fromisoformat(raw).isoformat()
    except ValueError as exc:
        raise ValueError(f"Expected ISO date (YYYY-MM-DD) for '{field_name}'") from exc


def _path_from_cfg(value: Any, field_name: str, root_dir: Path) -> Path:
    raw = _str(value, field_name)
    p = Path(raw)
    return p if p.is_absolute() else root_dir / p


@dataclass(frozen=True, slots=True)
class PathsConfig:
    borders: Path
    capital_distances: Path
    state_names: Path
    logs_dir: Path

    @property
    def sources(self) -> tuple[Path, ...]:
        return (self.borders, self.capital_distances, self.state_names)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], root_dir: Path) -> PathsConfig:
        return cls(
            borders=_path_from_cfg(raw.get("borders"), "paths.borders", root_dir),
            capital_distances=_path_from_cfg(
                raw.get("capital_distances"), "paths.capital_distances", root_dir
            ),
            state_names=_path_from_cfg(raw.get("state_names"), "paths.state_names", root_dir),
            logs_dir=_path_from_cfg(raw.get("logs_dir", "build/logs"), "paths.logs_dir", root_dir),
        )


@dataclass(frozen=True, slots=True)
class CapitalDistancesConfig:
    """Column positions in the comma-delimited capital-distance table."""

    code_a_column: int = 1
    code_b_column: int = 3
    distance_column: int = 4

    @property
    def min_columns(self) -> int:
        return max(self.code_a_column, self.code_b_column, self.distance_column) + 1

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> CapitalDistancesConfig:
        return cls(
            code_a_column=_column(raw.get("code_a_column", 1), "capital_distances.code_a_column"),
            code_b_column=_column(raw.get("code_b_column", 3), "capital_distances.code_b_column"),
            distance_column=_column(
                raw.get("distance_column", 4), "capital_distances.distance_column"
            ),
        )


@dataclass(frozen=True, slots=True)
class StateNamesConfig:
    """Column positions in the tab-delimited name/code table.

    ``snapshot_date`` pins the snapshot to keep; ``None`` means the latest
    date found in the file.
    """

    code_column: int = 1
    name_column: int = 2
    date_column: int = 4
    snapshot_date: str | None = None

    @property
    def min_columns(self) -> int:
        return max(self.code_column, self.name_column, self.date_column) + 1

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> StateNamesConfig:
        return cls(
            code_column=_column(raw.get("code_column", 1), "state_names.code_column"),
            name_column=_column(raw.get("name_column", 2), "state_names.name_column"),
            date_column=_column(raw.get("date_column", 4), "state_names.date_column"),
            snapshot_date=_optional_date(raw.get("snapshot_date"), "state_names.snapshot_date"),
        )


@dataclass(frozen=True, slots=True)
class AppConfig:
    source_path: Path
    paths: PathsConfig
    capital_distances: CapitalDistancesConfig
    state_names: StateNamesConfig

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], source_path: Path) -> AppConfig:
        root_dir = source_path.parent.resolve()
        return cls(
            source_path=source_path.resolve(),
            paths=PathsConfig.from_mapping(_mapping(raw.get("paths"), "paths"), root_dir),
            capital_distances=CapitalDistancesConfig.from_mapping(
                _optional_mapping(raw.get("capital_distances"), "capital_distances")
            ),
            state_names=StateNamesConfig.from_mapping(
                _optional_mapping(raw.get("state_names"), "state_names")
            ),
        )


def load_config(path: str | Path) -> AppConfig:
    """Load and validate the YAML config file into typed settings."""
    cfg_path = Path(path).resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if not isinstance(raw, Mapping):
        raise ValueError("Top-level config must be a YAML mapping")
    return AppConfig.from_mapping(cast(Mapping[str, Any], raw), cfg_path)
