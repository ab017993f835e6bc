"""Consistency checks across the three source datasets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .config import AppConfig
from .graph import GraphModel
from .loader import DatasetLoadError, load_graph_from_config
from .models import DistanceStatus


@dataclass(slots=True)
class ValidationReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def add_info(self, msg: str) -> None:
        self.infos.append(msg)


class Validator:
    """Loads the sources and reports join gaps between them."""

    def __init__(self, cfg: AppConfig) -> None:
        self.cfg = cfg

    def run(self) -> ValidationReport:
        report = ValidationReport()
        self._validate_source_paths(report)
        if not report.ok:
            return report
        try:
            model = load_graph_from_config(self.cfg)
        except DatasetLoadError as exc:
            report.add_error(str(exc))
            return report
        validate_model(model, report)
        return report

    def _validate_source_paths(self, report: ValidationReport) -> None:
        for path in self.cfg.paths.sources:
            if not path.exists():
                report.add_error(f"Missing required input file: {path}")


def validate_model(model: GraphModel, report: ValidationReport) -> None:
    stats = model.stats()
    report.add_info(
        f"Loaded {stats['countries']} countries, {stats['codes']} codes "
        f"(snapshot {model.snapshot_date or 'none'}), "
        f"{stats['distance_entries']} capital distance entries"
    )
    if not stats["countries"]:
        report.add_error("Borders file declares no countries.")
        return

    without_code = [country for country in model.countries if model.code_for(country) is None]
    if without_code:
        report.add_warning(
            f"{len(without_code)} countries have no code in the snapshot: "
            f"{_format_name_list(without_code)}"
        )

    undeclared: set[str] = set()
    unknown_edges: list[str] = []
    for country in model.countries:
        for neighbor in model.neighbors(country):
            lookup = model.resolve(country, neighbor)
            if lookup.status is DistanceStatus.UNKNOWN_COUNTRY:
                undeclared.add(neighbor)
            elif lookup.status is DistanceStatus.UNKNOWN_DISTANCE:
                unknown_edges.append(f"{country}->{neighbor}")
    if undeclared:
        report.add_warning(
            f"{len(undeclared)} neighbors are never declared in the borders file: "
            f"{_format_name_list(sorted(undeclared))}"
        )
    if unknown_edges:
        report.add_warning(
            f"{len(unknown_edges)} border edges have no capital distance and are skipped "
            f"by routing: {_format_name_list(unknown_edges)}"
        )


def _format_name_list(values: list[str], limit: int = 12) -> str:
    if len(values) <= limit:
        return ", ".join(values)
    shown = ", ".join(values[:limit])
    return f"{shown}, ... (+{len(values) - limit} more)"


def format_report_lines(report: ValidationReport) -> Iterable[str]:
    for info in report.infos:
        yield f"[INFO] {info}"
    for warning in report.warnings:
        yield f"[WARN] {warning}"
    for error in report.errors:
        yield f"[ERROR] {error}"
    if report.ok:
        yield "[OK] Validation completed with no errors."
