"""CLI entrypoint for the roadtrip border-route finder."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import AppConfig, load_config
from .graph import GraphModel
from .loader import DatasetLoadError, load_graph_from_config
from .routing import find_route
from .trip import dump_lines, dump_payload, run_interactive
from .util import setup_logging, write_json
from .validate import Validator, format_report_lines

LOGGER = logging.getLogger("roadtrip.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadtrip",
        description="Capital distances and shortest border-crossing routes between countries.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("--config", default="config.yaml", help="Path to YAML config.")
        p.add_argument("--verbose", action="store_true", help="Enable debug logs.")

    distance_p = subparsers.add_parser(
        "distance",
        help="Print the capital distance between two bordering countries (-1 if unknown).",
    )
    add_common(distance_p)
    distance_p.add_argument("country_a")
    distance_p.add_argument("country_b")

    path_p = subparsers.add_parser("path", help="Print the shortest route between two countries.")
    add_common(path_p)
    path_p.add_argument("country_a")
    path_p.add_argument("country_b")
    path_p.add_argument("--json", type=Path, default=None, help="Also write the route as JSON.")

    trip_p = subparsers.add_parser("trip", help="Interactive route prompt.")
    add_common(trip_p)

    dump_p = subparsers.add_parser("dump", help="Print the loaded tables.")
    add_common(dump_p)
    dump_p.add_argument("--json", type=Path, default=None, help="Write tables to a JSON file instead.")

    validate_p = subparsers.add_parser("validate", help="Check joins between the source files.")
    add_common(validate_p)

    return parser


def _load_and_setup(args: argparse.Namespace) -> AppConfig:
    cfg = load_config(args.config)
    setup_logging(cfg.paths.logs_dir / "roadtrip.log", verbose=args.verbose)
    return cfg


def _run_distance(model: GraphModel, country_a: str, country_b: str) -> int:
    lookup = model.resolve(country_a, country_b)
    LOGGER.debug("Distance %s -> %s: %s", country_a, country_b, lookup.status.value)
    print(lookup.as_legacy())
    return 0


def _run_path(model: GraphModel, country_a: str, country_b: str, json_path: Path | None) -> int:
    route = find_route(model, country_a, country_b)
    if json_path is not None:
        write_json(json_path, route.to_dict())
        LOGGER.info("Route written to %s", json_path)
    if not route.found:
        print(f"No valid path exists between {country_a} and {country_b}")
        return 1
    print(f"Route from {country_a} to {country_b}:")
    for line in route.describe():
        print(f"* {line}")
    print(f"Total: {route.total_km} km.")
    return 0


def _run_dump(model: GraphModel, json_path: Path | None) -> int:
    if json_path is not None:
        write_json(json_path, dump_payload(model))
        LOGGER.info("Tables written to %s", json_path)
        return 0
    for line in dump_lines(model):
        print(line)
    return 0


def _run_validate(cfg: AppConfig) -> int:
    report = Validator(cfg).run()
    for line in format_report_lines(report):
        LOGGER.info(line)
    return 0 if report.ok else 1


def _dispatch(args: argparse.Namespace) -> int:
    try:
        cfg = _load_and_setup(args)
    except (FileNotFoundError, ValueError) as exc:
        # Logging is not configured yet; fall back to a bare handler.
        logging.basicConfig(level=logging.INFO)
        LOGGER.error("Failed loading config: %s", exc)
        return 1

    command = str(args.command)
    if command == "validate":
        return _run_validate(cfg)

    try:
        model = load_graph_from_config(cfg)
    except DatasetLoadError as exc:
        LOGGER.error("%s", exc)
        return 1

    if command == "distance":
        return _run_distance(model, args.country_a.strip(), args.country_b.strip())
    if command == "path":
        return _run_path(model, args.country_a.strip(), args.country_b.strip(), args.json)
    if command == "trip":
        run_interactive(model)
        return 0
    if command == "dump":
        return _run_dump(model, args.json)
    raise ValueError(f"Unknown command: {command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _dispatch(args)


if __name__ == "__main__":
    raise SystemExit(main())
