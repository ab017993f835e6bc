from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from roadtrip.graph import GraphModel
from roadtrip.loader import load_graph

BORDERS = """\
Alpha (Republic of) = Beta 10 km; Gamma 20 km;
Beta = Alpha 10; Gamma 5;
Gamma = Alpha 20; Beta 5; Delta 3 km

Island
Epsilon = Zeta 4 km
Zeta = Epsilon 4 km
Omega = Alpha 7 km
"""

CAPDIST = """\
numa,ida,numb,idb,kmdist,midist
1,AA,2,BB,500,310
2,BB,3,CC,100,62
1,AA,3,CC,900,559
"""

STATE_NAMES = (
    "statenumber\tstateid\tcountryname\tstart\tend\n"
    "1\tAA\tAlpha (Republic of)\t1816-01-01\t2020-12-31\n"
    "2\tBB\tBeta\t1816-01-01\t2020-12-31\n"
    "9\tXX\tGamma\t1816-01-01\t1900-01-01\n"
    "3\tCC\tGamma\t1816-01-01\t2020-12-31\n"
    "5\tEE\tEpsilon\t1816-01-01\t2020-12-31\n"
    "6\tOO\tOmega\t1900-01-01\t2020-12-31\n"
)


@dataclass(frozen=True)
class SourceFiles:
    borders: Path
    capital_distances: Path
    state_names: Path


def write_sources(
    root: Path,
    *,
    borders: str = BORDERS,
    capdist: str = CAPDIST,
    state_names: str = STATE_NAMES,
) -> SourceFiles:
    data_dir = root / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    files = SourceFiles(
        borders=data_dir / "borders.txt",
        capital_distances=data_dir / "capdist.csv",
        state_names=data_dir / "state_name.tsv",
    )
    files.borders.write_text(borders, encoding="utf-8")
    files.capital_distances.write_text(capdist, encoding="utf-8")
    files.state_names.write_text(state_names, encoding="utf-8")
    return files


def write_config(root: Path, extra: str = "") -> Path:
    cfg_path = root / "config.yaml"
    cfg_path.write_text(
        "paths:\n"
        "  borders: data/borders.txt\n"
        "  capital_distances: data/capdist.csv\n"
        "  state_names: data/state_name.tsv\n"
        "  logs_dir: build/logs\n" + extra,
        encoding="utf-8",
    )
    return cfg_path


@pytest.fixture
def sources(tmp_path: Path) -> SourceFiles:
    return write_sources(tmp_path)


@pytest.fixture
def model(sources: SourceFiles) -> GraphModel:
    return load_graph(sources.borders, sources.capital_distances, sources.state_names)
