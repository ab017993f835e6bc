from __future__ import annotations

from pathlib import Path

import pytest

from roadtrip.config import CapitalDistancesConfig, StateNamesConfig
from roadtrip.loader import (
    DatasetLoadError,
    load_graph,
    parse_borders,
    parse_capital_distances,
    parse_state_names,
)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_parse_borders_normalizes_names_and_drops_annotations(tmp_path):
    path = _write(
        tmp_path / "borders.txt",
        "Congo, Democratic Republic of the (Kinshasa) = Angola 2,646 km; Zambia (Rep) 2,332 km\n"
        "Angola = Congo, Democratic Republic of the 2,646 km\n",
    )
    adjacency = parse_borders(path)
    assert adjacency == {
        "Congo, Democratic Republic of the": ["Angola", "Zambia"],
        "Angola": ["Congo, Democratic Republic of the"],
    }


def test_parse_borders_declares_countries_without_neighbors(tmp_path):
    path = _write(tmp_path / "borders.txt", "Island\nNowhere = \n\nAtoll (Territory) =\n")
    assert parse_borders(path) == {"Island": [], "Nowhere": [], "Atoll": []}


def test_parse_borders_drops_empty_entries_and_keeps_order(tmp_path):
    path = _write(tmp_path / "borders.txt", "Alpha = Gamma 20 km; ; Beta 10 km; Gamma 1 km;\n")
    assert parse_borders(path) == {"Alpha": ["Gamma", "Beta", "Gamma"]}


def test_parse_borders_does_not_symmetrize(sources):
    adjacency = parse_borders(sources.borders)
    assert "Delta" in adjacency["Gamma"]
    assert "Delta" not in adjacency
    assert "Omega" not in adjacency["Alpha"]


def test_parse_capital_distances_is_symmetric(sources):
    distances = parse_capital_distances(sources.capital_distances)
    assert distances[("AA", "BB")] == distances[("BB", "AA")] == 500
    assert distances[("CC", "BB")] == 100
    assert len(distances) == 6


def test_parse_capital_distances_skips_header_and_blank_lines(tmp_path):
    path = _write(tmp_path / "capdist.csv", "1,AA,2,BB,7,4\n\n3,CC,4,DD,12,8\n\n")
    assert parse_capital_distances(path) == {("CC", "DD"): 12, ("DD", "CC"): 12}


def test_parse_capital_distances_custom_columns(tmp_path):
    path = _write(tmp_path / "capdist.csv", "a,b,km\nAA,BB,42\n")
    columns = CapitalDistancesConfig(code_a_column=0, code_b_column=1, distance_column=2)
    assert parse_capital_distances(path, columns) == {("AA", "BB"): 42, ("BB", "AA"): 42}


@pytest.mark.parametrize("bad", ["abc", "", "-5", "12.5"])
def test_parse_capital_distances_rejects_malformed_distance(tmp_path, bad):
    path = _write(tmp_path / "capdist.csv", f"header\n1,AA,2,BB,{bad},3\n")
    with pytest.raises(DatasetLoadError) as excinfo:
        parse_capital_distances(path)
    assert excinfo.value.source == path
    assert "line 2" in str(excinfo.value)


def test_parse_capital_distances_rejects_short_row(tmp_path):
    path = _write(tmp_path / "capdist.csv", "header\n1,AA,2\n")
    with pytest.raises(DatasetLoadError, match="expected at least 5 columns"):
        parse_capital_distances(path)


def test_parse_state_names_keeps_latest_snapshot(sources):
    codes, snapshot = parse_state_names(sources.state_names)
    assert snapshot == "2020-12-31"
    assert codes == {"Alpha": "AA", "Beta": "BB", "Gamma": "CC", "Epsilon": "EE", "Omega": "OO"}


def test_parse_state_names_snapshot_is_file_maximum(tmp_path):
    path = _write(
        tmp_path / "state_name.tsv",
        "h\th\th\th\th\n"
        "1\tOLD\tAlpha\t1816-01-01\t1990-01-01\n"
        "2\tNEW\tAlpha\t1990-01-02\t2016-12-31\n"
        "3\tBB\tBeta\t1816-01-01\t2010-05-05\n",
    )
    codes, snapshot = parse_state_names(path)
    assert snapshot == "2016-12-31"
    assert codes == {"Alpha": "NEW"}


def test_parse_state_names_pinned_snapshot(sources):
    codes, snapshot = parse_state_names(
        sources.state_names, StateNamesConfig(snapshot_date="1900-01-01")
    )
    assert snapshot == "1900-01-01"
    assert codes == {"Gamma": "XX"}


def test_parse_state_names_later_duplicate_wins(tmp_path):
    path = _write(
        tmp_path / "state_name.tsv",
        "header\n1\tAA1\tAlpha (First)\tx\t2020-12-31\n2\tAA2\tAlpha\tx\t2020-12-31\n",
    )
    codes, _ = parse_state_names(path)
    assert codes == {"Alpha": "AA2"}


def test_parse_state_names_skips_short_and_undated_rows(tmp_path):
    path = _write(
        tmp_path / "state_name.tsv",
        "header\n1\tAA\tAlpha\n2\tBB\tBeta\tx\tnot-a-date\n3\tCC\tGamma\tx\t2020-12-31\n",
    )
    codes, snapshot = parse_state_names(path)
    assert codes == {"Gamma": "CC"}
    assert snapshot == "2020-12-31"


def test_parse_state_names_empty_source(tmp_path):
    path = _write(tmp_path / "state_name.tsv", "header only\n")
    assert parse_state_names(path) == ({}, None)


def test_missing_source_is_fatal_and_names_file(tmp_path, sources):
    missing = tmp_path / "nope.csv"
    with pytest.raises(DatasetLoadError) as excinfo:
        load_graph(sources.borders, missing, sources.state_names)
    assert excinfo.value.source == missing
    assert str(missing) in str(excinfo.value)


def test_load_graph_fuses_tables(model):
    assert model.countries == ["Alpha", "Beta", "Epsilon", "Gamma", "Island", "Omega", "Zeta"]
    assert model.neighbors("Alpha") == ("Beta", "Gamma")
    assert model.code_for("Alpha") == "AA"
    assert model.code_for("Zeta") is None
    assert model.snapshot_date == "2020-12-31"
