"""Tests for the user-facing API and the command-line interface."""

import json
import sys

import pytest
import yaml

from enc_symbology import cli
from enc_symbology.api import build_index, lookup_procedure, symbolize_cell, symbolize_feature
from enc_symbology.config import MarinerParameters
from enc_symbology.exceptions import DataIntegrityError


CELL = {
    "name": "harbour",
    "features": [
        {"id": 3, "class": "DEPCNT", "kind": "Line",
         "coordinates": [[0, 0], [10, 10]], "attributes": {"VALDCO": 10}},
        {"id": 1, "class": "DEPARE", "kind": "Area",
         "coordinates": [[0, 0], [10, 0], [10, 10], [0, 10]],
         "attributes": {"DRVAL1": 5, "DRVAL2": 8}},
        {"id": 2, "class": "SOUNDG", "kind": "Point", "coordinates": [[2, 2, 7.5]]},
        {"id": 4, "class": "BRIDGE", "kind": "Line", "coordinates": [[1, 1], [2, 2]]},
    ],
}


@pytest.fixture
def cell_file(tmp_path):
    path = tmp_path / "harbour.yaml"
    path.write_text(yaml.safe_dump(CELL))
    return path


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["enc-symbology", *argv])
    return cli.main()


class TestApi:

    def test_lookup_procedure(self, make_feature):
        assert lookup_procedure(make_feature(1, "DEPARE", "Area")) == "DEPARE01"
        assert lookup_procedure(make_feature(2, "DEPARE", "Line")) == "DEPCNT02"
        assert lookup_procedure(make_feature(3, "LIGHTS")) == "LIGHTS05"
        assert lookup_procedure(make_feature(4, "FAIRWY", "Area")) == "RESTRN01"
        assert lookup_procedure(make_feature(5, "BRIDGE", "Line")) == "QUESMRK1"

    def test_custom_lookup(self, make_feature):
        table = {("DEPARE", "Area"): "DEPARE02"}
        assert lookup_procedure(make_feature(1, "DEPARE", "Area"), table) == "DEPARE02"
        assert lookup_procedure(make_feature(2, "LIGHTS"), table) == "QUESMRK1"

    def test_symbolize_cell(self, make_feature, diagnostics):
        features = [
            make_feature(3, "DEPCNT", "Line", VALDCO=10),
            make_feature(1, "DEPARE", "Area", DRVAL1=5, DRVAL2=8),
            make_feature(2, "SOUNDG", coordinates=[[2.0, 2.0, 7.5]]),
        ]
        params = MarinerParameters(safety_contour=10.0, shallow_contour=5.0, deep_contour=30.0)
        results = symbolize_cell(features, params=params, diagnostics=diagnostics)
        assert list(results) == [1, 2, 3]
        assert results[1].serialize() == ";AC(DEPMS)"
        assert results[2].serialize() == ";SY(SOUNDS17);SY(SOUNDS55)"
        assert results[3].serialize() == ";OP(8OD13010);LS(SOLD,2,DEPSC)"

    def test_duplicate_identifiers(self, make_feature, diagnostics):
        with pytest.raises(DataIntegrityError):
            build_index([make_feature(1, "LIGHTS"), make_feature(1, "DEPARE", "Area")], diagnostics)

    def test_symbolize_feature(self, make_feature, diagnostics):
        danger = make_feature(1, "OBSTRN")
        assert symbolize_feature(danger, diagnostics=diagnostics).serialize() == ";SY(OBSTRN01)"
        area = make_feature(2, "DEPARE", "Area", DRVAL1=5, DRVAL2=8)
        assert symbolize_feature(area, "DEPARE01", diagnostics=diagnostics).serialize() == ";AC(DEPMS)"


class TestCli:

    def test_symbolize_text(self, monkeypatch, capsys, cell_file):
        assert run_cli(monkeypatch, "symbolize", str(cell_file), "--safety-contour", "10",
                       "--shallow-contour", "5", "-q") == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "1\t;AC(DEPMS)"
        assert lines[2] == "3\t;OP(8OD13010);LS(SOLD,2,DEPSC)"
        assert lines[3] == "4\t;LC(QUESMRK1)"

    def test_symbolize_json_to_file(self, monkeypatch, tmp_path, cell_file):
        output = tmp_path / "out" / "instructions.json"
        assert run_cli(monkeypatch, "symbolize", str(cell_file), "--format", "json",
                       "--two-shades", "--output", str(output), "-q") == 0
        data = json.loads(output.read_text())
        assert data["1"] == ";AC(DEPVS)"

    def test_symbolize_with_config(self, monkeypatch, capsys, tmp_path, cell_file):
        config = tmp_path / "mariner.yaml"
        MarinerParameters(safety_contour=10.0, shallow_contour=5.0).save_to_file(config)
        assert run_cli(monkeypatch, "symbolize", str(cell_file), "--config", str(config), "-q") == 0
        assert "3\t;OP(8OD13010);LS(SOLD,2,DEPSC)" in capsys.readouterr().out

    def test_invalid_parameters(self, monkeypatch, capsys, cell_file):
        assert run_cli(monkeypatch, "symbolize", str(cell_file), "--shallow-contour", "50", "-q") == 1
        assert "Error" in capsys.readouterr().err

    def test_missing_cell(self, monkeypatch, capsys, tmp_path):
        assert run_cli(monkeypatch, "symbolize", str(tmp_path / "absent.yaml"), "-q") == 1

    def test_procedures(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "procedures", "--all", "-q") == 0
        out = capsys.readouterr().out
        assert "DEPARE01" in out
        assert "OBSTRN06   alias of OBSTRN04" in out
        assert "SEABED01   sub-procedure" in out

    def test_parse(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "parse", ";AC(DEPVS);AP(DIAMOND1)", "-q") == 0
        assert capsys.readouterr().out.strip().splitlines()[-1] == ";AC(DEPVS);AP(DIAMOND1)"

    def test_parse_error(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "parse", "LS(SOLD,2)", "-q") == 1
        assert "Error" in capsys.readouterr().err

    def test_no_command(self, monkeypatch, capsys):
        assert run_cli(monkeypatch) == 1
