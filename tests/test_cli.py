"""
Tests for the coolcalc command line
"""

import json

import pytest

from coolcalc.__main__ import load_parameters, main
from coolcalc.services.error_types import InputFileError

PARAMETERS = {
    "room": {
        "length": 5, "width": 4, "height": 3,
        "wallInsulationThickness": 150,
        "ambientTemp": 35, "roomTemp": -18, "tempUnit": "C",
    },
    "product": {
        "productEnteringTemp": 25, "productFinalTemp": -18, "freezingTemp": -2,
        "cpAboveFreezing": 3.5, "cpBelowFreezing": 1.8, "latentHeat": 250,
    },
    "misc": {"occupancyCount": 2, "capacityRequired": 1000},
}


@pytest.fixture
def parameter_file(tmp_path):
    path = tmp_path / "freezer.json"
    path.write_text(json.dumps(PARAMETERS))
    return str(path)


class TestLoadParameters:

    def test_accepts_camel_case_keys(self, parameter_file):
        room, product, misc = load_parameters(parameter_file)
        assert room.wall_insulation_thickness == 150
        assert product.latent_heat == 250
        assert misc.capacity_required == 1000
        assert misc.light_power is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputFileError):
            load_parameters(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(InputFileError):
            load_parameters(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(InputFileError):
            load_parameters(str(path))

    def test_unknown_key_rejected(self, tmp_path):
        data = json.loads(json.dumps(PARAMETERS))
        data["room"]["ambientTmp"] = 40
        path = tmp_path / "typo.json"
        path.write_text(json.dumps(data))
        with pytest.raises(InputFileError):
            load_parameters(str(path))

    def test_validation_error(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"room": {"length": 5}}))
        with pytest.raises(InputFileError) as exc_info:
            load_parameters(str(path))
        assert exc_info.value.details['errors']


class TestMain:

    def test_prints_results(self, parameter_file, capsys):
        assert main([parameter_file]) == 0
        out = capsys.readouterr().out
        assert "MAIN RESULTS" in out
        assert "TR" in out

    def test_json_output(self, parameter_file, capsys):
        assert main([parameter_file, "--json"]) == 0
        out = capsys.readouterr().out
        data = json.loads(out[out.index("{"):out.rindex("}") + 1])
        assert data["total_load"] > 0
        assert isinstance(data["air_qty_required"], int)

    def test_invalid_file_returns_error(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "Error: Cannot read parameter file" in capsys.readouterr().err

    def test_export_writes_html_when_pdf_disabled(self, parameter_file, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr("coolcalc.core.config.DISABLE_PDF", True)
        out_dir = tmp_path / "out"
        share_dir = tmp_path / "share"
        share_dir.mkdir()

        code = main([parameter_file, "--export", "--output-dir", str(out_dir), "--share-dir", str(share_dir)])

        assert code == 0
        written = list(out_dir.iterdir())
        assert len(written) == 1
        assert written[0].suffix == ".html"
        assert (share_dir / written[0].name).exists()
        assert "Heat load sheet written to" in capsys.readouterr().out
