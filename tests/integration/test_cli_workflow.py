"""Integration tests for end-to-end CLI workflows."""

import json
import os
import tempfile

import pytest
from click.testing import CliRunner

from mechcalc.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tmp_dir():
    with tempfile.TemporaryDirectory() as d:
        yield d


class TestCalculatorCommands:
    def test_cfm(self, runner):
        result = runner.invoke(cli, [
            "cfm", "--floor-area", "500", "--ceiling-height", "8", "--ach", "4"
        ])
        assert result.exit_code == 0, result.output
        assert "266.67" in result.output
        assert "CFM Calculator" in result.output

    def test_cfm_json(self, runner):
        result = runner.invoke(cli, [
            "cfm", "--floor-area", "1000", "--ceiling-height", "10", "--ach", "8", "--json"
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["calculator"] == "cfm"
        assert data["outputs"]["required_cfm"] == pytest.approx(1333.33)
        assert data["display"]["required_cfm"] == "1,333.33"

    def test_duct_defaults(self, runner):
        result = runner.invoke(cli, ["duct", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["display"]["computed_friction_rate"] == "0.333"
        assert data["display"]["recommended_diameter"] == "8.94"

    def test_hvac_load_json(self, runner):
        result = runner.invoke(cli, [
            "hvac-load", "--square-footage", "1000", "--ceiling-height", "8",
            "--occupants", "4", "--windows", "4", "--doors", "2",
            "--insulation", "poor", "--json",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["outputs"]["total_btu"] == 17280
        assert data["display"]["tonnage"] == "1.44"

    def test_hvac_load_blank(self, runner):
        result = runner.invoke(cli, ["hvac-load"])
        assert result.exit_code == 0, result.output
        assert "N/A" in result.output
        assert "Not computable" in result.output

    def test_pipe_slope(self, runner):
        result = runner.invoke(cli, ["pipe-slope", "--fall", "25", "--length", "97"])
        assert result.exit_code == 0, result.output
        assert "25.77%" in result.output

    def test_pipe_slope_zero_length(self, runner):
        result = runner.invoke(cli, ["pipe-slope", "--fall", "25", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["outputs"]["slope"] is None
        assert data["outputs"]["computable"] is False

    def test_pipe_volume(self, runner):
        result = runner.invoke(cli, [
            "pipe-volume", "--diameter", "6", "--length", "10", "--json"
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["display"]["volume"] == "0.0556"
        assert data["outputs"]["liquid_mass"] == pytest.approx(55.43, abs=0.01)

    def test_pipe_volume_unknown_unit_warns(self, runner):
        result = runner.invoke(cli, [
            "pipe-volume", "--diameter", "0.1", "--diameter-unit", "furlong",
            "--length", "1", "--length-unit", "m",
        ])
        assert result.exit_code == 0, result.output
        assert "Warning" in result.output
        assert "0.0079" in result.output


class TestInfoCommands:
    def test_info_calculators(self, runner):
        result = runner.invoke(cli, ["info", "calculators"])
        assert result.exit_code == 0, result.output
        assert "hvac-load" in result.output
        assert "pipe-volume" in result.output

    def test_info_calculator(self, runner):
        result = runner.invoke(cli, ["info", "calculator", "duct"])
        assert result.exit_code == 0, result.output
        assert "friction_rate" in result.output
        assert "Formula" in result.output

    def test_info_unknown_calculator(self, runner):
        result = runner.invoke(cli, ["info", "calculator", "boiler"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_info_units(self, runner):
        result = runner.invoke(cli, ["info", "units"])
        assert result.exit_code == 0, result.output
        assert "lb/ft³" in result.output
        assert "0.3048" in result.output
        assert "3.28084" in result.output

    def test_info_convert_table_symbols(self, runner):
        result = runner.invoke(cli, ["info", "convert", "1", "lb/ft³", "kg/m³"])
        assert result.exit_code == 0, result.output
        assert "16.0185" in result.output

    def test_info_convert_pint_units(self, runner):
        result = runner.invoke(cli, ["info", "convert", "12", "in", "ft"])
        assert result.exit_code == 0, result.output
        assert "= 1 ft" in result.output

    def test_info_convert_incompatible(self, runner):
        result = runner.invoke(cli, ["info", "convert", "1", "ft", "kg"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestSweepReportInteractive:
    def test_sweep(self, runner):
        result = runner.invoke(cli, [
            "sweep", "cfm", "--field", "ach", "--start", "0", "--stop", "6", "--steps", "4",
            "--set", "floor_area=500", "--set", "ceiling_height=8",
        ])
        assert result.exit_code == 0, result.output
        assert "400.00" in result.output

    def test_sweep_not_computable(self, runner):
        result = runner.invoke(cli, [
            "sweep", "pipe-slope", "--field", "pipe_length", "--start", "0", "--stop", "10",
            "--steps", "3", "--set", "pipe_fall=1",
        ])
        assert result.exit_code == 0, result.output
        assert "1 point(s) not computable" in result.output

    def test_sweep_choice_field(self, runner):
        result = runner.invoke(cli, [
            "sweep", "hvac-load", "--field", "insulation_level", "--start", "0", "--stop", "1",
        ])
        assert result.exit_code == 1

    def test_sweep_bad_set(self, runner):
        result = runner.invoke(cli, [
            "sweep", "cfm", "--field", "ach", "--start", "0", "--stop", "1", "--set", "floor_area",
        ])
        assert result.exit_code == 2

    def test_report_text_file(self, runner, tmp_dir):
        out = os.path.join(tmp_dir, "report.txt")
        result = runner.invoke(cli, [
            "report", "pipe-slope", "--set", "pipe_fall=25", "--set", "pipe_length=97", "-o", out,
        ])
        assert result.exit_code == 0, result.output
        with open(out, encoding="utf-8") as f:
            content = f.read()
        assert "25.77%" in content

    def test_report_html(self, runner, tmp_dir):
        out = os.path.join(tmp_dir, "report.html")
        result = runner.invoke(cli, [
            "report", "hvac-load", "--set", "square_footage=1000", "--set", "ceiling_height=8",
            "--format", "html", "-o", out,
        ])
        assert result.exit_code == 0, result.output
        with open(out, encoding="utf-8") as f:
            assert "<!DOCTYPE html>" in f.read()

    def test_report_both_dotted_directory(self, runner, tmp_dir):
        out_dir = os.path.join(tmp_dir, "job.v2")
        os.makedirs(out_dir)
        out = os.path.join(out_dir, "report")
        result = runner.invoke(cli, [
            "report", "cfm", "--set", "floor_area=500", "--set", "ceiling_height=8",
            "--set", "ach=4", "--format", "both", "-o", out,
        ])
        assert result.exit_code == 0, result.output
        assert os.path.isfile(os.path.join(out_dir, "report.txt"))
        assert os.path.isfile(os.path.join(out_dir, "report.html"))

    def test_report_unknown_field(self, runner):
        result = runner.invoke(cli, ["report", "cfm", "--set", "volume=3"])
        assert result.exit_code == 1
        assert "no field" in result.output

    def test_interactive_live(self, runner):
        result = runner.invoke(
            cli,
            ["interactive", "cfm"],
            input="floor_area=500\nceiling_height=8\nach=4\nquit\n",
        )
        assert result.exit_code == 0, result.output
        assert "(live)" in result.output
        assert "266.67" in result.output

    def test_interactive_on_submit(self, runner):
        result = runner.invoke(
            cli,
            ["interactive", "hvac-load", "--mode", "on_submit"],
            input="square_footage=1000\nceiling_height=8\nsubmit\nquit\n",
        )
        assert result.exit_code == 0, result.output
        assert "type 'submit'" in result.output
        assert "8,000" in result.output

    def test_interactive_unknown_field(self, runner):
        result = runner.invoke(cli, ["interactive", "cfm"], input="volume=3\nquit\n")
        assert result.exit_code == 0, result.output
        assert "no field" in result.output


class TestConfigOption:
    def test_config_file(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "mechcalc.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({
                "insulation_factors": {"average": 2.0},
                "calculators": {"hvac-load": {"heading_text": "Load Estimate"}},
            }, f)

        result = runner.invoke(cli, [
            "--config", path, "hvac-load", "--square-footage", "100", "--ceiling-height", "10",
        ])
        assert result.exit_code == 0, result.output
        assert "Load Estimate" in result.output
        assert "2,000" in result.output

    def test_invalid_config(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "bad.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"calculators": {"cfm": {"evaluation_mode": "hourly"}}}, f)
        result = runner.invoke(cli, ["--config", path, "cfm"])
        assert result.exit_code == 1
        assert "invalid config" in result.output

    def test_config_section_not_an_object(self, runner, tmp_dir):
        path = os.path.join(tmp_dir, "bad.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"insulation_factors": [1.2, 1.0]}, f)
        result = runner.invoke(cli, ["--config", path, "cfm"])
        assert result.exit_code == 1
        assert "invalid config" in result.output
