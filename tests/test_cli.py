"""Tests for county discovery, run_county and the command line."""

import pytest

from county_mapper.cli import build_parser, main
from county_mapper.exceptions import UnknownCountyError
from county_mapper.main import available_scripts, import_county_scripts, list_counties, normalize_county_name, run_county
from tests.conftest import read_output

ALL_COUNTIES = ["alachua", "clay", "flagler", "hillsborough", "lee", "manatee", "pasco"]
OUTPUT_FILES = ["layout_data.json", "owner_data.json", "structure_data.json", "utilities_data.json"]


class TestDiscovery:
    """Tests for locating county scripts."""

    def test_list_counties(self) -> None:
        assert list_counties() == ALL_COUNTIES

    def test_available_scripts_in_run_order(self) -> None:
        assert available_scripts("lee") == ["owner", "layout", "structure", "utility"]
        assert available_scripts("alachua") == ["layout", "structure", "utility"]
        assert available_scripts("pasco") == ["owner", "structure", "utility"]
        assert available_scripts("nowhere") == []

    def test_normalize_county_name(self) -> None:
        assert normalize_county_name(" Palm Beach ") == "palm_beach"
        assert normalize_county_name("Palm-Beach") == "palm_beach"

    def test_unknown_county(self) -> None:
        with pytest.raises(UnknownCountyError):
            import_county_scripts("nowhere")

    def test_missing_kind_is_skipped(self) -> None:
        modules = import_county_scripts("Manatee", ["layout", "utility"])
        assert list(modules) == ["layout"]


class TestRunCounty:
    """Tests for running every script of a county."""

    def test_writes_all_outputs(self, county_workdir) -> None:
        workdir = county_workdir("lee.html")
        assert run_county("lee", workdir=str(workdir)) == 0
        assert sorted(p.name for p in (workdir / "owners").iterdir()) == OUTPUT_FILES

    def test_rerun_is_identical(self, county_workdir) -> None:
        workdir = county_workdir("flagler.html")
        run_county("flagler", workdir=str(workdir))
        first = (workdir / "owners" / "structure_data.json").read_text(encoding="utf-8")
        run_county("flagler", workdir=str(workdir))
        assert (workdir / "owners" / "structure_data.json").read_text(encoding="utf-8") == first

    def test_seed_fields_reach_outputs(self, county_workdir, sample_seed) -> None:
        workdir = county_workdir("hillsborough.json", seed=sample_seed)
        run_county("hillsborough", ["utility"], str(workdir))
        utility = read_output(workdir, "utilities_data.json")["property_U-01-28-17-1AB-000000-00001.0"]
        assert utility["request_identifier"] == "1234567890"

    def test_manatee_reads_parcel_seed(self, county_workdir, sample_seed) -> None:
        workdir = county_workdir("manatee.json", seed=sample_seed, seed_name="parcel.json")
        assert run_county("manatee", workdir=str(workdir)) == 0
        assert read_output(workdir, "layout_data.json") == {"property_1234567890": {"layouts": []}}

    def test_manatee_without_seed_fails(self, county_workdir) -> None:
        workdir = county_workdir("manatee.json")
        assert run_county("manatee", workdir=str(workdir)) == 1
        # owners are written before the layout step fails
        assert read_output(workdir, "owner_data.json")["property_1234567890"]["owners_by_date"]

    def test_missing_input(self, tmp_path) -> None:
        assert run_county("lee", workdir=str(tmp_path)) == 1
        assert not (tmp_path / "owners").exists()


class TestCli:
    """Tests for the county-mapper command."""

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args(["lee"])
        assert args.county == "lee"
        assert args.scripts is None
        assert args.workdir == "."

    def test_list(self, capsys) -> None:
        main(["--list"])
        assert capsys.readouterr().out.split() == ALL_COUNTIES

    def test_selected_script_only(self, county_workdir) -> None:
        workdir = county_workdir("pasco.html")
        main(["pasco", "--scripts", "utility", "--workdir", str(workdir)])
        assert [p.name for p in (workdir / "owners").iterdir()] == ["utilities_data.json"]

    def test_requires_county(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_unknown_county_exits_nonzero(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["nowhere", "--workdir", str(tmp_path)])
        assert excinfo.value.code == 1

    def test_missing_input_exits_nonzero(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["clay", "--workdir", str(tmp_path)])
        assert excinfo.value.code == 1
