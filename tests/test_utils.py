"""Tests for input loading, output writing and logging setup."""

import json
import logging
from pathlib import Path

import pytest

from county_mapper.exceptions import InvalidInputError, MissingInputError
from county_mapper.utils import (
    OUTPUT_DIR,
    load_html,
    load_json,
    query_values,
    read_seed,
    run_script,
    seed_request_fields,
    setup_logging,
    write_output,
)


class TestInputs:
    """Tests for input loading."""

    def test_missing_html(self, tmp_path) -> None:
        with pytest.raises(MissingInputError) as exc_info:
            load_html(str(tmp_path))
        assert exc_info.value.path == "input.html"

    def test_invalid_json(self, tmp_path) -> None:
        (tmp_path / "input.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidInputError):
            load_json(str(tmp_path))

    def test_empty_json_is_empty_dict(self, tmp_path) -> None:
        (tmp_path / "input.json").write_text("  ", encoding="utf-8")
        assert load_json(str(tmp_path)) == {}

    def test_read_seed_order_and_bad_files(self, tmp_path) -> None:
        (tmp_path / "property_seed.json").write_text('{"request_identifier": "A"}', encoding="utf-8")
        (tmp_path / "parcel.json").write_text('{"request_identifier": "B"}', encoding="utf-8")
        assert read_seed(str(tmp_path))["request_identifier"] == "A"
        assert read_seed(str(tmp_path), ("parcel.json", "property_seed.json"))["request_identifier"] == "B"

        (tmp_path / "property_seed.json").write_text("{broken", encoding="utf-8")
        assert read_seed(str(tmp_path))["request_identifier"] == "B"

    def test_read_seed_missing(self, tmp_path) -> None:
        assert read_seed(str(tmp_path)) is None

    def test_seed_request_fields(self, sample_seed) -> None:
        fields = seed_request_fields(dict(sample_seed, parcel_id="x"))
        assert set(fields) == {"request_identifier", "source_http_request"}
        assert seed_request_fields(None) == {}

    def test_query_values_merges_fragment_query(self) -> None:
        url = "https://example.org/app?parid=1&x=&x=2#/parcel?parid=99"
        assert query_values(url) == {"parid": ["1", "99"], "x": ["", "2"]}

    def test_query_values_without_query(self) -> None:
        assert query_values("https://example.org/#/home") == {}
        assert query_values("") == {}
        assert query_values(None) == {}


class TestWriteOutput:
    """Tests for output assembly."""

    def test_creates_directory_and_writes_pretty_json(self, tmp_path) -> None:
        path = write_output({"property_1": {"a": None}}, "structure_data.json", str(tmp_path))
        assert path == str(tmp_path / OUTPUT_DIR / "structure_data.json")
        text = (tmp_path / OUTPUT_DIR / "structure_data.json").read_text(encoding="utf-8")
        assert json.loads(text) == {"property_1": {"a": None}}
        assert text.startswith("{\n  ")

    def test_idempotent(self, tmp_path) -> None:
        payload = {"property_1": {"owners_by_date": {"current": [{"type": "company", "name": "Café LLC"}]}}}
        path = write_output(payload, "owner_data.json", str(tmp_path))
        first = Path(path).read_bytes()
        write_output(payload, "owner_data.json", str(tmp_path))
        assert Path(path).read_bytes() == first


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_and_file_handlers(self, tmp_path) -> None:
        log_file = setup_logging("debug", str(tmp_path / "logs"))
        root = logging.getLogger()
        try:
            assert root.level == logging.DEBUG
            assert log_file is not None and log_file.startswith(str(tmp_path / "logs"))
            logging.getLogger("county_mapper.test").info("hello")
            for handler in root.handlers:
                handler.flush()
            assert "hello" in Path(log_file).read_text(encoding="utf-8")
        finally:
            for handler in root.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    handler.close()
                    root.removeHandler(handler)

    def test_without_log_dir(self) -> None:
        assert setup_logging("warning") is None
        assert logging.getLogger().level == logging.WARNING


class TestRunScript:
    """Tests for the module entry point wrapper."""

    def test_fatal_error_exits_1(self) -> None:
        def main() -> None:
            raise MissingInputError("input.html not found", "input.html")

        with pytest.raises(SystemExit) as excinfo:
            run_script(main)
        assert excinfo.value.code == 1

    def test_success_returns(self) -> None:
        calls = []
        run_script(lambda: calls.append(True))
        assert calls == [True]
