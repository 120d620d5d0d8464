"""Pytest configuration and fixtures."""

import json
import shutil
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

FIXTURES = Path(__file__).parent / "fixtures"


def fixture_path(name: str) -> Path:
    return FIXTURES / name


def load_soup(name: str) -> BeautifulSoup:
    """Parse a fixture page the same way the scripts parse input.html."""
    return BeautifulSoup(fixture_path(name).read_text(encoding="utf-8"), "html.parser")


def load_data(name: str) -> dict:
    return json.loads(fixture_path(name).read_text(encoding="utf-8"))


@pytest.fixture
def html_soup():
    """Factory: ``html_soup("<table>...</table>")`` -> BeautifulSoup."""

    def make(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "html.parser")

    return make


@pytest.fixture
def flagler_soup() -> BeautifulSoup:
    return load_soup("flagler.html")


@pytest.fixture
def alachua_soup() -> BeautifulSoup:
    return load_soup("alachua.html")


@pytest.fixture
def clay_soup() -> BeautifulSoup:
    return load_soup("clay.html")


@pytest.fixture
def lee_soup() -> BeautifulSoup:
    return load_soup("lee.html")


@pytest.fixture
def pasco_soup() -> BeautifulSoup:
    return load_soup("pasco.html")


@pytest.fixture
def hillsborough_data() -> dict:
    return load_data("hillsborough.json")


@pytest.fixture
def manatee_data() -> dict:
    return load_data("manatee.json")


@pytest.fixture
def sample_seed() -> dict:
    """Seed file contents carrying request provenance."""
    return {
        "request_identifier": "1234567890",
        "source_http_request": {"method": "GET", "url": "https://example.org/parcel/1234567890"},
    }


@pytest.fixture
def county_workdir(tmp_path):
    """Factory: copy a fixture into ``tmp_path`` as input.html / input.json."""

    def make(fixture_name: str, seed: dict = None, seed_name: str = "property_seed.json") -> Path:
        target = "input.json" if fixture_name.endswith(".json") else "input.html"
        shutil.copyfile(fixture_path(fixture_name), tmp_path / target)
        if seed is not None:
            (tmp_path / seed_name).write_text(json.dumps(seed), encoding="utf-8")
        return tmp_path

    return make


def read_output(workdir: Path, filename: str) -> dict:
    return json.loads((workdir / "owners" / filename).read_text(encoding="utf-8"))
