"""Tests for property identifier resolution and the seed gate."""

import pytest

from county_mapper.exceptions import MissingInputError, PropertyIdNotFoundError, RequestIdentifierMismatchError
from county_mapper.identifiers import (
    check_request_identifier,
    query_param,
    regex_group,
    require_property_id,
    resolve_property_id,
    sanitize_property_id,
    seed_parcel_id,
)


class TestResolvePropertyId:
    """Tests for ordered strategy evaluation."""

    def test_first_non_empty_wins(self) -> None:
        strategies = [
            lambda: None,
            lambda: {}["missing"],
            lambda: "   ",
            lambda: " 123 ",
            lambda: "456",
        ]
        assert resolve_property_id(strategies) == "123"

    def test_default_sentinel(self) -> None:
        assert resolve_property_id([lambda: None]) == "unknown"
        assert resolve_property_id([], default="unknown_id") == "unknown_id"

    def test_missing_elements_are_misses(self, html_soup) -> None:
        soup = html_soup("<p>nothing</p>")
        assert resolve_property_id([lambda: soup.select_one("#id").text], default="x") == "x"

    def test_numbers_become_strings(self) -> None:
        assert resolve_property_id([lambda: 42]) == "42"

    def test_require_raises_structured_error(self) -> None:
        with pytest.raises(PropertyIdNotFoundError) as exc_info:
            require_property_id([lambda: None])
        assert exc_info.value.to_dict() == {"type": "error", "message": "Parcel ID not found", "path": ""}


class TestStrategyHelpers:
    """Tests for the recurring strategies."""

    def test_regex_group(self) -> None:
        assert regex_group(r"Folio\s*ID:\s*(\d+)", "Folio ID: 10234567") == "10234567"
        with pytest.raises(AttributeError):
            regex_group(r"Folio\s*ID:\s*(\d+)", "no folio")

    def test_query_param(self) -> None:
        assert query_param("https://example.org/Display?FolioID=10234567&x=1", "FolioID") == "10234567"
        assert query_param("https://example.org/#/parcel?parid=99", "parid") == "99"
        assert query_param("https://example.org/", "parid") is None

    def test_seed_parcel_id(self) -> None:
        assert seed_parcel_id({"parcel_id": 5}) == "5"
        assert seed_parcel_id({"request_identifier": "ABC"}) == "ABC"
        assert seed_parcel_id(None) is None

    def test_sanitize(self) -> None:
        assert sanitize_property_id("12/34 A-1.0") == "12_34_A-1.0"


class TestRequestIdentifierGate:
    """Tests for the seed cross-check."""

    def test_match_ignores_dashes(self) -> None:
        assert check_request_identifier("12-345-678", {"request_identifier": "12345678"}) is None

    def test_mismatch(self) -> None:
        with pytest.raises(RequestIdentifierMismatchError) as exc_info:
            check_request_identifier("12345678", {"request_identifier": "999"})
        assert exc_info.value.path == "property.request_identifier"
        assert exc_info.value.message == "Request identifier and parcel id don't match."

    def test_missing_identifier_is_mismatch(self) -> None:
        with pytest.raises(RequestIdentifierMismatchError):
            check_request_identifier("12345678", {})

    def test_missing_seed(self) -> None:
        with pytest.raises(MissingInputError):
            check_request_identifier("12345678", None)
