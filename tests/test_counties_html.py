"""Golden tests for the HTML county scripts."""

from county_mapper.counties.alachua import layout_extractor as alachua_layout
from county_mapper.counties.alachua import structure_extractor as alachua_structure
from county_mapper.counties.alachua import utility_extractor as alachua_utility
from county_mapper.counties.clay import layout_extractor as clay_layout
from county_mapper.counties.clay import owner_processor as clay_owner
from county_mapper.counties.clay import structure_extractor as clay_structure
from county_mapper.counties.clay import utility_extractor as clay_utility
from county_mapper.counties.flagler import layout_extractor as flagler_layout
from county_mapper.counties.flagler import owner_processor as flagler_owner
from county_mapper.counties.flagler import structure_extractor as flagler_structure
from county_mapper.counties.flagler import utility_extractor as flagler_utility
from county_mapper.counties.lee import layout_extractor as lee_layout
from county_mapper.counties.lee import owner_processor as lee_owner
from county_mapper.counties.lee import structure_extractor as lee_structure
from county_mapper.counties.lee import utility_extractor as lee_utility
from county_mapper.counties.pasco import owner_processor as pasco_owner
from county_mapper.counties.pasco import structure_extractor as pasco_structure
from county_mapper.counties.pasco import utility_extractor as pasco_utility


def person(first, last, middle=None):
    return {"type": "person", "first_name": first, "last_name": last, "middle_name": middle}


def space_types(payload, key):
    return [layout["space_type"] for layout in payload[key]["layouts"]]


class TestFlagler:
    """Tests for the Flagler scripts."""

    def test_layout_bedrooms_and_baths(self, flagler_soup) -> None:
        payload = flagler_layout.run(flagler_soup)
        layouts = payload["property_12345"]["layouts"]
        assert space_types(payload, "property_12345") == ["Bedroom"] * 3 + ["Full Bathroom"] * 2
        assert [l["space_index"] for l in layouts] == [1, 2, 3, 4, 5]
        assert all(l["floor_level"] == "1st Floor" and l["is_finished"] for l in layouts)

    def test_structure(self, flagler_soup) -> None:
        structure = flagler_structure.run(flagler_soup)["property_12345"]
        assert structure["exterior_wall_material_primary"] == "Stucco"
        assert structure["flooring_material_primary"] == "Carpet"
        assert structure["flooring_material_secondary"] == "Ceramic Tile"
        assert structure["interior_wall_surface_material_primary"] == "Drywall"
        assert structure["roof_covering_material"] == "Architectural Asphalt Shingle"
        assert structure["primary_framing_material"] == "Masonry"
        assert structure["finished_base_area"] == 1850
        assert structure["number_of_stories"] is None

    def test_base_area_rounds_half_up(self, flagler_soup) -> None:
        flagler_soup.find("td", string="1,850").string = "1,234.5"
        structure = flagler_structure.run(flagler_soup)["property_12345"]
        assert structure["finished_base_area"] == 1235

    def test_utility(self, flagler_soup) -> None:
        utility = flagler_utility.run(flagler_soup)["property_12345"]
        assert utility["heating_system_type"] == "Central"
        assert utility["cooling_system_type"] == "CentralAir"
        assert utility["electrical_panel_capacity"] == "Unknown"

    def test_owners(self, flagler_soup) -> None:
        record = flagler_owner.run(flagler_soup)["property_12345"]
        assert record == {
            "owners_by_date": {
                "2015-01-15": [person("Jane", "Doe")],
                "current": [person("John", "Smith", "Jane")],
            },
            "invalid_owners": [],
        }

    def test_unknown_id(self, html_soup) -> None:
        payload = flagler_layout.run(html_soup("<html><body></body></html>"))
        assert payload == {"property_unknown": {"layouts": []}}

    def test_seed_fields_carried(self, flagler_soup, sample_seed) -> None:
        layout = flagler_layout.run(flagler_soup, sample_seed)["property_12345"]["layouts"][0]
        assert layout["request_identifier"] == "1234567890"
        assert layout["source_http_request"]["method"] == "GET"


class TestAlachua:
    """Tests for the Alachua scripts."""

    def test_layout(self, alachua_soup) -> None:
        payload = alachua_layout.run(alachua_soup)
        assert space_types(payload, "property_06019-001-000") == (
            ["Bedroom"] * 3
            + ["Full Bathroom"] * 2
            + ["Half Bathroom / Powder Room", "Living Room", "Kitchen"]
        )

    def test_structure(self, alachua_soup) -> None:
        structure = alachua_structure.run(alachua_soup)["property_12345"]
        assert structure["exterior_wall_material_primary"] == "Fiber Cement Siding"
        assert structure["roof_design_type"] == "Combination"
        assert structure["roof_covering_material"] == "Architectural Asphalt Shingle"
        assert structure["roof_material_type"] == "Shingle"
        assert structure["flooring_material_primary"] == "Carpet"
        assert structure["flooring_material_secondary"] == "Ceramic Tile"
        assert structure["interior_wall_surface_material_primary"] == "Drywall"
        assert structure["number_of_stories"] == 1
        assert structure["finished_base_area"] == 1500
        assert structure["foundation_type"] == "Slab on Grade"

    def test_half_stories_round_up(self, alachua_soup) -> None:
        stories = alachua_soup.find("strong", string="Stories").find_parent("tr").find("span")
        stories.string = "2.5"
        structure = alachua_structure.run(alachua_soup)["property_12345"]
        assert structure["number_of_stories"] == 3

    def test_utility(self, alachua_soup) -> None:
        utility = alachua_utility.run(alachua_soup)["property_12345"]
        assert utility["heating_system_type"] == "Electric"
        assert utility["cooling_system_type"] == "CentralAir"


class TestClay:
    """Tests for the Clay scripts."""

    def test_layout(self, clay_soup) -> None:
        layouts = clay_layout.run(clay_soup)["property_123456-789"]["layouts"]
        assert [l["space_type"] for l in layouts] == (
            ["Bedroom"] * 3 + ["Full Bathroom"] * 2 + ["Half Bathroom / Powder Room"]
        )
        assert layouts[0]["flooring_material_type"] == "Carpet"
        assert layouts[0]["has_windows"] is True
        assert layouts[3]["flooring_material_type"] == "Tile"
        assert layouts[3]["has_windows"] is None

    def test_structure(self, clay_soup) -> None:
        structure = clay_structure.run(clay_soup)["property_123456-789"]
        assert structure["exterior_wall_material_primary"] == "Stucco"
        assert structure["primary_framing_material"] == "Wood Frame"
        assert structure["roof_design_type"] == "Gable"
        assert structure["roof_material_type"] == "Shingle"
        assert structure["flooring_material_primary"] == "Carpet"
        assert structure["flooring_material_secondary"] == "Ceramic Tile"
        assert structure["number_of_stories"] == 1

    def test_utility(self, clay_soup) -> None:
        assert clay_utility.run(clay_soup)["property_123456-789"]["heating_system_type"] == "Central"

    def test_owners(self, clay_soup) -> None:
        record = clay_owner.run(clay_soup)["property_123456-789"]
        assert record["owners_by_date"] == {
            "2005-03-09": [{"type": "company", "name": "FRIENDS OF THE LIBRARY"}],
            "2018-06-01": [person("Mary", "Jones"), person("Robert", "Jones")],
            "current": [person("John", "Smith")],
        }

    def test_latest_grantees_stand_in_for_current(self, clay_soup) -> None:
        clay_soup.find("div", class_="title", string="Owner Information").find_parent("section").decompose()
        record = clay_owner.run(clay_soup)["property_123456-789"]
        assert record["owners_by_date"]["current"] == [person("Mary", "Jones"), person("Robert", "Jones")]

    def test_given_names_decide_order(self) -> None:
        assert clay_owner.parser.parse("JONES MARY")[0] == [person("Mary", "Jones")]
        assert clay_owner.parser.parse("ALVIN KOWALSKI")[0] == [person("Alvin", "Kowalski")]


class TestLee:
    """Tests for the Lee scripts."""

    def test_layout(self, lee_soup) -> None:
        layouts = lee_layout.run(lee_soup)["property_10234567"]["layouts"]
        assert [l["space_type"] for l in layouts] == (
            ["Open Porch"]
            + ["Bedroom"] * 3
            + ["Full Bathroom"] * 2
            + ["Half Bathroom / Powder Room", "Pool Area"]
        )
        assert layouts[0]["size_square_feet"] == 120
        assert layouts[0]["is_exterior"] is True
        assert layouts[-1]["pool_type"] == "BuiltIn"
        assert [l["space_index"] for l in layouts] == list(range(1, 9))

    def test_structure(self, lee_soup) -> None:
        structure = lee_structure.run(lee_soup)["property_10234567"]
        assert structure["architectural_style_type"] == "Ranch"
        assert structure["attachment_type"] == "Detached"
        assert structure["finished_base_area"] == 1500
        assert structure["finished_upper_story_area"] == 350
        assert structure["roof_date"] == "2019-03-04"

    def test_utility(self, lee_soup, html_soup) -> None:
        assert lee_utility.run(lee_soup)["property_10234567"]["public_utility_type"] == "ElectricityAvailable"
        assert lee_utility.run(html_soup("<p></p>"))["property_unknown"]["public_utility_type"] is None

    def test_owners(self, lee_soup) -> None:
        record = lee_owner.run(lee_soup)["property_10234567"]
        assert record == {
            "owners_by_date": {
                "current": [
                    {"type": "company", "name": "Acme Holdings LLC"},
                    person("John", "Smith", "Jane"),
                ],
            },
        }

    def test_folio_from_link(self, html_soup) -> None:
        soup = html_soup('<a href="/Display/DisplayParcel.aspx?FolioID=99887766">parcel</a>')
        assert list(lee_owner.run(soup)) == ["property_99887766"]


class TestPasco:
    """Tests for the Pasco scripts."""

    def test_owners(self, pasco_soup) -> None:
        record = pasco_owner.run(pasco_soup)["property_17-26-16-0010-00000-0010"]
        assert record == {
            "owners_by_date": {
                "2001-03-01": [person("Richard", "Doe", "A")],
                "current": [person("John", "Smith"), person("Jane", "Smith")],
            },
            "invalid_owners": [],
        }

    def test_trailing_ampersand_is_flagged(self) -> None:
        owners, invalid = pasco_owner.parse_line("SMITH JOHN &")
        assert owners == [person("John", "Smith")]
        assert invalid == [{"raw": "SMITH JOHN &", "reason": pasco_owner.REASON_TRAILING_AMPERSAND}]

    def test_structure(self, pasco_soup) -> None:
        structure = pasco_structure.run(pasco_soup)["property_17-26-16-0010-00000-0010"]
        assert structure["exterior_wall_material_primary"] == "Concrete Block"
        assert structure["exterior_wall_material_secondary"] == "Stucco Accent"
        assert structure["primary_framing_material"] == "Concrete Block"
        assert structure["roof_design_type"] == "Hip"
        assert structure["roof_material_type"] == "Shingle"
        assert structure["flooring_material_primary"] == "Carpet"
        assert structure["flooring_material_secondary"] == "Ceramic Tile"
        assert structure["finished_base_area"] == 1650
        assert structure["number_of_stories"] == 1
        assert structure["roof_covering_material"] is None

    def test_utility(self, pasco_soup) -> None:
        utility = pasco_utility.run(pasco_soup)["property_17-26-16-0010-00000-0010"]
        assert utility["heating_system_type"] == "Central"
        assert utility["cooling_system_type"] == "CentralAir"

    def test_fuel_fallback(self, html_soup) -> None:
        soup = html_soup('<span id="lblBuildingFuel">ELECTRIC</span>')
        assert pasco_utility.run(soup)["property_unknown"]["heating_system_type"] == "Electric"
