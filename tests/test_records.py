"""Tests for default records and the layout builder."""

import pytest

from county_mapper.records import (
    BEDROOM,
    FULL_BATH,
    HALF_BATH,
    LAYOUT_FIELDS,
    STRUCTURE_FIELDS,
    UTILITY_FIELDS,
    LayoutBuilder,
    create_layout_object,
    create_structure_object,
    create_utility_object,
    split_bathrooms,
)


class TestRecordDefaults:
    """Tests for record templates."""

    def test_layout_has_every_field(self) -> None:
        layout = create_layout_object("Kitchen", 4)
        assert set(layout) == set(LAYOUT_FIELDS)
        assert layout["space_type"] == "Kitchen"
        assert layout["space_index"] == 4
        assert layout["is_finished"] is False
        assert layout["is_exterior"] is False
        assert layout["pool_type"] is None

    def test_structure_fields_default_to_none(self) -> None:
        structure = create_structure_object(number_of_stories=2)
        assert set(structure) == set(STRUCTURE_FIELDS)
        assert structure["number_of_stories"] == 2
        assert all(v is None for k, v in structure.items() if k != "number_of_stories")

    def test_utility_solar_defaults(self) -> None:
        utility = create_utility_object()
        assert set(utility) == set(UTILITY_FIELDS)
        assert utility["solar_panel_present"] is False
        assert utility["solar_inverter_visible"] is False

    def test_seed_fields_lead(self) -> None:
        utility = create_utility_object({"request_identifier": "42"}, heating_system_type="Central")
        assert list(utility)[0] == "request_identifier"
        assert utility["heating_system_type"] == "Central"

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(KeyError):
            create_structure_object(roof_colour="red")


class TestLayoutBuilder:
    """Tests for LayoutBuilder."""

    def test_bedrooms_then_baths_with_running_index(self) -> None:
        layouts = LayoutBuilder(is_finished=True).add_rooms(3, 2).payload()["layouts"]
        assert [l["space_type"] for l in layouts] == [BEDROOM] * 3 + [FULL_BATH] * 2
        assert [l["space_index"] for l in layouts] == [1, 2, 3, 4, 5]
        assert all(l["is_finished"] for l in layouts)

    def test_overrides_beat_defaults(self) -> None:
        builder = LayoutBuilder(floor_level="1st Floor")
        builder.add("Pool Area", is_exterior=True, floor_level=None)
        builder.add_rooms(0, 0, 1, bath_fields={"flooring_material_type": "Tile"})
        pool, half = builder.layouts
        assert pool["floor_level"] is None and pool["is_exterior"] is True
        assert half["space_type"] == HALF_BATH
        assert half["flooring_material_type"] == "Tile"
        assert half["floor_level"] == "1st Floor"

    def test_none_counts_add_nothing(self) -> None:
        assert LayoutBuilder().add_rooms(None, None, None).payload() == {"layouts": []}


class TestSplitBathrooms:
    """Tests for split_bathrooms."""

    @pytest.mark.parametrize("value,expected", [(2.5, (2, 1)), (3, (3, 0)), (None, (0, 0)), (1.0, (1, 0)), (1.25, (1, 1))])
    def test_split(self, value, expected) -> None:
        assert split_bathrooms(value) == expected
