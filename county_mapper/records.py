"""Default layout, structure and utility records.

Every emitted record carries the full field set with nulls; county scripts
only overwrite the fields they can map with confidence.
"""
from .lookup import round_half_up


LAYOUT_FIELDS = [
    "space_type",
    "space_index",
    "flooring_material_type",
    "size_square_feet",
    "floor_level",
    "has_windows",
    "window_design_type",
    "window_material_type",
    "window_treatment_type",
    "is_finished",
    "furnished",
    "paint_condition",
    "flooring_wear",
    "clutter_level",
    "visible_damage",
    "countertop_material",
    "cabinet_style",
    "fixture_finish_quality",
    "design_style",
    "natural_light_quality",
    "decor_elements",
    "pool_type",
    "pool_equipment",
    "spa_type",
    "safety_features",
    "view_type",
    "lighting_features",
    "condition_issues",
    "is_exterior",
    "pool_condition",
    "pool_surface_type",
    "pool_water_quality",
    "bathroom_renovation_date",
    "kitchen_renovation_date",
    "flooring_installation_date",
    "spa_installation_date",
    "pool_installation_date",
]

STRUCTURE_FIELDS = [
    "architectural_style_type",
    "attachment_type",
    "ceiling_condition",
    "ceiling_height_average",
    "ceiling_insulation_type",
    "ceiling_structure_material",
    "ceiling_surface_material",
    "exterior_door_material",
    "exterior_wall_condition",
    "exterior_wall_condition_primary",
    "exterior_wall_condition_secondary",
    "exterior_wall_insulation_type",
    "exterior_wall_insulation_type_primary",
    "exterior_wall_insulation_type_secondary",
    "exterior_wall_material_primary",
    "exterior_wall_material_secondary",
    "finished_base_area",
    "finished_basement_area",
    "finished_upper_story_area",
    "flooring_condition",
    "flooring_material_primary",
    "flooring_material_secondary",
    "foundation_condition",
    "foundation_material",
    "foundation_type",
    "foundation_waterproofing",
    "gutters_condition",
    "gutters_material",
    "interior_door_material",
    "interior_wall_condition",
    "interior_wall_finish_primary",
    "interior_wall_finish_secondary",
    "interior_wall_structure_material",
    "interior_wall_structure_material_primary",
    "interior_wall_structure_material_secondary",
    "interior_wall_surface_material_primary",
    "interior_wall_surface_material_secondary",
    "number_of_buildings",
    "number_of_stories",
    "primary_framing_material",
    "roof_age_years",
    "roof_condition",
    "roof_covering_material",
    "roof_date",
    "roof_design_type",
    "roof_material_type",
    "roof_structure_material",
    "roof_underlayment_type",
    "secondary_framing_material",
    "structural_damage_indicators",
    "subfloor_material",
    "unfinished_base_area",
    "unfinished_basement_area",
    "unfinished_upper_story_area",
    "window_frame_material",
    "window_glazing_type",
    "window_operation_type",
    "window_screen_material",
]

UTILITY_FIELDS = [
    "cooling_system_type",
    "electrical_panel_capacity",
    "electrical_panel_installation_date",
    "electrical_rewire_date",
    "electrical_wiring_type",
    "electrical_wiring_type_other_description",
    "heating_system_type",
    "hvac_capacity_kw",
    "hvac_capacity_tons",
    "hvac_condensing_unit_present",
    "hvac_equipment_component",
    "hvac_equipment_manufacturer",
    "hvac_equipment_model",
    "hvac_installation_date",
    "hvac_seer_rating",
    "hvac_system_configuration",
    "hvac_unit_condition",
    "hvac_unit_issues",
    "plumbing_system_installation_date",
    "plumbing_system_type",
    "plumbing_system_type_other_description",
    "public_utility_type",
    "sewer_connection_date",
    "sewer_type",
    "smart_home_features",
    "smart_home_features_other_description",
    "solar_installation_date",
    "solar_inverter_installation_date",
    "solar_inverter_manufacturer",
    "solar_inverter_model",
    "solar_inverter_visible",
    "solar_panel_present",
    "solar_panel_type",
    "solar_panel_type_other_description",
    "water_connection_date",
    "water_heater_installation_date",
    "water_heater_manufacturer",
    "water_heater_model",
    "water_source_type",
    "well_installation_date",
]

BEDROOM = "Bedroom"
FULL_BATH = "Full Bathroom"
HALF_BATH = "Half Bathroom / Powder Room"


def _record(fields, defaults, overrides, seed_fields):
    record = dict(seed_fields or {})
    for field in fields:
        record[field] = defaults.get(field)
    unknown = set(overrides) - set(fields)
    if unknown:
        raise KeyError(f"Unknown record fields: {sorted(unknown)}")
    record.update(overrides)
    return record


def create_layout_object(space_type, space_index, seed_fields=None, **overrides):
    """Create a layout object with the specified space_type and all other fields as None"""
    defaults = {
        "space_type": space_type,
        "space_index": space_index,
        "is_finished": False,
        "is_exterior": False,
    }
    return _record(LAYOUT_FIELDS, defaults, overrides, seed_fields)


def create_structure_object(seed_fields=None, **overrides):
    return _record(STRUCTURE_FIELDS, {}, overrides, seed_fields)


def create_utility_object(seed_fields=None, **overrides):
    defaults = {"solar_panel_present": False, "solar_inverter_visible": False}
    return _record(UTILITY_FIELDS, defaults, overrides, seed_fields)


class LayoutBuilder:
    """Accumulates layout objects with a running ``space_index`` starting at 1."""

    def __init__(self, seed_fields=None, **defaults):
        self.seed_fields = seed_fields
        self.defaults = defaults
        self.layouts = []

    def add(self, space_type, count=1, **overrides):
        for _ in range(count):
            fields = dict(self.defaults)
            fields.update(overrides)
            self.layouts.append(
                create_layout_object(space_type, len(self.layouts) + 1, self.seed_fields, **fields)
            )
        return self

    def add_rooms(self, bedrooms=0, full_baths=0, half_baths=0, bedroom_fields=None, bath_fields=None):
        """Bedrooms first, then full baths, then half baths."""
        self.add(BEDROOM, bedrooms or 0, **(bedroom_fields or {}))
        self.add(FULL_BATH, full_baths or 0, **(bath_fields or {}))
        self.add(HALF_BATH, half_baths or 0, **(bath_fields or {}))
        return self

    def payload(self):
        return {"layouts": self.layouts}


def split_bathrooms(value):
    """Split a fractional bath count (``2.5``) into ``(full, half)``."""
    if value is None:
        return 0, 0
    full = int(value)
    half = round_half_up((value - full) * 2)
    return full, half
