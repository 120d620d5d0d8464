import logging

from county_mapper.classify import INTERIOR_WALL_SURFACE_RULES, all_matches, contains_all, first_match, rule
from county_mapper.counties.alachua import SUBAREA_ROWS, building_column, label_value, summary_id
from county_mapper.lookup import clean_text, parse_int, parse_number, round_half_up
from county_mapper.records import create_structure_object
from county_mapper.utils import STRUCTURE_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

EXTERIOR_RULES = [
    rule(r"HARDI", "Fiber Cement Siding"),
    rule(r"BRICK", "Brick"),
    rule(r"STUCCO", "Stucco"),
    rule(r"VINYL", "Vinyl Siding"),
    rule(r"WOOD", "Wood Siding"),
]
ROOF_DESIGN_RULES = [
    rule(contains_all("gable", "hip"), "Combination"),
    rule(r"GABLE", "Gable"),
    rule(r"HIP", "Hip"),
    rule(r"FLAT", "Flat"),
]
FLOOR_RULES = [
    rule(r"CARPET", "Carpet"),
    rule(r"CLAY|CERAMIC|TILE", "Ceramic Tile"),
    rule(r"VINYL", "Luxury Vinyl Plank"),
    rule(r"WOOD", "Solid Hardwood"),
]
ASPHALT = [rule(r"ASPHALT", True)]


def base_area(soup):
    area = None
    for row in soup.select(SUBAREA_ROWS):
        cells = row.find_all("td")
        code = clean_text(row.find("th")).upper()
        description = clean_text(cells[0]).upper() if cells else ""
        if (code == "BAS" or "BASE AREA" in description) and len(cells) > 1:
            area = parse_int(clean_text(cells[1]))
    return area


def run(soup, seed=None):
    prop_id = summary_id(soup, "Prop ID")
    left = building_column(soup, "left")
    right = building_column(soup, "right")

    roofing = label_value(left, "Roofing")
    floors = all_matches(FLOOR_RULES, label_value(left, "Floor Cover"))
    stories = parse_number(label_value(right, "Stories"))
    is_asphalt = first_match(ASPHALT, roofing, default=False)

    structure = create_structure_object(
        seed_request_fields(seed),
        attachment_type="Detached",
        exterior_wall_material_primary=first_match(EXTERIOR_RULES, label_value(left, "Exterior Walls")),
        exterior_wall_insulation_type="Unknown",
        exterior_wall_insulation_type_primary="Unknown",
        exterior_wall_insulation_type_secondary="Unknown",
        finished_base_area=base_area(soup),
        finished_basement_area=0,
        finished_upper_story_area=0,
        flooring_material_primary=floors[0] if floors else None,
        flooring_material_secondary=floors[1] if len(floors) > 1 else None,
        foundation_condition="Unknown",
        foundation_material="Poured Concrete",
        foundation_type="Slab on Grade",
        foundation_waterproofing="Unknown",
        ceiling_insulation_type="Unknown",
        interior_wall_surface_material_primary=first_match(
            INTERIOR_WALL_SURFACE_RULES, label_value(left, "Interior Walls")
        ),
        number_of_stories=round_half_up(stories),
        roof_covering_material="Architectural Asphalt Shingle" if is_asphalt else None,
        roof_design_type=first_match(ROOF_DESIGN_RULES, label_value(left, "Roof Type")),
        roof_material_type="Shingle" if is_asphalt else None,
        roof_underlayment_type="Unknown",
        subfloor_material="Concrete Slab",
    )
    return {f"property_{prop_id}": structure}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), STRUCTURE_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
