import logging

from county_mapper.classify import all_matches, contains_all, first_match, rule
from county_mapper.counties.clay import building_value, parcel_id
from county_mapper.lookup import parse_number
from county_mapper.records import create_structure_object
from county_mapper.utils import STRUCTURE_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

EXTERIOR_RULES = [
    rule(r"stucco", "Stucco"),
    rule(r"brick", "Brick"),
    rule(r"stone", "Natural Stone"),
    rule(r"vinyl", "Vinyl Siding"),
    rule(r"fiber|hardie", "Fiber Cement Siding"),
    rule(contains_all("wood", "siding"), "Wood Siding"),
    rule(r"block", "Concrete Block"),
]
FRAMING_RULES = [
    rule(r"frame", "Wood Frame"),
    rule(r"block", "Concrete Block"),
    rule(r"concrete", "Poured Concrete"),
]
ROOF_DESIGN_RULES = [
    rule(contains_all("gable", "hip"), "Combination"),
    rule(r"gable", "Gable"),
    rule(r"hip", "Hip"),
    rule(r"flat", "Flat"),
]
FLOOR_RULES = [
    rule(r"carpet", "Carpet"),
    rule(r"tile", "Ceramic Tile"),
]
DRYWALL_RULES = [rule(r"drywall", "Drywall")]
ROOF_MATERIAL_RULES = [rule(r"shingle", "Shingle")]


def run(soup, seed=None):
    pid = parcel_id(soup)
    walls = building_value(soup, "Exterior Walls")
    roof_type = building_value(soup, "Roof Type")
    roof_cover = building_value(soup, "Roof Coverage")
    floors = all_matches(FLOOR_RULES, building_value(soup, "Flooring Type"))

    structure = create_structure_object(
        seed_request_fields(seed),
        attachment_type="Detached",
        exterior_wall_material_primary=first_match(EXTERIOR_RULES, walls),
        exterior_wall_insulation_type="Unknown",
        flooring_material_primary=floors[0] if floors else None,
        flooring_material_secondary=floors[1] if len(floors) > 1 else None,
        interior_wall_surface_material_primary=first_match(DRYWALL_RULES, building_value(soup, "Interior Walls")),
        roof_underlayment_type="Unknown",
        # an unrecognized roof type on these cards is read as a combination roof
        roof_design_type=first_match(ROOF_DESIGN_RULES, roof_type, default="Combination" if roof_type else None),
        roof_material_type=first_match(ROOF_MATERIAL_RULES, roof_cover),
        foundation_waterproofing="Unknown",
        ceiling_insulation_type="Unknown",
        primary_framing_material=first_match(FRAMING_RULES, walls, default="Wood Frame"),
        number_of_stories=parse_number(building_value(soup, "Stories")),
    )
    return {f"property_{pid}": structure}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), STRUCTURE_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
