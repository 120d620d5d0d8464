import logging

from county_mapper.classify import ROOF_DESIGN_RULES, first_match, rule
from county_mapper.counties.hillsborough import construction_detail, construction_details, first_building, pin_of
from county_mapper.records import create_structure_object
from county_mapper.utils import STRUCTURE_FILE, load_json, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

# constructionInfo element codes
EXTERIOR_WALL = "EW"
ROOF_STRUCTURE = "RS"
ROOF_COVER = "RC"
INTERIOR_WALL = "IW"
INTERIOR_FLOOR = "IF"
ARCHITECTURE = "AR"

EXTERIOR_RULES = [rule(r"stucco", "Stucco")]
ROOF_COVER_RULES = [rule(r"shingle", "Architectural Asphalt Shingle")]
INTERIOR_WALL_RULES = [rule(r"drywall", "Drywall")]


def run(data, seed=None):
    building = first_building(data)
    floors = construction_details(building, INTERIOR_FLOOR)
    year_built = building.get("yearBuilt")
    roof_design = first_match(ROOF_DESIGN_RULES, construction_detail(building, ROOF_STRUCTURE))

    structure = create_structure_object(
        seed_request_fields(seed),
        architectural_style_type="Contemporary" if construction_detail(building, ARCHITECTURE) == "Contemporary" else None,
        attachment_type="Detached",
        exterior_wall_material_primary=first_match(EXTERIOR_RULES, construction_detail(building, EXTERIOR_WALL)),
        exterior_wall_condition="Good",
        exterior_wall_condition_primary="Good",
        exterior_wall_insulation_type="Unknown",
        exterior_wall_insulation_type_primary="Unknown",
        exterior_wall_insulation_type_secondary="Unknown",
        finished_base_area=building.get("heatedArea") or None,
        flooring_condition="Good",
        flooring_material_primary="Ceramic Tile" if any("tile" in f.lower() for f in floors) else None,
        flooring_material_secondary="Carpet" if any("carpet" in f.lower() for f in floors) else None,
        foundation_type="Slab on Grade",
        foundation_material="Poured Concrete",
        foundation_waterproofing="Unknown",
        foundation_condition="Unknown",
        ceiling_insulation_type="Unknown",
        interior_wall_condition="Good",
        interior_wall_finish_primary="Paint",
        interior_wall_structure_material="Wood Frame",
        interior_wall_structure_material_primary="Wood Frame",
        interior_wall_surface_material_primary=first_match(INTERIOR_WALL_RULES, construction_detail(building, INTERIOR_WALL)),
        number_of_stories=building.get("stories") or None,
        primary_framing_material="Concrete Block",
        roof_condition="Good",
        roof_covering_material=first_match(ROOF_COVER_RULES, construction_detail(building, ROOF_COVER)),
        roof_date=str(year_built) if year_built else None,
        # only gable, hip or both are reported on these cards
        roof_design_type=roof_design if roof_design in ("Combination", "Gable", "Hip") else None,
        roof_material_type="Shingle",
        roof_structure_material="Wood Truss",
        roof_underlayment_type="Unknown",
        structural_damage_indicators="None Observed",
    )
    return {f"property_{pin_of(data)}": structure}


def main(workdir="."):
    data = load_json(workdir)
    return write_output(run(data, read_seed(workdir)), STRUCTURE_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
