import logging

from county_mapper.classify import all_matches, first_match, rule
from county_mapper.counties.flagler import SUBAREA_ROWS, building_facts, summary_prop_id
from county_mapper.lookup import clean_text, parse_number, round_half_up
from county_mapper.records import create_structure_object
from county_mapper.utils import STRUCTURE_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

EXTERIOR_RULES = [rule(r"STUCCO", "Stucco")]
FLOOR_RULES = [
    rule(r"CARPET", "Carpet"),
    rule(r"CER|CLAY|TILE", "Ceramic Tile"),
]
INTERIOR_WALL_RULES = [rule(r"DRYWALL", "Drywall")]
FRAME_RULES = [rule(r"MASONRY", "Masonry")]
ROOF_COVER_RULES = [rule(r"ASP|COM", "Architectural Asphalt Shingle")]


def base_area(soup):
    """Heated square footage of the BAS sub-area row, rounded."""
    area = None
    for row in soup.select(SUBAREA_ROWS):
        cells = row.find_all("td")
        if len(cells) < 3:
            continue
        if clean_text(row.find("th")) == "BAS":
            sqft = parse_number(clean_text(cells[1]))
            if sqft is not None:
                area = round_half_up(sqft)
    return area


def run(soup, seed=None):
    prop_id = summary_prop_id(soup)
    facts = building_facts(soup)

    floors = all_matches(FLOOR_RULES, facts.get("Floor Cover"))
    structure = create_structure_object(
        seed_request_fields(seed),
        attachment_type="Detached",
        exterior_wall_material_primary=first_match(EXTERIOR_RULES, facts.get("Exterior Walls")),
        exterior_wall_insulation_type="Unknown",
        flooring_material_primary=floors[0] if floors else None,
        flooring_material_secondary=floors[1] if len(floors) > 1 else None,
        subfloor_material="Concrete Slab",
        interior_wall_surface_material_primary=first_match(INTERIOR_WALL_RULES, facts.get("Interior Walls")),
        roof_covering_material=first_match(ROOF_COVER_RULES, facts.get("Roof Cover")),
        roof_underlayment_type="Unknown",
        roof_material_type="Shingle",
        # Florida single-family default: slab on grade
        foundation_type="Slab on Grade",
        foundation_material="Poured Concrete",
        foundation_waterproofing="Unknown",
        foundation_condition="Unknown",
        ceiling_insulation_type="Unknown",
        primary_framing_material=first_match(FRAME_RULES, facts.get("Frame Type")),
        finished_base_area=base_area(soup),
    )
    return {f"property_{prop_id}": structure}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), STRUCTURE_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
