import logging

from county_mapper.classify import (
    EXTERIOR_ACCENT_RULES,
    EXTERIOR_WALL_RULES,
    FLOORING_RULES,
    INTERIOR_WALL_SURFACE_RULES,
    ROOF_DESIGN_RULES,
    ROOF_MATERIAL_TYPE_RULES,
    first_match,
)
from county_mapper.counties.pasco import label_text, meaningful, parcel_id
from county_mapper.lookup import clean_text, parse_int, parse_number
from county_mapper.records import create_structure_object
from county_mapper.utils import STRUCTURE_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)


def living_area(soup):
    area = None
    for row in soup.select("#tblSubLines tr")[1:]:
        cells = row.find_all("td")
        if len(cells) > 3 and clean_text(cells[2]).upper() == "LIVING AREA":
            area = parse_int(clean_text(cells[3]))
    return area


def run(soup, seed=None):
    wall = label_text(soup, "BuildingExteriorWall1")
    second_wall = meaningful(label_text(soup, "BuildingExteriorWall2"))
    roof_structure = label_text(soup, "BuildingRoofStructure")

    exterior = first_match(EXTERIOR_WALL_RULES, wall)
    # "CONCRETE BLOCK/STUCCO" reads as block with a stucco accent
    accent = first_match(EXTERIOR_ACCENT_RULES, wall) or first_match(EXTERIOR_ACCENT_RULES, second_wall)

    structure = create_structure_object(
        seed_request_fields(seed),
        attachment_type="Detached",
        exterior_wall_material_primary=exterior,
        exterior_wall_material_secondary=accent,
        finished_base_area=living_area(soup),
        flooring_material_primary=first_match(FLOORING_RULES, label_text(soup, "BuildingFlooring1")),
        flooring_material_secondary=first_match(
            FLOORING_RULES, meaningful(label_text(soup, "BuildingFlooring2"))
        ),
        interior_wall_surface_material_primary=first_match(
            INTERIOR_WALL_SURFACE_RULES, label_text(soup, "BuildingInteriorWall1")
        ),
        number_of_stories=parse_number(label_text(soup, "BuildingStories")),
        primary_framing_material="Concrete Block" if exterior == "Concrete Block" else None,
        roof_design_type=first_match(
            ROOF_DESIGN_RULES, roof_structure, default="Combination" if roof_structure else None
        ),
        roof_material_type=first_match(ROOF_MATERIAL_TYPE_RULES, label_text(soup, "BuildingRoofCover")),
    )
    return {f"property_{parcel_id(soup)}": structure}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), STRUCTURE_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
