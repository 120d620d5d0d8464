import logging

from county_mapper.counties.clay import building_value, parcel_id
from county_mapper.lookup import parse_int
from county_mapper.records import LayoutBuilder
from county_mapper.utils import LAYOUT_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)


def run(soup, seed=None):
    """Carpeted bedrooms with windows, then tiled full and half bathrooms."""
    pid = parcel_id(soup)
    bedrooms = parse_int(building_value(soup, "Bedrooms")) or 0
    full_baths = parse_int(building_value(soup, "Full Bathrooms")) or 0
    half_baths = parse_int(building_value(soup, "Half Bathrooms")) or 0

    builder = LayoutBuilder(seed_request_fields(seed), is_finished=True)
    builder.add_rooms(
        bedrooms,
        full_baths,
        half_baths,
        bedroom_fields={"flooring_material_type": "Carpet", "has_windows": True},
        bath_fields={"flooring_material_type": "Tile"},
    )
    logger.info(f"Clay {pid}: {len(builder.layouts)} layouts")
    return {f"property_{pid}": builder.payload()}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), LAYOUT_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
