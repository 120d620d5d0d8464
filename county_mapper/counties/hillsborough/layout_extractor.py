import logging
import re

from county_mapper.counties.hillsborough import first_building, pin_of
from county_mapper.lookup import find_value_by_path, parse_number, round_half_up
from county_mapper.records import BEDROOM, FULL_BATH, LayoutBuilder
from county_mapper.utils import LAYOUT_FILE, load_json, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

FLOOR = "1st Floor"


def has_pool(data):
    return any(
        re.search(r"POOL", feature.get("description") or "", re.IGNORECASE)
        for feature in find_value_by_path(data, "extraFeatures") or []
        if isinstance(feature, dict)
    )


def run(data, seed=None):
    building = first_building(data)
    bedrooms = round_half_up(parse_number(building.get("bedrooms")) or 0)
    bathrooms = round_half_up(parse_number(building.get("bathrooms")) or 0)

    builder = LayoutBuilder(seed_request_fields(seed), is_finished=True)
    builder.add(BEDROOM, bedrooms, floor_level=FLOOR)
    builder.add(FULL_BATH, bathrooms, floor_level=FLOOR)
    if has_pool(data):
        builder.add("Outdoor Pool", is_exterior=True, pool_type="BuiltIn")
    builder.add("Living Room", floor_level=FLOOR)
    builder.add("Kitchen", floor_level=FLOOR)

    pin = pin_of(data)
    logger.info(f"Hillsborough {pin}: {len(builder.layouts)} layouts")
    return {f"property_{pin}": builder.payload()}


def main(workdir="."):
    data = load_json(workdir)
    return write_output(run(data, read_seed(workdir)), LAYOUT_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
