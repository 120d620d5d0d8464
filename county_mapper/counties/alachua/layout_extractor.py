import logging

from county_mapper.counties.alachua import building_column, label_value, summary_id
from county_mapper.lookup import parse_int, parse_number
from county_mapper.records import LayoutBuilder, split_bathrooms
from county_mapper.utils import LAYOUT_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)


def run(soup, seed=None):
    """Bedrooms and bathrooms from the building card; a heated area adds living room and kitchen."""
    parcel_id = summary_id(soup, "Parcel ID")
    right = building_column(soup, "right")
    left = building_column(soup, "left")

    bedrooms = parse_int(label_value(right, "Bedrooms")) or 0
    full_baths, half_baths = split_bathrooms(parse_number(label_value(right, "Bathrooms")))

    builder = LayoutBuilder(seed_request_fields(seed), floor_level="1st Floor", is_finished=True)
    builder.add_rooms(bedrooms, full_baths, half_baths)
    if label_value(left, "Heated Area"):
        builder.add("Living Room")
        builder.add("Kitchen")

    logger.info(f"Alachua {parcel_id}: {len(builder.layouts)} layouts")
    return {f"property_{parcel_id}": builder.payload()}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), LAYOUT_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
