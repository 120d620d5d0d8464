import logging

from county_mapper.counties.flagler import building_facts, summary_prop_id
from county_mapper.lookup import parse_int, parse_number
from county_mapper.records import LayoutBuilder, split_bathrooms
from county_mapper.utils import LAYOUT_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)


def run(soup, seed=None):
    """One layout per bedroom, then per full and half bathroom."""
    prop_id = summary_prop_id(soup)
    facts = building_facts(soup)

    bedrooms = parse_int(facts.get("Bedrooms")) or 0
    full_baths, half_baths = split_bathrooms(parse_number(facts.get("Bathrooms")))

    builder = LayoutBuilder(seed_request_fields(seed), floor_level="1st Floor", is_finished=True)
    builder.add_rooms(bedrooms, full_baths, half_baths)
    logger.info(f"Flagler {prop_id}: {bedrooms} bedrooms, {full_baths} full / {half_baths} half baths")
    return {f"property_{prop_id}": builder.payload()}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), LAYOUT_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
