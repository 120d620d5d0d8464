import logging

from county_mapper.classify import contains_all, first_match, rule
from county_mapper.counties.clay import building_value, parcel_id
from county_mapper.records import create_utility_object
from county_mapper.utils import UTILITY_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

HEAT_RULES = [rule(contains_all("air", "duct"), "Central")]


def run(soup, seed=None):
    pid = parcel_id(soup)
    heat = building_value(soup, "Heating Type") or building_value(soup, "Heat")
    utility = create_utility_object(
        seed_request_fields(seed),
        heating_system_type=first_match(HEAT_RULES, heat),
    )
    return {f"property_{pid}": utility}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), UTILITY_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
