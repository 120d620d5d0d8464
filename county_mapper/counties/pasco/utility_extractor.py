import logging

from county_mapper.classify import COOLING_RULES, first_match, rule
from county_mapper.counties.pasco import label_text, parcel_id
from county_mapper.records import create_utility_object
from county_mapper.utils import UTILITY_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

HEAT_RULES = [rule(r"forced\s*air|ducted", "Central")]
FUEL_RULES = [rule(r"electric", "Electric")]


def run(soup, seed=None):
    heating = first_match(HEAT_RULES, label_text(soup, "BuildingHeat")) or first_match(
        FUEL_RULES, label_text(soup, "BuildingFuel")
    )
    utility = create_utility_object(
        seed_request_fields(seed),
        heating_system_type=heating,
        cooling_system_type=first_match(COOLING_RULES, label_text(soup, "BuildingAC")),
    )
    return {f"property_{parcel_id(soup)}": utility}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), UTILITY_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
