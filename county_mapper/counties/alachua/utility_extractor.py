import logging

from county_mapper.classify import COOLING_RULES, first_match, rule
from county_mapper.counties.alachua import building_column, label_value, summary_id
from county_mapper.records import create_utility_object
from county_mapper.utils import UTILITY_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

HEAT_RULES = [rule(r"ELECTRIC", "Electric")]


def run(soup, seed=None):
    prop_id = summary_id(soup, "Prop ID")
    right = building_column(soup, "right")
    utility = create_utility_object(
        seed_request_fields(seed),
        heating_system_type=first_match(HEAT_RULES, label_value(right, "Heat")),
        cooling_system_type=first_match(COOLING_RULES, label_value(right, "HVAC")),
    )
    return {f"property_{prop_id}": utility}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), UTILITY_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
