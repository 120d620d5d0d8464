import logging

from county_mapper.classify import COOLING_RULES, first_match
from county_mapper.counties.flagler import building_facts, summary_prop_id
from county_mapper.records import create_utility_object
from county_mapper.utils import UTILITY_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)


def run(soup, seed=None):
    prop_id = summary_prop_id(soup)
    facts = building_facts(soup)

    # any listed heat source is a central system on these cards
    heating = "Central" if facts.get("Heat") else None
    utility = create_utility_object(
        seed_request_fields(seed),
        heating_system_type=heating,
        cooling_system_type=first_match(COOLING_RULES, facts.get("Air Conditioning")),
        electrical_panel_capacity="Unknown",
        hvac_condensing_unit_present="Unknown",
    )
    return {f"property_{prop_id}": utility}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), UTILITY_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
