import logging

from county_mapper.counties.lee import folio_id
from county_mapper.records import create_utility_object
from county_mapper.utils import UTILITY_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)


def run(soup, seed=None):
    # county garbage service implies a serviced lot
    has_garbage = soup.select_one("#GarbageDetails") is not None
    utility = create_utility_object(
        seed_request_fields(seed),
        public_utility_type="ElectricityAvailable" if has_garbage else None,
    )
    return {f"property_{folio_id(soup)}": utility}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), UTILITY_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
