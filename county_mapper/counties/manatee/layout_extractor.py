"""Manatee County layouts.

The county site publishes no room breakdown, so the layout list stays empty.
The script still validates the parcel id against the seed file before writing.
"""
import logging

from county_mapper.counties.manatee import extract_parcel_id
from county_mapper.identifiers import check_request_identifier
from county_mapper.records import LayoutBuilder
from county_mapper.utils import LAYOUT_FILE, load_json, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

SEED_ORDER = ("parcel.json", "property_seed.json")


def run(data, seed=None):
    parcel_id = extract_parcel_id(data)
    check_request_identifier(parcel_id, seed)
    builder = LayoutBuilder(seed_request_fields(seed))
    return {f"property_{parcel_id}": builder.payload()}


def main(workdir="."):
    data = load_json(workdir)
    seed = read_seed(workdir, SEED_ORDER)
    return write_output(run(data, seed), LAYOUT_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
