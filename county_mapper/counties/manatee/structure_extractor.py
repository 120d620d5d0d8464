import logging

from county_mapper.counties.manatee import extract_parcel_id, table_rows
from county_mapper.lookup import parse_number
from county_mapper.records import create_structure_object
from county_mapper.utils import STRUCTURE_FILE, load_json, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

# Buildings.response.rows column holding the story count
STORIES_COLUMN = 5


def run(data, seed=None):
    parcel_id = extract_parcel_id(data)
    rows = table_rows(data, "Buildings")

    stories = [
        parse_number(row[STORIES_COLUMN])
        for row in rows
        if len(row) > STORIES_COLUMN
    ]
    stories = [s for s in stories if s is not None]
    structure = create_structure_object(
        seed_request_fields(seed),
        number_of_buildings=len(rows) or None,
        number_of_stories=max(stories) if stories else None,
    )
    return {f"property_{parcel_id}": structure}


def main(workdir="."):
    data = load_json(workdir)
    return write_output(run(data, read_seed(workdir)), STRUCTURE_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
