import logging
import re

from county_mapper.counties.hillsborough import construction_detail, first_building, pin_of
from county_mapper.lookup import find_value_by_path
from county_mapper.owners import to_iso_date
from county_mapper.records import create_utility_object
from county_mapper.utils import UTILITY_FILE, load_json, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

HVAC = "AC"
TONNAGE_RE = re.compile(r"(\d+)TON\s+(\d+)SEER", re.IGNORECASE)


def hvac_permit(data):
    for permit in find_value_by_path(data, "permitInfo") or []:
        if isinstance(permit, dict) and re.search(r"HVAC", permit.get("descr") or "", re.IGNORECASE):
            return permit
    return None


def run(data, seed=None):
    building = first_building(data)
    hvac = construction_detail(building, HVAC)
    central = bool(hvac and re.search(r"central", hvac, re.IGNORECASE))

    tons = seer = installed = None
    permit = hvac_permit(data)
    if permit is not None:
        m = TONNAGE_RE.search(permit.get("descr") or "")
        if m:
            tons, seer = int(m.group(1)), int(m.group(2))
        installed = to_iso_date(permit.get("issueDate"))

    utility = create_utility_object(
        seed_request_fields(seed),
        cooling_system_type="CentralAir" if central else None,
        heating_system_type="Central" if central else None,
        hvac_capacity_tons=tons,
        hvac_seer_rating=seer,
        hvac_installation_date=installed,
        hvac_condensing_unit_present="Yes",
        hvac_system_configuration="SplitSystem",
        hvac_unit_condition="Good",
        public_utility_type="WaterAvailable",
        sewer_type="Public",
        water_source_type="Public",
    )
    return {f"property_{pin_of(data)}": utility}


def main(workdir="."):
    data = load_json(workdir)
    return write_output(run(data, read_seed(workdir)), UTILITY_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
