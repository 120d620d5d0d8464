"""Hillsborough County owners.

The property-card JSON has no fixed owner field, so every value under a key
containing "owner" is gathered and split into candidate names. Only a current
bucket is produced; the card carries no dated ownership history.
"""
import json
import logging
import re

from county_mapper.identifiers import regex_group, resolve_property_id, sanitize_property_id, seed_parcel_id
from county_mapper.lookup import clean_text, collect_values_by_key, flatten_strings
from county_mapper.owners import OwnerParser, OwnersByDate
from county_mapper.utils import OWNER_FILE, load_json, read_seed, run_script, write_output

logger = logging.getLogger(__name__)

COMPANY_KEYWORDS = [
    "inc", "llc", "l.l.c", "ltd", "foundation", "alliance", "solutions", "corp",
    "co", "company", "services", "trust", "tr", "assn", "association",
    "partners", "holdings", "group", "bank", "church", "ministries",
    "management", "properties",
]

ID_KEYS = [
    "property_id", "propertyId", "propId", "prop_id", "parcel_id", "parcelId",
    "parcel", "pin", "folio", "displayFolio", "displayStrap", "strap",
    "account", "accountNumber", "account_no",
]
ID_TEXT_RE = r"\b(?:property\s*id|prop(?:erty)?id|pin|folio|strap)\s*[:#]?\s*([A-Za-z0-9_.\-/]+)\b"
CANDIDATE_SPLIT_RE = re.compile(r"[;\n\r|]+")

parser = OwnerParser(
    company_keywords=COMPANY_KEYWORDS,
    order="auto",
    ampersand="split",
    strip_trustee=False,
    share_last_name=False,
)


def find_id_value(data):
    """First string/number stored under one of ``ID_KEYS``, depth first."""
    wanted = set(ID_KEYS) | {k.lower() for k in ID_KEYS}
    if isinstance(data, dict):
        for key, value in data.items():
            if (key in wanted or key.lower() in wanted) and isinstance(value, (str, int, float)) \
                    and not isinstance(value, bool):
                return str(value)
            found = find_id_value(value)
            if found is not None:
                return found
    elif isinstance(data, list):
        for item in data:
            found = find_id_value(item)
            if found is not None:
                return found
    return None


def owner_candidates(data):
    candidates = []
    for value in flatten_strings(collect_values_by_key(data, r"owner")):
        for part in CANDIDATE_SPLIT_RE.split(value):
            part = clean_text(part).strip(";:,")
            if part:
                candidates.append(part)
    return candidates


def run(data, seed=None):
    owners = OwnersByDate()
    for candidate in owner_candidates(data):
        parsed, invalid = parser.parse(candidate)
        owners.add_current(parsed)
        owners.add_invalid(invalid)

    text = json.dumps(data)
    prop_id = resolve_property_id(
        [
            lambda: find_id_value(data),
            lambda: regex_group(ID_TEXT_RE, text),
            lambda: seed_parcel_id(seed),
        ],
        default="unknown_id",
    )
    return {f"property_{sanitize_property_id(prop_id)}": owners.record()}


def main(workdir="."):
    data = load_json(workdir)
    return write_output(run(data, read_seed(workdir)), OWNER_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
