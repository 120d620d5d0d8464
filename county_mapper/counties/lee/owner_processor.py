"""Lee County owners: the ownership list and the Owner Of Record panel.

Panel lines are read until the first address-like line. ``&`` joins are read
as a single person, and only a current bucket is produced.
"""
import logging
import re

from county_mapper.counties.lee import folio_id
from county_mapper.lookup import clean_text, lines_from_fragment
from county_mapper.owners import OwnerParser, OwnersByDate
from county_mapper.utils import OWNER_FILE, load_html, run_script, write_output

logger = logging.getLogger(__name__)

COMPANY_KEYWORDS = [
    "inc", "llc", "l.l.c", "ltd", "foundation", "alliance", "solutions", "corp",
    "co", "services", "trust", "tr", "company", "associates", "partners",
    "holdings", "bank", "n.a", "na", "assn", "association", "authority",
    "board", "llp", "pllc", "pc", "trustees", "properties", "property",
    "management", "group", "lp", "pl", "plc", "ministries", "church",
    "university", "school", "city", "county", "state", "dept", "department",
    "hoa", "pta",
]

ADDRESS_RE = re.compile(r"\d|\b(FL|AVE|ST|RD|BLVD|DR|HWY|SUITE|UNIT)\b", re.IGNORECASE)

parser = OwnerParser(
    company_keywords=COMPANY_KEYWORDS,
    order="auto",
    ampersand="merge",
    strip_trustee=True,
    extra_noise=(r"^FOR\s+",),
    title_case_companies=True,
    keep_short_caps=True,
)


def is_likely_address(line):
    return bool(ADDRESS_RE.search(line))


def owner_candidates(soup):
    candidates = []

    def push(raw):
        text = clean_text(raw)
        if len(text) < 2 or re.match(r"^Owner Of Record", text, re.IGNORECASE):
            return
        if is_likely_address(text):
            return
        candidates.append(text)

    for item in soup.select("#ownershipDiv li"):
        push(item)

    for block in soup.select("#divDisplayParcelOwner .textPanel div"):
        for line in lines_from_fragment(block):
            if is_likely_address(line):
                break
            push(line)

    seen = set()
    unique = []
    for name in candidates:
        key = re.sub(r"\.+", "", name.lower())
        if key not in seen:
            seen.add(key)
            unique.append(name)
    return unique


def run(soup):
    owners = OwnersByDate()
    parsed, invalid = parser.parse_many(owner_candidates(soup))
    owners.add_current(parsed)
    owners.add_invalid(invalid)
    folio = folio_id(soup, default="unknown_id")
    return {f"property_{folio}": owners.record(include_empty_invalid=False)}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup), OWNER_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
