"""Manatee County owners.

Current owners come from the labeled rows of the owners fragment (plus the
name ahead of the first comma of the mailing address). Prior owners come from
the Sales rows: column 0 is the sale date, column 7 the grantee. When any sale
is recorded, the latest sale's grantees are the current owners.
"""
import logging
import re

from county_mapper.counties.manatee import extract_parcel_id, owners_html, table_rows
from county_mapper.lookup import clean_text
from county_mapper.owners import OwnerParser, OwnersByDate, dedupe_owners, to_iso_date
from county_mapper.utils import OWNER_FILE, load_json, run_script, write_output

logger = logging.getLogger(__name__)

COMPANY_KEYWORDS = [
    "inc", "llc", "l.l.c", "ltd", "foundation", "alliance", "solutions", "corp",
    "co", "services", "trust", "tr", "assn", "association", "company",
    "partners", "lp", "llp", "pllc", "pc", "bank", "church", "ministries",
    "university", "college", "hospital", "group", "holdings", "properties",
    "property", "management", "developers", "development", "homes", "realty",
    "estate", "hoa", "homeowners", "apt", "apartments", "fund", "capital",
    "investments",
]

SALE_DATE_COLUMN = 0
GRANTEE_COLUMN = 7

parser = OwnerParser(
    company_keywords=COMPANY_KEYWORDS,
    order="first_last",
    ampersand="split",
    strip_trustee=False,
    # life-estate and successor markers
    extra_noise=(r"\[[^\]]*\]", re.compile(r"\bLE\b"), r"\bAS\s+SUCC\b"),
)


def split_candidates(value):
    return [p for p in (clean_text(part) for part in re.split(r"[;|]", value or "")) if p]


def html_candidates(soup):
    candidates = []
    for row in soup.select(".row.no-gutters"):
        divs = row.find_all("div", recursive=False)
        if len(divs) < 2:
            continue
        label, value = clean_text(divs[0]), clean_text(divs[1])
        if not label or not value:
            continue
        if re.search(r"\bownership\b|\bowner\b", label, re.IGNORECASE) and \
                not re.search(r"owner\s*type", label, re.IGNORECASE):
            candidates.extend(split_candidates(value))
        if re.search(r"mailing\s*address", label, re.IGNORECASE):
            name = value.split(",")[0].strip()
            if len(name) > 1:
                candidates.append(name)
    return candidates


def run(data):
    parcel_id = extract_parcel_id(data)
    owners = OwnersByDate()

    current, invalid = parser.parse_many(html_candidates(owners_html(data)))
    owners.add_invalid(invalid)

    latest = None
    for row in table_rows(data, "Sales"):
        raw_date = clean_text(row[SALE_DATE_COLUMN]) if row else ""
        if not raw_date:
            continue
        grantee = row[GRANTEE_COLUMN] if len(row) > GRANTEE_COLUMN else ""
        parsed, invalid = parser.parse_many(split_candidates(str(grantee or "")))
        owners.add_invalid(invalid)
        if not parsed:
            continue
        date = to_iso_date(raw_date) or raw_date[:10]
        owners.add(date, parsed)
        if latest is None or date > latest:
            latest = date

    if latest is not None:
        current = owners.dated[latest]
    owners.add_current(dedupe_owners(current))

    logger.info(f"Manatee {parcel_id}: {len(owners.dated)} dated sales")
    return {f"property_{parcel_id}": owners.record()}


def main(workdir="."):
    data = load_json(workdir)
    return write_output(run(data), OWNER_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
