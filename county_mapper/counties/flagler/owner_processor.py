"""Flagler County owners: current owners from the Owner Information module,
prior owners from the Grantor column of the Sales table."""
import logging
import re

from county_mapper.identifiers import regex_group, resolve_property_id
from county_mapper.lookup import clean_text, find_section, lines_from_fragment, table_records, two_column_facts
from county_mapper.owners import OwnerParser, OwnersByDate, to_iso_date
from county_mapper.utils import OWNER_FILE, load_html, run_script, write_output

logger = logging.getLogger(__name__)

COMPANY_KEYWORDS = [
    "llc", "inc", "ltd", "foundation", "alliance", "solutions", "corp", "co",
    "services", "trust", "tr", "company", "associates", "holdings",
    "properties", "investments", "bank", "n.a", "na", "lp", "llp", "pc",
    "pllc", "pa", "partners", "enterprise", "enterprises", "group",
    "construction",
]

PROP_ID_LABEL_RE = re.compile(r"^(prop(?:erty)?\s*id|propid)$", re.IGNORECASE)
ADDRESS_RE = re.compile(
    r"\b(Ave|St|Rd|Blvd|Ln|Lane|Dr|Drive|Ct|Court|FL|USA|United States|Zip)\b\.?",
    re.IGNORECASE,
)

parser = OwnerParser(
    company_keywords=COMPANY_KEYWORDS,
    order="last_first",
    ampersand="merge",
    strip_trustee=False,
)


def extract_property_id(soup):
    def from_summary():
        for table in soup.select("table.tabular-data-two-column"):
            for label, value in two_column_facts(table).items():
                if PROP_ID_LABEL_RE.match(label) and value:
                    return value
        return None

    return resolve_property_id(
        [
            from_summary,
            lambda: regex_group(r"Prop(?:erty)?\s*ID\s*[:#]?\s*([A-Za-z0-9\-]+)", soup.get_text(" ")),
        ],
        default="unknown_id",
    )


def is_likely_name_line(line):
    """Owner module lines mix names with the mailing address; keep the names."""
    if not line or not re.search(r"[A-Za-z]", line):
        return False
    if len(line.split()) < 2:
        return False
    if re.search(r"\d{2,}|#\d+", line):
        return False
    if ADDRESS_RE.search(line):
        return False
    return not re.match(r"^Primary\s*Owner$", line, re.IGNORECASE)


def current_owner_lines(soup):
    section = find_section(soup, r"^owner\s*information$")
    if section is not None:
        lines = lines_from_fragment(section.select_one(".module-content"))
    else:
        lines = [clean_text(el) for el in soup.select('[id*="PrimaryOwner" i], [id*="OwnerName" i]')]
    seen = set()
    names = []
    for line in lines:
        if is_likely_name_line(line) and line.lower() not in seen:
            seen.add(line.lower())
            names.append(line)
    return names


def sales_grantors(soup):
    """``(sale date text, grantor)`` pairs from the Sales table."""
    section = find_section(soup, r"^sales$")
    if section is None:
        return []
    pairs = []
    for record in table_records(section.find("table")):
        grantor = next((v for k, v in record.items() if re.match(r"^grantor$", k, re.IGNORECASE)), None)
        date = next((v for k, v in record.items() if re.search(r"sale\s*date", k, re.IGNORECASE)), None)
        if date and grantor:
            pairs.append((date, grantor))
    return pairs


def run(soup):
    owners = OwnersByDate()
    for line in current_owner_lines(soup):
        parsed, invalid = parser.parse(line)
        owners.add_current(parsed)
        owners.add_invalid(invalid)

    for date, grantor in sales_grantors(soup):
        parsed, invalid = parser.parse(grantor)
        owners.add(to_iso_date(date), parsed)
        owners.add_invalid(invalid)

    prop_id = extract_property_id(soup)
    return {f"property_{prop_id}": owners.record()}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup), OWNER_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
