"""Pasco County owners.

The first line of the mailing address holds the current owners
(``SMITH JOHN & JANE``); the previous owner label plus the sale lines table
give one dated historical bucket. A line ending in ``&`` is kept, and also
flagged as missing an owner.
"""
import logging
import re

from county_mapper.counties.pasco import label_text, parcel_id
from county_mapper.lookup import clean_text, lines_from_fragment
from county_mapper.owners import OwnerParser, OwnersByDate, invalid_owner, to_iso_date
from county_mapper.utils import OWNER_FILE, load_html, run_script, write_output

logger = logging.getLogger(__name__)

COMPANY_KEYWORDS = [
    "inc", "llc", "l.l.c", "ltd", "foundation", "alliance", "solutions", "corp",
    "co", "company", "services", "service", "trust", "tr", "association", "assn",
    "bank", "partners", "lp", "pllc", "pc", "p.c", "plc",
]

REASON_TRAILING_AMPERSAND = "Trailing ampersand suggests missing owner"

parser = OwnerParser(company_keywords=COMPANY_KEYWORDS, order="auto", ampersand="split", strip_trustee=False)


def parse_line(line):
    """Parse one owner line; a dangling ``&`` is reported once, not as an empty segment."""
    text = clean_text(line)
    trailing = text.endswith("&")
    owners, invalid = parser.parse(text.rstrip("& ").strip())
    if trailing:
        invalid.append(invalid_owner(text, REASON_TRAILING_AMPERSAND))
    return owners, invalid


def mailing_owner_line(soup):
    lines = lines_from_fragment(soup.select_one("#lblMailingAddress"))
    if lines:
        return lines[0]
    # no mailing block: first all-caps text that joins owners with "&"
    for element in soup.find_all(string=True):
        text = clean_text(element)
        if "&" in text and re.search(r"\b[A-Z]{2,}\b", text):
            return text
    return ""


def previous_sale_date(soup):
    """Month/year of the prior sale (second data row of the sale lines, else the first)."""
    rows = soup.select("#tblSaleLines tr")[1:]
    if not rows:
        return None
    row = rows[1] if len(rows) >= 2 else rows[0]
    cell = row.find("td")
    text = clean_text(cell)
    return to_iso_date(text) if re.fullmatch(r"\d{1,2}/\d{4}", text) else None


def run(soup):
    owners = OwnersByDate()

    current, invalid = parse_line(mailing_owner_line(soup))
    owners.add_current(current)
    owners.add_invalid(invalid)

    previous = label_text(soup, "PreviousOwnerName")
    if previous:
        history, invalid = parse_line(previous)
        owners.add(previous_sale_date(soup), history)
        owners.add_invalid(invalid)

    return {f"property_{parcel_id(soup, default='unknown_id')}": owners.record()}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup), OWNER_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
