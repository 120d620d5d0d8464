"""Clay County owners.

Current owners come from the deed-name links of the Owner Information module;
each sale's grantee (last column) fills a dated bucket. Without an explicit
current owner the most recent grantees stand in.

Person token order is decided with a list of common given names: in
``SMITH JOHN`` the second token is a known first name, so it reads as LAST
FIRST; otherwise names are read FIRST ... LAST.
"""
import logging
import re

from county_mapper.counties.clay import any_parcel_id
from county_mapper.lookup import clean_text, find_section
from county_mapper.owners import OwnerParser, OwnersByDate, to_iso_date
from county_mapper.utils import OWNER_FILE, load_html, run_script, write_output

logger = logging.getLogger(__name__)

COMMON_FIRST_NAMES = {
    "james", "john", "robert", "michael", "william", "david", "richard",
    "joseph", "thomas", "charles", "christopher", "daniel", "matthew",
    "anthony", "mark", "donald", "steven", "paul", "andrew", "joshua",
    "kenneth", "kevin", "brian", "george", "edward", "ronald", "timothy",
    "jason", "jeffrey", "ryan", "jacob", "gary", "nicholas", "eric", "stephen",
    "larry", "justin", "scott", "brandon", "benjamin", "adam", "samuel",
    "gregory", "alexander", "patrick", "frank", "tyler", "raymond", "jack",
    "dennis", "jerry", "mary", "patricia", "jennifer", "linda", "elizabeth",
    "barbara", "susan", "jessica", "sarah", "karen", "nancy", "lisa",
    "margaret", "betty", "sandra", "ashley", "dorothy", "kim", "emily",
    "donna", "michelle", "carol", "amanda", "melissa", "deborah", "stephanie",
    "rebecca", "laura", "helen", "sharon", "cynthia", "kathleen", "amy",
    "angela", "shirley", "anna", "brenda", "pamela", "nicole", "ruth",
    "katherine", "samantha", "christine", "emma", "catherine", "debra",
    "virginia", "rachel", "carolyn", "janet", "maria", "megan", "june",
    "sherrie", "meghan", "meaghan", "meagan", "jenny", "jennyfer", "alison",
    "allison", "alyson", "alyssa", "miriam", "miryam", "sherry", "shari",
    "sheri",
}

COMPANY_KEYWORDS = [
    "inc", "llc", "l.l.c", "ltd", "co", "corp", "corporation", "company",
    "foundation", "alliance", "solutions", "services", "trust", "tr", "bank",
    "associates", "association", "partners", "holdings", "group", "properties",
    "property", "realty", "management", "mortgage", "finance", "plc", "lp",
    "llp", "pc", "p.c", "na", "n.a", "hoa",
]

DEED_LINK_RE = re.compile(r"sprDeedName|lnkUpmSearch|lstDeed", re.IGNORECASE)


class GivenNameOwnerParser(OwnerParser):
    """OwnerParser that orders uncommaed person tokens by known given names."""

    def __init__(self, first_names, **kwargs):
        super().__init__(**kwargs)
        self.first_names = first_names

    def is_company(self, name):
        if super().is_company(name):
            return True
        # "FRIENDS OF THE LIBRARY"
        return len(name.split()) >= 3 and re.search(r"\bof\b", name, re.IGNORECASE) is not None

    def parse_person(self, name):
        if "," in name:
            return super().parse_person(name)
        tokens = self._tokens(name.replace(".", ""))
        if len(tokens) < 2:
            return None
        first_known = tokens[0].lower() in self.first_names
        second_known = tokens[1].lower() in self.first_names
        if second_known and not first_known:
            return self._person(tokens[1], tokens[0], tokens[2:])
        return self._person(tokens[0], tokens[-1], tokens[1:-1])


parser = GivenNameOwnerParser(
    COMMON_FIRST_NAMES,
    company_keywords=COMPANY_KEYWORDS,
    ampersand="split",
    share_last_name=False,
    strip_trustee=False,
)


def current_owner_names(soup):
    section = find_section(soup, "Owner Information")
    if section is None:
        return []
    names = [
        clean_text(a)
        for a in section.find_all("a")
        if DEED_LINK_RE.search(a.get("id", "")) and clean_text(a)
    ]
    if not names:
        content = section.select_one(".module-content")
        first_line = content.get_text("\n").strip().split("\n")[0] if content else ""
        if clean_text(first_line):
            names.append(clean_text(first_line))
    return names


def sales_grantees(soup):
    """``(iso_date, grantee)`` per sale row with a parseable date."""
    section = find_section(soup, "Sales")
    if section is None:
        return []
    sales = []
    for row in section.select("table tbody tr"):
        date = to_iso_date(clean_text(row.select_one('th[scope="row"]')))
        cells = row.find_all("td")
        grantee = clean_text(cells[-1]) if cells else ""
        if date and grantee:
            sales.append((date, grantee))
    return sales


def run(soup):
    owners = OwnersByDate()
    current, invalid = parser.parse_many(current_owner_names(soup))
    owners.add_invalid(invalid)

    latest = []
    for date, grantee in sales_grantees(soup):
        parsed, bad = parser.parse(grantee)
        owners.add_invalid(bad)
        if parsed:
            # a later row for the same date replaces the earlier grantees
            owners.dated[date] = parsed
    if owners.dated:
        latest = owners.dated[max(owners.dated)]

    owners.add_current(current or latest)
    pid = any_parcel_id(soup)
    logger.info(f"Clay {pid}: {len(owners.dated)} dated owner groups")
    return {f"property_{pid}": owners.record()}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup), OWNER_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
