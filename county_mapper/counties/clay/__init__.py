"""Clay County (qPublic) property pages."""
import re

from county_mapper.identifiers import regex_group, resolve_property_id
from county_mapper.lookup import clean_text, find_value_by_label, iter_label_rows

SUMMARY_SECTION = "#ctlBodyPane_ctl00_mSection"
BUILDING_SECTION = "#ctlBodyPane_ctl05_mSection"


def section_value(soup, selector, label):
    """Value of the row whose ``th strong`` label is exactly ``label`` in a section."""
    return find_value_by_label(soup.select_one(selector), label, label_selector="th strong")


def building_value(soup, label):
    return section_value(soup, BUILDING_SECTION, label)


def parcel_id(soup):
    """Summary Parcel ID with inner whitespace removed."""
    return resolve_property_id(
        [lambda: re.sub(r"\s+", "", section_value(soup, SUMMARY_SECTION, "Parcel ID"))],
        default="unknown_id",
    )


def any_parcel_id(soup):
    """Parcel ID from any labeled row on the page, else the ``Report: <id>`` page title."""

    def from_rows():
        for label, row in iter_label_rows(soup):
            if re.search(r"parcel\s*id", label, re.IGNORECASE):
                value = clean_text(row.find("td"))
                if value:
                    return value
        return None

    return resolve_property_id(
        [from_rows, lambda: regex_group(r"Report:\s*(\S+)$", clean_text(soup.find("title")))],
        default="unknown_id",
    )
