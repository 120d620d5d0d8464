"""Alachua County (qPublic) property pages.

The parcel summary and the building card are Schneider "dynamic" tables: a
``th strong`` label followed by a ``td span`` value.
"""
from county_mapper.identifiers import resolve_property_id
from county_mapper.lookup import find_value_by_label

SUMMARY_ROWS = "#ctlBodyPane_ctl03_ctl01_dynamicSummaryData_divSummary table"
BUILDING_SECTION = "#ctlBodyPane_ctl10_mSection"
LEFT_COLUMN = "#ctlBodyPane_ctl10_ctl01_lstBuildings_ctl00_dynamicBuildingDataLeftColumn_divSummary"
RIGHT_COLUMN = "#ctlBodyPane_ctl10_ctl01_lstBuildings_ctl00_dynamicBuildingDataRightColumn_divSummary"
SUBAREA_ROWS = "#ctlBodyPane_ctl11_ctl01_lstSubAreaSqFt_ctl00_gvwSubAreaSqFtDetail tbody tr"


def label_value(scope, label, match="exact"):
    return find_value_by_label(scope, label, label_selector="th strong", value_selector=("td span", "td"), match=match)


def summary_id(soup, label):
    """Identifier printed in the parcel summary next to ``label`` (e.g. "Prop ID")."""
    summary = soup.select_one(SUMMARY_ROWS)
    return resolve_property_id([lambda: label_value(summary, label, match="contains")], default="unknown")


def building_column(soup, side):
    """Left or right column of the first residential building card."""
    section = soup.select_one(BUILDING_SECTION)
    if section is None:
        return None
    return section.select_one(LEFT_COLUMN if side == "left" else RIGHT_COLUMN)
