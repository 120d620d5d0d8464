"""Flagler County (qPublic) property pages."""
from county_mapper.identifiers import resolve_property_id
from county_mapper.lookup import text_of, two_column_facts

PROP_ID_SELECTOR = "#ctlBodyPane_ctl02_ctl01_dynamicSummary_rptrDynamicColumns_ctl01_pnlSingleValue span"
BUILDING_SECTION = "#ctlBodyPane_ctl10_mSection"
SUBAREA_ROWS = "#ctlBodyPane_ctl13_ctl01_lstSubAreaSqFt_ctl00_gvwSubAreaSqFtDetail tbody tr"


def summary_prop_id(soup):
    """Prop ID from the parcel summary panel, ``"unknown"`` when absent."""
    return resolve_property_id([lambda: text_of(soup, PROP_ID_SELECTOR)], default="unknown")


def building_facts(soup):
    """Label -> value pairs of the Residential Buildings section."""
    return two_column_facts(soup.select_one(BUILDING_SECTION))
