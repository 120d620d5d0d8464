"""Lee County (leepa.org DisplayParcel pages)."""
from county_mapper.identifiers import query_param, regex_group, resolve_property_id
from county_mapper.lookup import clean_text

DETAIL_SCOPES = ("#PropertyDetailsCurrent", "#PropertyDetails")


def folio_id(soup, default="unknown"):
    """Folio ID from the parcel label, else from a ``FolioID=`` link."""
    return resolve_property_id(
        [
            lambda: regex_group(r"Folio\s*ID:\s*(\d+)", clean_text(soup.select_one("#parcelLabel"))),
            lambda: query_param(soup.select_one("a[href*='FolioID=']")["href"], "FolioID"),
            lambda: regex_group(r"Folio\s*ID[:#\s]*([0-9]{5,})", soup.get_text(" ")),
        ],
        default=default,
    )


def detail_rows(soup, table_class="appraisalAttributes"):
    """Rows of ``table.<table_class>`` inside the current property details panes."""
    selector = ", ".join(f"{scope} table.{table_class} tr" for scope in DETAIL_SCOPES)
    return soup.select(selector)


def header_row_values(rows, header, position=0):
    """Lee prints attribute grids as a 4-th header row followed by a value row.

    Returns ``(headers, values)`` for the first grid whose header at
    ``position`` contains ``header``, or ``None``.
    """
    for row in rows:
        headers = row.find_all("th")
        if len(headers) != 4 or header.lower() not in clean_text(headers[position]).lower():
            continue
        value_row = row.find_next_sibling("tr")
        if value_row is None:
            return None
        return [clean_text(h) for h in headers], [clean_text(td) for td in value_row.find_all("td")]
    return None
