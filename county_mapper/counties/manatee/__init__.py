"""Manatee County: input.json bundles several scraped endpoint responses.

``OwnersAndGeneralInformation.response`` is an HTML fragment, ``Sales`` and
``Buildings`` are row-array tables. Every Manatee script fails hard when the
parcel id cannot be found.
"""
import re

from bs4 import BeautifulSoup

from county_mapper.identifiers import query_param, require_property_id
from county_mapper.lookup import clean_text, find_value_by_path, text_of

PARCEL_RE = re.compile(r"\b(\d{9,12})\b")


def owners_html(data):
    html = find_value_by_path(data, "OwnersAndGeneralInformation.response") or ""
    return BeautifulSoup(html if isinstance(html, str) else "", "html.parser")


def table_rows(data, name):
    rows = find_value_by_path(data, f"{name}.response.rows") or []
    return [row for row in rows if isinstance(row, list)]


def extract_parcel_id(data):
    """Parcel id from the owners fragment, its textarea, or the Sales request's ``parid``.

    Raises PropertyIdNotFoundError when every source misses.
    """
    soup = owners_html(data)

    def from_text():
        return PARCEL_RE.search(clean_text(soup.get_text(" "))).group(1)

    def from_textarea():
        value = text_of(soup, "textarea")
        return value if value and re.fullmatch(r"\d{9,12}", value) else None

    def from_sales_request():
        values = find_value_by_path(data, "Sales.source_http_request.multiValueQueryString.parid")
        if isinstance(values, list) and values:
            return values[0]
        url = find_value_by_path(data, "Sales.source_http_request.url")
        return query_param(url, "parid") if url else None

    return require_property_id([from_text, from_textarea, from_sales_request])
