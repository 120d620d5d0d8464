"""Labeled-value lookup over scraped documents.

County pages put almost everything worth extracting in a table row whose first
cell is a label and whose second cell is the value. The helpers here find those
rows in HTML (BeautifulSoup) and the equivalent key paths in JSON payloads.
Absence is always reported as ``None``; an empty cell is treated as absent.
"""
import html
import math
import re

from bs4 import BeautifulSoup, Tag

WHITESPACE_RE = re.compile(r"\s+")
BR_RE = re.compile(r"<\s*br\s*/?\s*>", re.IGNORECASE)


def clean_text(value):
    """Collapse whitespace, resolve entities and non-breaking spaces."""
    if value is None:
        return ""
    if isinstance(value, Tag):
        value = value.get_text(" ")
    text = html.unescape(str(value)).replace("\xa0", " ")
    return WHITESPACE_RE.sub(" ", text).strip()


def text_or_none(value):
    text = clean_text(value)
    return text or None


def text_of(scope, selector):
    """Cleaned text of the first element matching ``selector`` under ``scope``."""
    if scope is None:
        return None
    element = scope.select_one(selector)
    if element is None:
        return None
    return text_or_none(element)


def _label_matches(label_text, label, match):
    candidate = label_text.strip().rstrip(":").strip().lower()
    wanted = label.lower()
    if match == "exact":
        return candidate == wanted
    if match == "prefix":
        return candidate.startswith(wanted)
    if match == "contains":
        return wanted in candidate
    if match == "regex":
        return re.search(label, label_text, re.IGNORECASE) is not None
    raise ValueError(f"Unknown label match mode: {match}")


def _select_value(row, value_selector):
    selectors = (value_selector,) if isinstance(value_selector, str) else value_selector
    for selector in selectors:
        element = row.select_one(selector)
        if element is not None:
            text = text_or_none(element)
            if text:
                return text
    return None


def iter_label_rows(scope, label_selector="th"):
    """Yield ``(label_text, row)`` for every table row under ``scope`` with a label cell."""
    if scope is None:
        return
    for row in scope.find_all("tr"):
        label_el = row.select_one(label_selector)
        if label_el is None:
            continue
        yield clean_text(label_el), row


def find_value_by_label(scope, label, label_selector="th", value_selector="td", match="exact"):
    """Return the value next to ``label`` in the first matching row, or None.

    ``value_selector`` may be a tuple of selectors tried in order (for example
    ``("td span", "td")`` when the value is usually wrapped in a span).
    """
    for label_text, row in iter_label_rows(scope, label_selector):
        if not label_text or not _label_matches(label_text, label, match):
            continue
        value = _select_value(row, value_selector)
        if value:
            return value
    return None


def two_column_facts(scope):
    """Map label -> value for rows whose first two direct cells are label and value."""
    facts = {}
    if scope is None:
        return facts
    for row in scope.find_all("tr"):
        cells = row.find_all(["th", "td"], recursive=False)
        if len(cells) < 2:
            continue
        key = clean_text(cells[0])
        if key and key not in facts:
            facts[key] = clean_text(cells[1])
    return facts


def lines_from_fragment(tag):
    """Split an element's markup on <br> and return the non-empty cleaned lines."""
    if tag is None:
        return []
    lines = []
    for piece in BR_RE.split(tag.decode_contents()):
        text = clean_text(BeautifulSoup(piece, "html.parser").get_text())
        if text:
            lines.append(text)
    return lines


def find_section(soup, title_pattern):
    """Find a ``<section>`` whose header title matches ``title_pattern`` (regex, case-insensitive)."""
    for section in soup.find_all("section"):
        title = section.select_one(":scope > header .title") or section.select_one("header .title")
        if title is not None and re.search(title_pattern, clean_text(title), re.IGNORECASE):
            return section
    return None


def table_records(table):
    """Read a header row plus body rows into a list of ``{header: text}`` dicts."""
    if table is None:
        return []
    header_row = table.select_one("thead tr") or table.find("tr")
    if header_row is None:
        return []
    headers = [clean_text(cell) for cell in header_row.find_all(["th", "td"], recursive=False)]
    body_rows = table.select("tbody tr") or table.find_all("tr")[1:]
    records = []
    for row in body_rows:
        if row is header_row:
            continue
        cells = row.find_all(["th", "td"], recursive=False)
        if not cells:
            continue
        records.append({
            header: clean_text(cell)
            for header, cell in zip(headers, cells)
            if header
        })
    return records


def find_value_by_path(data, path):
    """Walk a dotted path like ``"buildings.0.bedrooms"`` through dicts and lists."""
    current = data
    for part in path.split("."):
        if isinstance(current, dict):
            current = current.get(part)
        elif isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        else:
            return None
        if current is None:
            return None
    if isinstance(current, str) and not current.strip():
        return None
    return current


def collect_values_by_key(data, pattern, results=None):
    """Collect every value whose key matches ``pattern`` anywhere in a JSON tree."""
    if results is None:
        results = []
    regex = re.compile(pattern, re.IGNORECASE) if isinstance(pattern, str) else pattern
    if isinstance(data, list):
        for item in data:
            collect_values_by_key(item, regex, results)
    elif isinstance(data, dict):
        for key, value in data.items():
            if regex.search(key):
                results.append(value)
            collect_values_by_key(value, regex, results)
    return results


def flatten_strings(values):
    """Flatten nested lists/dicts into their string leaves, preferring ``name`` fields."""
    out = []
    stack = list(values) if isinstance(values, list) else [values]
    while stack:
        value = stack.pop(0)
        if value is None:
            continue
        if isinstance(value, str):
            out.append(value)
        elif isinstance(value, list):
            stack[0:0] = value
        elif isinstance(value, dict):
            if isinstance(value.get("name"), str):
                out.append(value["name"])
                continue
            stack[0:0] = [v for v in value.values() if isinstance(v, (str, list, dict))]
    return out


def parse_int(value):
    """First run of digits in ``value`` as an int (commas ignored), else None."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = re.search(r"\d+", str(value).replace(",", ""))
    return int(match.group()) if match else None


def parse_number(value):
    """Parse a number out of text such as ``"1,234.5 SF"``; None when no number is present.

    Whole numbers come back as int so they serialize without a trailing ``.0``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    match = re.search(r"-?\d+(?:\.\d+)?", str(value).replace(",", ""))
    if not match:
        return None
    text = match.group()
    return float(text) if "." in text else int(text)


def round_half_up(value):
    """Nearest int with halves rounded up (``2.5`` -> 3), or None."""
    if value is None:
        return None
    return int(math.floor(value + 0.5))
