"""Hillsborough County: the scraper saves the property-card API response as input.json."""
from county_mapper.identifiers import resolve_property_id
from county_mapper.lookup import find_value_by_path


def pin_of(data):
    """Property pin (or the card's folio), ``"unknown"`` when neither is present."""
    return resolve_property_id(
        [
            lambda: find_value_by_path(data, "pin"),
            lambda: find_value_by_path(data, "propertyCard.folio"),
        ],
        default="unknown",
    )


def first_building(data):
    buildings = find_value_by_path(data, "buildings")
    if isinstance(buildings, list) and buildings and isinstance(buildings[0], dict):
        return buildings[0]
    return {}


def construction_details(building, code):
    """Descriptions of every constructionInfo entry with element code ``code``."""
    details = []
    for item in building.get("constructionInfo") or []:
        element_code = (find_value_by_path(item, "element.code") or "").strip()
        if element_code == code:
            description = find_value_by_path(item, "constructionDetail.description")
            if description:
                details.append(description)
    return details


def construction_detail(building, code):
    details = construction_details(building, code)
    return details[0] if details else None
