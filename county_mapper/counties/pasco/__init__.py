"""Pasco County property cards: values sit in ``#lbl<Field>`` spans."""
from county_mapper.identifiers import resolve_property_id
from county_mapper.lookup import clean_text, text_of


def label_text(soup, field):
    """Text of ``#lbl<field>``, or None."""
    return text_of(soup, f"#lbl{field}")


def meaningful(value):
    """Drop the literal ``None`` the cards print for an empty secondary slot."""
    if value is None or value.lower() == "none":
        return None
    return value


def parcel_id(soup, default="unknown"):
    def from_label_sibling():
        for element in soup.find_all(string=lambda s: clean_text(s) == "Parcel ID"):
            span = element.parent.parent.find("span")
            if span is not None and clean_text(span):
                return clean_text(span)
        return None

    return resolve_property_id([lambda: label_text(soup, "ParcelID"), from_label_sibling], default=default)
