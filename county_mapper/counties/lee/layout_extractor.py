"""Lee County layouts.

Sub-area rows are mapped by their leading code (``FOP - FINISHED OPEN PORCH``)
to a space type; bedrooms and bathrooms come from the attribute grid counts
instead of sub-areas. A residential pool listed in the property details adds a
final Pool Area entry.
"""
import logging
import re

from county_mapper.counties.lee import detail_rows, folio_id, header_row_values
from county_mapper.lookup import clean_text, find_value_by_label, parse_int, parse_number
from county_mapper.records import LayoutBuilder, split_bathrooms
from county_mapper.utils import LAYOUT_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)

SUBAREA_CODE_MAPPING = {
    # Living areas
    "LIV": "Living Room",
    "LR": "Living Room",
    "FAM": "Family Room",
    "FR": "Family Room",
    "GR": "Great Room",
    "DIN": "Dining Room",
    "DR": "Dining Room",
    "KIT": "Kitchen",
    "K": "Kitchen",
    "KTA": "Kitchen",
    "KTG": "Kitchen",
    "BN": "Breakfast Nook",
    "PAN": "Pantry",
    # Bed and bath codes are counted from the attribute grid instead
    "BR": "Bedroom",
    "BED": "Bedroom",
    "MBR": "Primary Bedroom",
    "BA": "Full Bathroom",
    "BATH": "Full Bathroom",
    "HB": "Half Bathroom / Powder Room",
    # Utility and storage
    "LAU": "Laundry Room",
    "LAUNDRY": "Laundry Room",
    "MUD": "Mudroom",
    "CL": "Closet",
    "WIC": "Walk-in Closet",
    "MECH": "Mechanical Room",
    "STOR": "Storage Room",
    "UTIL": "Utility Closet",
    "FST": "Utility Closet",
    "UST": "Utility Closet",
    "FDU": "Detached Utility Closet",
    "UDU": "Detached Utility Closet",
    "FAT": "Attic",
    "UAT": "Attic",
    "LOFT": "Storage Loft",
    "MEF": "Storage Loft",
    "MEU": "Storage Loft",
    # Rooms
    "OFF": "Home Office",
    "AOF": "Home Office",
    "FOF": "Home Office",
    "GOF": "Home Office",
    "LIB": "Library",
    "DEN": "Den",
    "STUDY": "Study",
    "MEDIA": "Media Room / Home Theater",
    "GAME": "Game Room",
    "GYM": "Home Gym",
    "SUN": "Sunroom",
    "LBA": "Lobby / Entry Hall",
    "LBG": "Lobby / Entry Hall",
    # Garages and carports
    "GAR": "Attached Garage",
    "FGR": "Attached Garage",
    "UGR": "Attached Garage",
    "COG": "Attached Garage",
    "FLG": "Lower Garage",
    "ULG": "Lower Garage",
    "FDG": "Detached Garage",
    "UDG": "Detached Garage",
    "DETG": "Detached Garage",
    "CARP": "Carport",
    "FCP": "Attached Carport",
    "UCP": "Attached Carport",
    "LCP": "Attached Carport",
    "FDC": "Detached Carport",
    "UDC": "Detached Carport",
    "WORK": "Workshop",
    "SHED": "Shed",
    # Porches, balconies and patios
    "PORCH": "Porch",
    "BAL": "Balcony",
    "BALC": "Balcony",
    "COB": "Balcony",
    "COL": "Lanai",
    "COP": "Open Porch",
    "FOP": "Open Porch",
    "UOP": "Open Porch",
    "FEP": "Enclosed Porch",
    "UEP": "Enclosed Porch",
    "DEP": "Enclosed Porch",
    "USP": "Screened Porch",
    "DSP": "Screened Porch",
    "FSP": "Screened Porch",
    "PSE": "Screened Porch",
    "ULS": "Lower Screened Porch",
    "FLS": "Lower Screen Room",
    "PS1": "Screen Porch (1-Story)",
    "CP1": "Screen Porch (1-Story)",
    "PS2": "Screen Enclosure (2-Story)",
    "CP2": "Screen Enclosure (2-Story)",
    "PS3": "Screen Enclosure (3-Story)",
    "CPC": "Screen Enclosure (Custom)",
    "PSC": "Screen Enclosure (Custom)",
    "DECK": "Deck",
    "RFT": "Deck",
    "PATIO": "Patio",
    "PTO": "Patio",
    "CPT": "Patio",
    "OCY": "Open Courtyard",
    "CGA": "Courtyard",
    "STP": "Stoop",
    "TERR": "Terrace",
    "GAZEBO": "Gazebo",
    "FCB": "Enclosed Cabana",
    "UCB": "Enclosed Cabana",
    "OUTKIT": "Outdoor Kitchen",
    # Pools and spas
    "POOL": "Pool Area",
    "PPT": "Pool Area",
    "PLR": "Outdoor Pool",
    "CPL": "Outdoor Pool",
    "INDPOOL": "Indoor Pool",
    "SPA": "Hot Tub / Spa Area",
    "CSP": "Hot Tub / Spa Area",
    "HOTTUB": "Hot Tub / Spa Area",
    "JAZ": "Jacuzzi",
    "POOLH": "Pool House",
}

EXTERIOR_CODES = {"POOL", "SPA", "PORCH", "DECK", "PATIO", "BALC", "TERR", "GAZEBO"}
EXTERIOR_DESC_RE = re.compile(r"pool|spa|porch|deck|patio|balcony|terrace|gazebo|outdoor", re.IGNORECASE)
SUBAREA_RE = re.compile(r"^\s*([A-Z0-9]{2,8})\b(?:\s*[-–]\s*(.+))?", re.IGNORECASE)
BED_BATH_RE = re.compile(r"bedroom|bathroom|powder room", re.IGNORECASE)


def bed_bath_counts(soup):
    """``(bedrooms, bathroom count)`` from the attribute grid, else the condo details table."""
    rows = detail_rows(soup)
    grid = header_row_values(rows, "Bedrooms")
    if grid is not None and "bathrooms" in grid[0][1].lower():
        values = grid[1]
        bedrooms = parse_int(values[0]) if values else None
        baths = parse_number(values[1]) if len(values) > 1 else None
        return bedrooms or 0, baths

    bedrooms, baths = 0, None
    for table in soup.select("#PropertyDetailsCurrent table.detailsTableLeft, #PropertyDetails table.detailsTableLeft"):
        bedrooms = bedrooms or parse_int(find_value_by_label(table, "Bedrooms")) or 0
        if baths is None:
            baths = parse_number(find_value_by_label(table, "Bathrooms"))
    return bedrooms, baths


def subareas(soup):
    """Mapped, non bed/bath sub-areas with a positive area, in page order."""
    found = []
    for row in soup.select("table.appraisalAttributes tr"):
        cells = row.find_all("td")
        if len(cells) < 3:
            continue
        m = SUBAREA_RE.match(clean_text(cells[0]))
        area = parse_int(clean_text(cells[2]))
        if not m or not area:
            continue
        code = m.group(1).upper()
        description = (m.group(2) or "").strip()
        space_type = SUBAREA_CODE_MAPPING.get(code)
        if space_type is None or BED_BATH_RE.search(space_type):
            continue
        exterior = code in EXTERIOR_CODES or bool(EXTERIOR_DESC_RE.search(description))
        found.append((space_type, area, exterior))
    return found


def has_residential_pool(soup):
    return any(
        re.search(r"POOL - RESIDENTIAL", clean_text(soup.select_one(scope)), re.IGNORECASE)
        for scope in ("#PropertyDetailsCurrent", "#PropertyDetails")
    )


def run(soup, seed=None):
    builder = LayoutBuilder(seed_request_fields(seed), is_finished=True)
    for space_type, area, exterior in subareas(soup):
        builder.add(space_type, size_square_feet=area, is_exterior=exterior)

    bedrooms, baths = bed_bath_counts(soup)
    full_baths, half_baths = split_bathrooms(baths)
    builder.add_rooms(bedrooms, full_baths, half_baths)

    if has_residential_pool(soup):
        builder.add(
            "Pool Area",
            is_exterior=True,
            pool_type="BuiltIn",
            pool_equipment="Heated",
            view_type="Waterfront",
        )

    folio = folio_id(soup)
    logger.info(f"Lee {folio}: {len(builder.layouts)} layouts")
    return {f"property_{folio}": builder.payload()}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), LAYOUT_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
