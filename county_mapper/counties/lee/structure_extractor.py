import logging
import re

from county_mapper.counties.lee import folio_id, header_row_values
from county_mapper.lookup import clean_text, parse_int
from county_mapper.owners import to_iso_date
from county_mapper.records import create_structure_object
from county_mapper.utils import STRUCTURE_FILE, load_html, read_seed, run_script, seed_request_fields, write_output

logger = logging.getLogger(__name__)


def attribute_rows(soup):
    return soup.select("table.appraisalAttributes tr")


def architectural_style(rows):
    grid = header_row_values(rows, "Improvement Type")
    style = grid[1][0] if grid and grid[1] else ""
    return "Ranch" if re.search(r"ranch", style, re.IGNORECASE) else None


def attachment(rows):
    grid = header_row_values(rows, "Stories", position=2)
    model_type = grid[1][1] if grid and len(grid[1]) > 1 else ""
    return "Detached" if re.search(r"single\s*family", model_type, re.IGNORECASE) else None


def heated_areas(rows):
    """``(finished_base_area, finished_upper_story_area)`` from heated sub-area rows."""
    base = upper = None
    for row in rows:
        cells = [clean_text(td) for td in row.find_all("td")]
        if len(cells) < 4 or not cells[2].upper().startswith("Y"):
            continue
        if re.match(r"^BAS\s*-\s*BASE", cells[0], re.IGNORECASE):
            base = parse_int(cells[3])
        elif re.match(r"^FUS\s*-\s*FINISHED\s*UPPER\s*STORY", cells[0], re.IGNORECASE):
            upper = parse_int(cells[3])
    return base, upper


def year_built(rows):
    for row in rows:
        cells = [clean_text(td) for td in row.find_all("td")]
        if len(cells) >= 4 and re.search(r"Year Built", cells[0], re.IGNORECASE):
            m = re.search(r"\d{4}", cells[2])
            if m:
                return m.group()
    return None


def roof_permit_date(soup):
    """Issue date of the first roof permit: ISO when a full date is printed, else the year."""
    for row in soup.select("#PermitDetails table.detailsTable tr"):
        cells = [clean_text(td) for td in row.find_all("td")]
        if len(cells) < 3 or not re.search(r"\broof\b", cells[1], re.IGNORECASE):
            continue
        iso = to_iso_date(cells[2])
        if iso:
            return iso
        m = re.search(r"\d{4}", cells[2])
        if m:
            return m.group()
    return None


def run(soup, seed=None):
    rows = attribute_rows(soup)
    base, upper = heated_areas(rows)
    roof_date = roof_permit_date(soup) or year_built(rows)

    structure = create_structure_object(
        seed_request_fields(seed),
        architectural_style_type=architectural_style(rows),
        attachment_type=attachment(rows),
        finished_base_area=base,
        finished_upper_story_area=upper,
        roof_date=roof_date,
        structural_damage_indicators="None Observed",
    )
    return {f"property_{folio_id(soup)}": structure}


def main(workdir="."):
    soup = load_html(workdir)
    return write_output(run(soup, read_seed(workdir)), STRUCTURE_FILE, workdir)


if __name__ == "__main__":
    run_script(main)
