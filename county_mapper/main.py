"""Locate and run a county's mapping scripts.

Each county is a sub-package of ``county_mapper.counties`` holding some of
the four script modules. ``run_county`` imports the ones present and calls
their ``main(workdir)`` in a fixed order; the first fatal ``MappingError``
stops the run.
"""
import importlib
import importlib.util
import logging
import os
import pkgutil

from . import counties
from .exceptions import MappingError, UnknownCountyError
from .utils import print_status

logger = logging.getLogger(__name__)

COUNTIES_PACKAGE = counties.__name__

# script kind -> module name, in run order
SCRIPT_NAMES = {
    "owner": "owner_processor",
    "layout": "layout_extractor",
    "structure": "structure_extractor",
    "utility": "utility_extractor",
}


def normalize_county_name(county_name):
    """``"Palm Beach"`` / ``"palm-beach"`` -> ``"palm_beach"``."""
    return county_name.strip().lower().replace(" ", "_").replace("-", "_")


def list_counties():
    """Names of the county sub-packages that ship at least one script."""
    names = []
    for info in pkgutil.iter_modules(counties.__path__):
        if info.ispkg and available_scripts(info.name):
            names.append(info.name)
    return sorted(names)


def available_scripts(county):
    """Script kinds present for ``county``, in run order."""
    package = f"{COUNTIES_PACKAGE}.{county}"
    try:
        if importlib.util.find_spec(package) is None:
            return []
    except ModuleNotFoundError:
        return []
    return [
        kind for kind, module_name in SCRIPT_NAMES.items()
        if importlib.util.find_spec(f"{package}.{module_name}") is not None
    ]


def import_county_scripts(county, kinds=None):
    """Import the requested script modules for ``county`` as ``{kind: module}``.

    Raises UnknownCountyError when the county has none of the requested scripts.
    """
    county = normalize_county_name(county)
    present = available_scripts(county)
    if not present:
        logger.error(f"❌ No scripts found for county {county!r}")
        raise UnknownCountyError(f"Unknown county: {county}", county)

    wanted = kinds or present
    modules = {}
    for kind in wanted:
        if kind not in SCRIPT_NAMES:
            raise UnknownCountyError(f"Unknown script kind: {kind}", kind)
        if kind not in present:
            logger.warning(f"⚠️ {county} has no {SCRIPT_NAMES[kind]} script, skipping")
            continue
        module = importlib.import_module(f"{COUNTIES_PACKAGE}.{county}.{SCRIPT_NAMES[kind]}")
        modules[kind] = module
        logger.info(f"📄 Imported: {county}/{SCRIPT_NAMES[kind]}.py")

    if not modules:
        raise UnknownCountyError(f"No requested scripts available for {county}", county)
    logger.info(f"✅ Imported {len(modules)} scripts for {county}")
    return modules


def run_county(county, kinds=None, workdir="."):
    """Run a county's scripts against ``workdir``; returns 0 on success, 1 on failure."""
    workdir = os.path.abspath(workdir)
    try:
        modules = import_county_scripts(county, kinds)
        for kind, module in modules.items():
            print_status(f"Running {county} {kind} script")
            out_path = module.main(workdir)
            logger.info(f"✅ {kind}: {out_path}")
    except MappingError as e:
        logger.error(f"❌ {county} mapping failed: {e.to_dict()}")
        return 1
    return 0
