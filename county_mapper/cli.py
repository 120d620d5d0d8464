#!/usr/bin/env python3
"""CLI entry point for county-mapper"""

import argparse
import sys

from .main import SCRIPT_NAMES, list_counties, run_county
from .utils import setup_logging


def build_parser():
    parser = argparse.ArgumentParser(description="Map a scraped county property page to owners/*.json")
    parser.add_argument("county", nargs="?", help="County package name, e.g. lee or hillsborough")
    parser.add_argument("--scripts", nargs="+", choices=list(SCRIPT_NAMES),
                        help="Script kinds to run (default: every script the county ships)")
    parser.add_argument("--workdir", default=".", help="Directory holding input.html / input.json")
    parser.add_argument("--log-level", help="Overrides COUNTY_MAPPER_LOG_LEVEL")
    parser.add_argument("--log-dir", help="Also write a workflow log file into this directory")
    parser.add_argument("--list", action="store_true", help="List the available counties and exit")
    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for county in list_counties():
            print(county)
        return

    if not args.county:
        parser.error("a county is required unless --list is given")

    setup_logging(args.log_level, args.log_dir)
    try:
        exit_code = run_county(args.county, args.scripts, args.workdir)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        sys.exit(1)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
