"""
Command line lookups against the country table.

    python -m isocountry.main PL
    python -m isocountry.main ALL --format=csv
    python -m isocountry.main --name="Iran"

Defaults come from the environment (or a .env file):
    ISOCOUNTRY_DEFAULT_CODE    code looked up when no argument is given (default "PL")
    ISOCOUNTRY_OUTPUT_FORMAT   "text" or "csv" (default "text")
"""

import os
import sys
from typing import Dict, List, Optional

from dotenv import load_dotenv

from .errors import InvalidCountryCode
from .registry import from_name, iter_countries, parse
from .report import CountryReport

OUTPUT_FORMATS = ["text", "csv"]


def main(code: Optional[str] = None, name: Optional[str] = None, output_format: Optional[str] = None) -> int:
    """
    Look up one country by code or name, or list them all.

    Args:
        code: Exact alpha-2 code, or "ALL" to list every country
        name: English name or alias; takes precedence over code
        output_format: "text" or "csv"

    Returns:
        Process exit status.
    """
    load_dotenv()
    if output_format is None:
        output_format = os.getenv("ISOCOUNTRY_OUTPUT_FORMAT", "text").lower()
    if output_format not in OUTPUT_FORMATS:
        print(f"Error: Invalid format '{output_format}'. Must be 'text' or 'csv'.", file=sys.stderr)
        return 1

    if name is not None:
        country = from_name(name)
        if country is None:
            print(f"Error: Unknown country name '{name}'.", file=sys.stderr)
            return 1
        CountryReport([country], output_format=output_format).run(title=f"Country named '{name}'")
        return 0

    if code is None:
        code = os.getenv("ISOCOUNTRY_DEFAULT_CODE", "PL")

    if code == "ALL":
        CountryReport(iter_countries(), output_format=output_format).run()
        return 0

    try:
        country = parse(code)
    except InvalidCountryCode as e:
        print(f"Error: Invalid country code '{e.code}'.", file=sys.stderr)
        print("Please use an ISO 3166-1 alpha-2 code in upper case (e.g., PL, US, TZ).", file=sys.stderr)
        print("Use 'ALL' to list every country.", file=sys.stderr)
        return 1
    CountryReport([country], output_format=output_format).run(title=f"Country code '{code}'")
    return 0


def parse_args(argv: List[str]) -> Dict[str, Optional[str]]:
    """Split command line arguments into keyword arguments for main()."""
    args: Dict[str, Optional[str]] = {"code": None, "name": None, "output_format": None}
    for arg in argv:
        if arg.startswith("--format="):
            args["output_format"] = arg.split("=", 1)[1].lower()
        elif arg.startswith("--name="):
            args["name"] = arg.split("=", 1)[1]
        else:
            args["code"] = arg
    return args


if __name__ == "__main__":
    sys.exit(main(**parse_args(sys.argv[1:])))
