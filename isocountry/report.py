"""
Prints country table rows to stdout as a text table or CSV.
"""

from __future__ import annotations

import csv
from io import StringIO
from typing import Iterable

from .country_codes import CountryCode
from .registry import country_name, format_code, numeric_code


class CountryReport:
    """Formats a set of CountryCode values for command line viewing."""

    LINE_LENGTH = 70

    def __init__(self, countries: Iterable[CountryCode], output_format: str = "text") -> None:
        self.countries = list(countries)
        self.output_format = output_format

    @staticmethod
    def _row(code: CountryCode) -> tuple[str, str, str]:
        number = numeric_code(code)
        return format_code(code), f"{number:03d}" if number else "", country_name(code)

    def _print_csv(self) -> None:
        output = StringIO()
        writer = csv.writer(output)
        writer.writerow(["Alpha-2", "Numeric", "Name"])
        for code in self.countries:
            writer.writerow(self._row(code))
        print(output.getvalue(), end="")

    def _print_table(self, title: str) -> None:
        print("=" * CountryReport.LINE_LENGTH)
        print(title)
        print("=" * CountryReport.LINE_LENGTH)
        print(f"{'Alpha-2':<8} | {'Numeric':<8} | {'Name'}")
        print("-" * CountryReport.LINE_LENGTH)
        for code in self.countries:
            alpha2, number, name = self._row(code)
            print(f"{alpha2:<8} | {number:<8} | {name}")

    def run(self, title: str = "ISO 3166-1 countries") -> None:
        if self.output_format == "csv":
            self._print_csv()
        else:
            self._print_table(title)
