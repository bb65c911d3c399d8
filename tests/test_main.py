"""
Unit tests for the command line entrypoint and report output.
"""

import io
import os
import subprocess
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

# Add project root to path so we can import isocountry as a package
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from isocountry.country_codes import CountryCode  # noqa: E402
from isocountry.main import main, parse_args  # noqa: E402
from isocountry.report import CountryReport  # noqa: E402


def run_main(**kwargs):
    """Run main with .env loading disabled, returning (status, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    with mock.patch("isocountry.main.load_dotenv"), redirect_stdout(out), redirect_stderr(err):
        status = main(**kwargs)
    return status, out.getvalue(), err.getvalue()


def run_module(*args):
    """Run `python -m isocountry.main` in a child process without ISOCOUNTRY_* settings."""
    env = {key: value for key, value in os.environ.items() if not key.startswith("ISOCOUNTRY_")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(project_root), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    return subprocess.run(
        [sys.executable, "-m", "isocountry.main", *args],
        cwd=project_root,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=60,
    )


class TestCountryReport(unittest.TestCase):
    """Text and CSV rendering of country rows."""

    def test_text_table(self):
        """Test the fixed-width table layout with zero-padded numeric codes."""
        out = io.StringIO()
        with redirect_stdout(out):
            CountryReport([CountryCode.AF, CountryCode.PL]).run(title="Two countries")
        text = out.getvalue()
        self.assertIn("Two countries", text)
        self.assertIn("AF       | 004      | Afghanistan", text)
        self.assertIn("PL       | 616      | Poland", text)

    def test_csv(self):
        """Test CSV rows, including the all-empty UNSPECIFIED row."""
        out = io.StringIO()
        with redirect_stdout(out):
            CountryReport([CountryCode.UNSPECIFIED, CountryCode.CI], output_format="csv").run()
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], "Alpha-2,Numeric,Name")
        self.assertEqual(lines[1], ",,")
        self.assertEqual(lines[2], "CI,384,Côte d'Ivoire")


class TestParseArgs(unittest.TestCase):
    """Command line splitting into main() keyword arguments."""

    def test_no_arguments(self):
        """Test that an empty command line leaves every option unset."""
        self.assertEqual(parse_args([]), {"code": None, "name": None, "output_format": None})

    def test_positional_code(self):
        """Test that a bare argument is taken verbatim as the code."""
        self.assertEqual(parse_args(["pl"])["code"], "pl")
        self.assertEqual(parse_args([""])["code"], "")

    def test_format_is_lowercased(self):
        """Test that --format= values are lowercased."""
        args = parse_args(["ALL", "--format=CSV"])
        self.assertEqual(args, {"code": "ALL", "name": None, "output_format": "csv"})

    def test_name_keeps_equals_and_case(self):
        """Test that --name= splits on the first '=' only and keeps case."""
        self.assertEqual(parse_args(["--name=Iran"])["name"], "Iran")
        self.assertEqual(parse_args(["--name=A=b"])["name"], "A=b")


class TestMain(unittest.TestCase):
    """Lookups through main()."""

    def test_lookup_by_code(self):
        """Test looking up a single code as a text table."""
        status, out, _ = run_main(code="PL", output_format="text")
        self.assertEqual(status, 0)
        self.assertIn("Poland", out)

    def test_lookup_by_name(self):
        """Test looking up an alias, with CSV quoting of the full name."""
        status, out, _ = run_main(name="Tanzania", output_format="csv")
        self.assertEqual(status, 0)
        self.assertIn("TZ,834,\"Tanzania, United Republic of\"", out)

    def test_unknown_name(self):
        """Test that an unknown name exits 1 with nothing on stdout."""
        status, out, err = run_main(name="Atlantis", output_format="text")
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("Atlantis", err)

    def test_invalid_code(self):
        """Test that a lowercase code is rejected on stderr."""
        status, _, err = run_main(code="ru", output_format="text")
        self.assertEqual(status, 1)
        self.assertIn("Invalid country code 'ru'", err)

    def test_list_all(self):
        """Test listing every country as CSV."""
        status, out, _ = run_main(code="ALL", output_format="csv")
        self.assertEqual(status, 0)
        # header plus 249 countries
        self.assertEqual(len(out.splitlines()), 250)

    def test_invalid_format(self):
        """Test that an unsupported output format exits 1."""
        status, _, err = run_main(code="PL", output_format="xml")
        self.assertEqual(status, 1)
        self.assertIn("xml", err)

    def test_defaults_from_environment(self):
        """Test reading the default code and format from the environment."""
        env = {"ISOCOUNTRY_DEFAULT_CODE": "JP", "ISOCOUNTRY_OUTPUT_FORMAT": "CSV"}
        with mock.patch.dict(os.environ, env):
            status, out, _ = run_main()
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), ["Alpha-2,Numeric,Name", "JP,392,Japan"])


class TestModuleEntrypoint(unittest.TestCase):
    """Running `python -m isocountry.main` end to end."""

    def test_name_lookup(self):
        """Test --name= with an alias."""
        result = run_module("--name=Iran")
        self.assertEqual(result.returncode, 0)
        self.assertIn("Iran (Islamic Republic of)", result.stdout)

    def test_list_all_csv(self):
        """Test ALL with an uppercase --format= value."""
        result = run_module("ALL", "--format=CSV")
        self.assertEqual(result.returncode, 0)
        lines = result.stdout.splitlines()
        self.assertEqual(lines[0], "Alpha-2,Numeric,Name")
        self.assertEqual(lines[1], "AD,020,Andorra")
        self.assertEqual(len(lines), 250)

    def test_empty_code(self):
        """Test that an empty argument looks up UNSPECIFIED."""
        result = run_module("", "--format=csv")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout.splitlines(), ["Alpha-2,Numeric,Name", ",,"])

    def test_invalid_code(self):
        """Test that an unknown code exits 1 with the message on stderr."""
        result = run_module("ZZ")
        self.assertEqual(result.returncode, 1)
        self.assertEqual(result.stdout, "")
        self.assertIn("Invalid country code 'ZZ'", result.stderr)


if __name__ == "__main__":
    unittest.main()
