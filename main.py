"""CLI entrypoint: convert a bibliographic TSV export into EPrints 3 XML."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from errors import Eprints2XmlError
from models import TransformOptions
from transformer import run

_DEFAULT_OUTPUT_PATH = "ep3xml_out.xml"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    logging.warning("Ignoring unrecognized %s=%r; using default %s", name, value, default)
    return default


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags; environment variables supply the defaults."""
    parser = argparse.ArgumentParser(
        description="Create EPrints 3 XML import records from a tab-separated article export"
    )
    parser.add_argument(
        "--in",
        dest="input_path",
        default=os.getenv("EPRINTS_INPUT_PATH"),
        help="Tab-separated export, UTF-8, first row is the header (env: EPRINTS_INPUT_PATH)",
    )
    parser.add_argument(
        "--out",
        dest="output_path",
        default=os.getenv("EPRINTS_OUTPUT_PATH", _DEFAULT_OUTPUT_PATH),
        help="EPrints XML file to create (env: EPRINTS_OUTPUT_PATH)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=_env_flag("STRICT_FIELD_COUNT", False),
        help="Abort on rows without exactly 18 fields instead of skipping them",
    )
    parser.add_argument(
        "--skip-empty-doi-link",
        dest="emit_empty_doi_link",
        action="store_false",
        default=_env_flag("EMIT_EMPTY_DOI_LINK", True),
        help="Do not emit the https://doi.org/ related_url item for rows without a DOI",
    )
    parser.add_argument(
        "--include-date",
        action="store_true",
        default=_env_flag("INCLUDE_DATE_YEAR", False),
        help="Emit a <date> element from the year column",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and map every row, but write no output file",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every record at DEBUG level")

    args = parser.parse_args(argv)
    if not args.input_path:
        parser.error("an input file is required (--in or EPRINTS_INPUT_PATH)")
    return args


def main(argv: list[str] | None = None) -> int:
    """Initialize config and execute one conversion run."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    options = TransformOptions(
        strict=args.strict,
        emit_empty_doi_link=args.emit_empty_doi_link,
        include_date=args.include_date,
    )
    output_path = None if args.dry_run else args.output_path

    try:
        result = run(args.input_path, output_path, options)
    except Eprints2XmlError as exc:
        logging.error("*** %s", exc)
        return 1
    except OSError as exc:
        logging.error("*** Cannot open file: %s", exc)
        return 1

    print(f"Number of records processed:\t{result.rows_read}\n")
    print(f"Number of EPRINTS records created:\t{result.records_created}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
