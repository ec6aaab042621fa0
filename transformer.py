"""Row-to-record transform for the bibliographic TSV export."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from eprint_builder import build_record, serialize_record
from errors import FatalInputError, MalformedRowError
from models import InputRow, TransformOptions, TransformResult
from tsv_reader import clean_line, decode_lines, is_blank, parse_row
from validation import clean_row, validate_row
from xml_sink import write_document

LOGGER = logging.getLogger(__name__)


class RecordTransformer:
    """Turns export lines into serialized ``<eprint>`` records.

    The first line is the column header and is discarded. Counters live on
    the instance and are only meaningful once ``transform`` has been
    consumed.
    """

    def __init__(self, options: TransformOptions | None = None) -> None:
        self.options = options or TransformOptions()
        self.rows_read = 0
        self.records_created = 0
        self.rows_skipped = 0

    def result(self) -> TransformResult:
        return TransformResult(
            rows_read=self.rows_read,
            records_created=self.records_created,
            rows_skipped=self.rows_skipped,
        )

    def parse(self, raw: str, line_number: int) -> InputRow | None:
        """Parse and validate one data line.

        Returns None for lines that are skipped (blank, or malformed in
        non-strict mode). Raises FatalInputError / MalformedRowError for
        lines that must stop the run.
        """
        line = clean_line(raw)
        if is_blank(line):
            LOGGER.debug("Skipping blank line %s", line_number)
            return None

        try:
            row = parse_row(line, line_number)
        except MalformedRowError as exc:
            if self.options.strict:
                raise
            LOGGER.warning("Skipping malformed row: %s", exc)
            return None

        validate_row(row, line)
        return clean_row(row)

    def transform(self, lines: Iterable[str]) -> Iterator[str]:
        for line_number, raw in enumerate(lines, start=1):
            if line_number == 1:
                continue

            self.rows_read += 1
            row = self.parse(raw, line_number)
            if row is None:
                self.rows_skipped += 1
                continue

            try:
                record = build_record(row, self.options)
            except ValueError as exc:
                # lxml rejects control characters and other non-XML text
                raise FatalInputError(str(exc), line_number, clean_line(raw)) from exc

            self.records_created += 1
            LOGGER.debug("Built record for line %s: %s", line_number, row.title)
            yield serialize_record(record)


def run(
    input_path: str | Path,
    output_path: str | Path | None,
    options: TransformOptions | None = None,
) -> TransformResult:
    """Convert input_path into an EPrints XML document at output_path.

    With output_path None the rows are validated and mapped but nothing is
    written (dry run).
    """
    transformer = RecordTransformer(options)
    LOGGER.info("Reading %s", input_path)

    with Path(input_path).open("rb") as fh:
        records = transformer.transform(decode_lines(fh))
        if output_path is None:
            for record in records:
                LOGGER.debug("[dry-run] %s", record)
        else:
            write_document(records, output_path)

    result = transformer.result()
    LOGGER.info(
        "Run complete. rows_read=%s records_created=%s rows_skipped=%s",
        result.rows_read,
        result.records_created,
        result.rows_skipped,
    )
    return result
