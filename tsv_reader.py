"""Fixed-layout tab-separated row parsing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from errors import FatalInputError, MalformedRowError
from models import FIELD_COUNT, FIELD_NAMES, InputRow

INPUT_ENCODING = "utf-8"


def decode_lines(raw_lines: Iterable[bytes], encoding: str = INPUT_ENCODING) -> Iterator[str]:
    """Decode a binary line stream one line at a time.

    Lines end at LF only; a carriage return inside a field stays in the
    field. Undecodable bytes raise FatalInputError naming the line.
    """
    for line_number, raw in enumerate(raw_lines, start=1):
        try:
            line = raw.decode(encoding)
        except UnicodeDecodeError as exc:
            raise FatalInputError(
                f"not valid {encoding} ({exc.reason} at byte {exc.start})",
                line_number,
                clean_line(raw.decode(encoding, errors="replace")),
            ) from exc
        yield line


def clean_line(raw: str) -> str:
    """Drop the line terminator (LF or CRLF) and nothing else."""
    return raw.rstrip("\r\n")


def is_blank(line: str) -> bool:
    return not line.strip()


def parse_row(line: str, line_number: int) -> InputRow:
    """Split a cleaned line into an InputRow.

    Raises MalformedRowError when the line does not hold exactly
    FIELD_COUNT tab-separated fields. Each call builds a fresh row; nothing
    is carried over from earlier lines.
    """
    fields = line.split("\t")
    if len(fields) != FIELD_COUNT:
        raise MalformedRowError(line_number, len(fields), FIELD_COUNT, line)

    return InputRow(line_number=line_number, **dict(zip(FIELD_NAMES, fields)))
