"""Row-level sanity checks and text cleanup (no XML here)."""

from __future__ import annotations

from dataclasses import replace

from errors import FatalInputError
from models import InputRow

NEW_ARTICLE_FLAG = "yes"


def validate_row(row: InputRow, line: str) -> None:
    """Raise FatalInputError if the row must not be imported.

    Every row that reaches this stage is expected to be a new article with
    a title; anything else means the upstream export changed and the whole
    run should stop rather than silently drop records.
    """
    if row.title == "":
        raise FatalInputError("missing required title", row.line_number, line)

    if row.new_flag.lower() != NEW_ARTICLE_FLAG:
        raise FatalInputError("new article flag not yes", row.line_number, line)


def strip_double_quotes(value: str) -> str:
    return value.replace('"', "")


def clean_row(row: InputRow) -> InputRow:
    """Return a copy with double quotes removed from title and authors.

    Ampersands and angle brackets are left alone: the XML serializer turns
    them into entities.
    """
    return replace(
        row,
        title=strip_double_quotes(row.title),
        authors=strip_double_quotes(row.authors),
    )
