"""Streaming XML document sink for serialized ``<eprint>`` records."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

EPRINTS_NAMESPACE = "http://eprints.org/ep2/data/2.0"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
ROOT_OPEN = f'<eprints xmlns="{EPRINTS_NAMESPACE}">\n'
ROOT_CLOSE = "</eprints>\n"

LOGGER = logging.getLogger(__name__)


def write_records(records: Iterable[str], fh: TextIO) -> int:
    """Write the wrapped document to an open text stream.

    Records are written as they arrive; nothing is buffered. If the
    iterable raises, the closing root tag is not written and the error
    propagates. Returns the number of records written.
    """
    fh.write(XML_DECLARATION)
    fh.write(ROOT_OPEN)
    written = 0
    for record in records:
        fh.write(record)
        written += 1
    fh.write(ROOT_CLOSE)
    return written


def write_document(records: Iterable[str], output_path: str | Path) -> int:
    """Create (or truncate) output_path and stream records into it."""
    path = Path(output_path)
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        written = write_records(records, fh)
    LOGGER.info("Wrote %s EPrints records to %s", written, path)
    return written
