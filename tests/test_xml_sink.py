from __future__ import annotations

import io
from pathlib import Path

import pytest
from lxml import etree

import xml_sink


def test_write_records_wraps_in_root() -> None:
    buf = io.StringIO()
    written = xml_sink.write_records(["<eprint>\n</eprint>\n", "<eprint/>\n"], buf)

    assert written == 2
    assert buf.getvalue() == (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<eprints xmlns="http://eprints.org/ep2/data/2.0">\n'
        "<eprint>\n</eprint>\n"
        "<eprint/>\n"
        "</eprints>\n"
    )


def test_write_document_with_no_records_is_still_well_formed(tmp_path: Path) -> None:
    path = tmp_path / "empty.xml"
    assert xml_sink.write_document([], path) == 0

    root = etree.parse(str(path)).getroot()
    assert root.tag == f"{{{xml_sink.EPRINTS_NAMESPACE}}}eprints"
    assert len(root) == 0


def test_write_document_truncates_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "out.xml"
    path.write_text("stale content " * 100, encoding="utf-8")

    xml_sink.write_document(["<eprint/>\n"], path)

    assert "stale" not in path.read_text(encoding="utf-8")


def test_write_document_streams_until_error(tmp_path: Path) -> None:
    path = tmp_path / "out.xml"

    def records():
        yield "<eprint/>\n"
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        xml_sink.write_document(records(), path)

    text = path.read_text(encoding="utf-8")
    assert "<eprint/>" in text
    assert xml_sink.ROOT_CLOSE not in text
