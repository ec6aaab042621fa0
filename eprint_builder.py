"""Build one EPrints 3 ``<eprint>`` element from an input row.

Element order follows what the EPrints ``import`` command was tested
against; keep it stable so output diffs cleanly between runs.
"""

from __future__ import annotations

from lxml import etree

from authors import parse_authors
from models import InputRow, TransformOptions

DOI_RESOLVER = "https://doi.org/"
SUGGESTIONS_PREFIX = "1Science ID: "
PDF_SUFFIX = ".pdf"

# Defaults applied to every record.
EPRINT_STATUS = "inbox"  # lands in the importing user's work area
EPRINT_TYPE = "article"
METADATA_VISIBILITY = "show"
ISPUBLISHED = "pub"
FULL_TEXT_STATUS = "public"
DATE_TYPE = "published"
REFEREED = "TRUE"
RIGHTS = (
    "No commercial reproduction, distribution, display or performance "
    "rights in this work are provided."
)

DOCUMENT_FORMAT = "application/pdf"
DOCUMENT_LICENSE = "other"
DOCUMENT_SECURITY = "public"


def primary_filename(link: str) -> str:
    """Last path segment of the PDF URL, forced to end in ``.pdf``."""
    filename = link.split("/")[-1]
    if filename[-4:].lower() != PDF_SUFFIX:
        filename += PDF_SUFFIX
    return filename


def _cdata(value: str) -> etree.CDATA | str:
    # CDATA cannot hold its own terminator; fall back to escaped text.
    if not value or "]]>" in value:
        return value
    return etree.CDATA(value)


def _add(parent: etree._Element, tag: str, text: etree.CDATA | str | None = None) -> etree._Element:
    child = etree.SubElement(parent, tag)
    if text is not None:
        child.text = text
    return child


def build_documents(parent: etree._Element, row: InputRow) -> etree._Element:
    """``<documents>`` with the first link as the retrievable PDF."""
    documents = _add(parent, "documents")
    document = _add(documents, "document")
    _add(document, "format", DOCUMENT_FORMAT)
    _add(document, "license", DOCUMENT_LICENSE)
    _add(document, "security", DOCUMENT_SECURITY)
    files = _add(document, "files")
    file_el = _add(files, "file")
    _add(file_el, "filename", _cdata(primary_filename(row.link1)))
    _add(file_el, "url", _cdata(row.link1))
    return documents


def build_creators(parent: etree._Element, author_string: str) -> etree._Element:
    creators = _add(parent, "creators")
    for author in parse_authors(author_string):
        item = _add(creators, "item")
        name = _add(item, "name")
        _add(name, "family", author.family_name)
        _add(name, "given", author.given_names)
        _add(item, "id", author.identifier)
    return creators


def build_related_urls(
    parent: etree._Element, row: InputRow, emit_empty_doi_link: bool = True
) -> etree._Element:
    """``<related_url>``: the DOI link first, then any extra PDF links."""
    related = _add(parent, "related_url")

    if row.doi or emit_empty_doi_link:
        item = _add(related, "item")
        _add(item, "url", DOI_RESOLVER + row.doi)
        _add(item, "type", "doi")
        _add(item, "description", "Article")

    for link in row.extra_links:
        link = link.rstrip()
        if link:
            item = _add(related, "item")
            _add(item, "url", _cdata(link))

    return related


def build_record(row: InputRow, options: TransformOptions | None = None) -> etree._Element:
    """Map a validated, cleaned row to an ``<eprint>`` element."""
    options = options or TransformOptions()
    eprint = etree.Element("eprint")

    build_documents(eprint, row)

    _add(eprint, "eprint_status", EPRINT_STATUS)
    _add(eprint, "type", EPRINT_TYPE)
    _add(eprint, "metadata_visibility", METADATA_VISIBILITY)

    build_creators(eprint, row.authors)

    _add(eprint, "title", row.title)
    _add(eprint, "ispublished", ISPUBLISHED)
    _add(eprint, "full_text_status", FULL_TEXT_STATUS)
    _add(eprint, "date_type", DATE_TYPE)
    if options.include_date and row.year:
        _add(eprint, "date", row.year)

    if row.journal:
        _add(eprint, "publication", row.journal)
    if row.volume:
        _add(eprint, "volume", row.volume)
    if row.issue:
        _add(eprint, "number", row.issue)
    if row.first_page and row.last_page:
        _add(eprint, "pagerange", f"{row.first_page}-{row.last_page}")

    _add(eprint, "refereed", REFEREED)

    # Always present, even when empty.
    _add(eprint, "issn", row.issn)
    _add(eprint, "doi", row.doi)

    build_related_urls(eprint, row, emit_empty_doi_link=options.emit_empty_doi_link)

    _add(eprint, "rights", RIGHTS)

    if row.source_id:
        _add(eprint, "suggestions", SUGGESTIONS_PREFIX + row.source_id)

    return eprint


def serialize_record(record: etree._Element) -> str:
    return etree.tostring(record, encoding="unicode", pretty_print=True)
