"""Shared typed models for the TSV -> EPrints XML transform."""

from __future__ import annotations

from dataclasses import dataclass

# Column order of the bibliographic export. Fixed by contract with the
# EPrints import job; do not reorder.
FIELD_NAMES: tuple[str, ...] = (
    "source_id",
    "title",
    "authors",
    "journal",
    "doi",
    "year",
    "volume",
    "issue",
    "first_page",
    "last_page",
    "issn",
    "new_flag",
    "link1",
    "link2",
    "link3",
    "link4",
    "link5",
    "link6",
)

FIELD_COUNT = len(FIELD_NAMES)


@dataclass(frozen=True, slots=True)
class InputRow:
    """One parsed data line of the export."""

    line_number: int
    source_id: str
    title: str
    authors: str
    journal: str
    doi: str
    year: str
    volume: str
    issue: str
    first_page: str
    last_page: str
    issn: str
    new_flag: str
    link1: str
    link2: str
    link3: str
    link4: str
    link5: str
    link6: str

    @property
    def extra_links(self) -> tuple[str, ...]:
        return (self.link2, self.link3, self.link4, self.link5, self.link6)


@dataclass(frozen=True, slots=True)
class AuthorEntry:
    """A single creator parsed out of the compound author column."""

    family_name: str
    given_names: str
    identifier: str


@dataclass(frozen=True, slots=True)
class TransformOptions:
    """Run-level switches; everything else about the mapping is fixed."""

    strict: bool = False
    emit_empty_doi_link: bool = True
    include_date: bool = False


@dataclass(frozen=True, slots=True)
class TransformResult:
    rows_read: int
    records_created: int
    rows_skipped: int = 0
