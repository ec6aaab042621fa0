"""Author-string parsing for the EPrints creators list."""

from __future__ import annotations

import re

from models import AuthorEntry

AUTHOR_DELIMITER = "||"

_WHITESPACE_RE = re.compile(r"\s")


def split_authors(author_string: str) -> list[str]:
    """Split the compound author column on ``||``.

    Entries are trimmed of surrounding whitespace, so ``"Smith, Jane "`` and
    ``"Smith, Jane"`` give the same identifier. Empty entries are dropped.
    """
    return [a.strip() for a in author_string.split(AUTHOR_DELIMITER) if a.strip()]


def normalize_name_order(author: str) -> str:
    """Turn ``"Family, Given"`` into ``"Given Family"``.

    Only the first ``", "`` is considered, and only when it is not at the
    start of the string. Names already in given-first order pass through.
    """
    comma = author.find(", ")
    if comma > 0:
        return f"{author[comma + 2:]} {author[:comma]}"
    return author


def make_identifier(family_name: str, given_names: str) -> str:
    """Default creator id: ``Family-Given`` with whitespace hyphenated and periods dropped.

    A name with no given part (a single token such as ``"Plato"``) yields
    the family name alone, with no trailing hyphen.

    >>> make_identifier("Smith", "Jane Q.")
    'Smith-Jane-Q'
    >>> make_identifier("Plato", "")
    'Plato'
    """
    raw = f"{family_name}-{given_names}" if given_names else family_name
    return _WHITESPACE_RE.sub("-", raw).replace(".", "")


def parse_author(author: str) -> AuthorEntry:
    """Split one author on the last space into given names and family name.

    A single-token name becomes a family name with no given names.
    """
    name = normalize_name_order(author)
    given, _, family = name.rpartition(" ")
    return AuthorEntry(
        family_name=family,
        given_names=given,
        identifier=make_identifier(family, given),
    )


def parse_authors(author_string: str) -> list[AuthorEntry]:
    return [parse_author(a) for a in split_authors(author_string)]
