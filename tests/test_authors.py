import pytest

from authors import make_identifier, normalize_name_order, parse_author, parse_authors, split_authors
from models import AuthorEntry


def test_inverted_authors_are_flipped_and_order_preserved() -> None:
    creators = parse_authors("Smith, Jane||Doe, John")

    assert creators == [
        AuthorEntry(family_name="Smith", given_names="Jane", identifier="Smith-Jane"),
        AuthorEntry(family_name="Doe", given_names="John", identifier="Doe-John"),
    ]


def test_given_first_author_splits_on_last_space() -> None:
    author = parse_author("Mary Ann Evans")

    assert author.family_name == "Evans"
    assert author.given_names == "Mary Ann"
    assert author.identifier == "Evans-Mary-Ann"


def test_identifier_drops_periods_and_hyphenates_whitespace() -> None:
    author = parse_author("J. R. R. Tolkien")

    assert author.given_names == "J. R. R."
    assert author.identifier == "Tolkien-J-R-R"


def test_single_token_name_has_no_given_names() -> None:
    author = parse_author("Plato")

    assert author.family_name == "Plato"
    assert author.given_names == ""
    assert author.identifier == "Plato"


def test_identifiers_are_not_unique() -> None:
    assert parse_author("Jane Smith").identifier == parse_author("Smith, Jane").identifier


@pytest.mark.parametrize(("raw", "expected"), [
    ("Smith, Jane", "Jane Smith"),
    ("Crouch, Barty C., Jr.", "Barty C., Jr. Crouch"),
    ("Jane Smith", "Jane Smith"),
    (", Jane", ", Jane"),
    ("Smith,Jane", "Smith,Jane"),
])
def test_normalize_name_order(raw: str, expected: str) -> None:
    assert normalize_name_order(raw) == expected


def test_split_authors_skips_empty_entries() -> None:
    assert split_authors("A One||||B Two||") == ["A One", "B Two"]
    assert split_authors("") == []


def test_single_pipe_is_not_a_delimiter() -> None:
    assert split_authors("A One|B Two") == ["A One|B Two"]


def test_make_identifier_collapses_nothing() -> None:
    """Each whitespace character becomes its own hyphen."""
    assert make_identifier("Le  Guin", "Ursula K.") == "Le--Guin-Ursula-K"


def test_surrounding_whitespace_does_not_leak_into_identifier() -> None:
    assert parse_authors(" Smith, Jane ||Doe, John") == parse_authors("Smith, Jane||Doe, John")
    assert parse_authors("Smith, Jane ")[0].identifier == "Smith-Jane"
