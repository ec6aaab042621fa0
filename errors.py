"""Exception hierarchy for the EPrints XML transform.

``FatalInputError`` aborts the whole run; ``MalformedRowError`` is skipped
with a warning unless the run is strict.
"""

from __future__ import annotations


class Eprints2XmlError(Exception):
    """Root of the transform's exception hierarchy."""


class FatalInputError(Eprints2XmlError):
    """A data row violates a rule the import job relies on."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(f"Line {line_number}: {message}: {line}")
        self.line_number = line_number
        self.line = line


class MalformedRowError(Eprints2XmlError):
    """A data row does not split into the expected number of columns."""

    def __init__(self, line_number: int, field_count: int, expected: int, line: str) -> None:
        super().__init__(
            f"Line {line_number} is invalid: expected {expected} tab-separated "
            f"fields, got {field_count}: {line}"
        )
        self.line_number = line_number
        self.field_count = field_count
        self.expected = expected
        self.line = line
