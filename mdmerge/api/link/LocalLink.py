"""LocalLink model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocalLink:
    """A ``](#label)`` link to a section of the same file."""

    source: str
    label: str
    line_number: int
    column_number: int
