"""CrossFileLink model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CrossFileLink:
    """A ``](./path#label)`` link found in a file.

    ``target`` is relative to the directory of ``source``. ``label`` is None
    when the link points at the whole file.
    """

    source: str
    target: str
    label: str | None
    line_number: int
    column_number: int
