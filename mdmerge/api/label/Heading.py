"""Heading model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    """A heading line of a markdown file."""

    line_number: int
    marker: str  # the run of "#" characters
    text: str
    label: str
