"""Parse a single heading line."""

from .Heading import Heading
from .normalize_label import normalize_label


def parse_heading(line: str, line_number: int = 0) -> Heading | None:
    """Return the heading on ``line``, or None if it is not a heading.

    A heading is any line starting with ``#``. Every ``#`` of the leading
    run of ``#``, spaces and tabs counts towards the marker, so ``# # Title``
    has marker ``##`` and text ``Title``.
    """
    if not line.startswith("#"):
        return None

    index = 0
    marker = ""
    while index < len(line) and line[index] in "# \t":
        if line[index] == "#":
            marker += "#"
        index += 1

    text = line[index:].rstrip()
    return Heading(line_number=line_number, marker=marker, text=text, label=normalize_label(text))
