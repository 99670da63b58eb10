"""Heading extractor."""

from collections.abc import Iterable

from .Heading import Heading
from .parse_heading import parse_heading


def extract_headings(lines: Iterable[str]) -> list[Heading]:
    """Extract headings in file order.

    Args:
        lines: Lines of a markdown file, without line terminators

    Returns:
        One Heading per heading line; duplicates are kept
    """
    headings: list[Heading] = []
    for line_num, line in enumerate(lines, start=1):
        heading = parse_heading(line, line_num)
        if heading is not None:
            headings.append(heading)
    return headings


def extract_labels(lines: Iterable[str]) -> list[str]:
    """Labels of every heading line, in file order, not deduplicated."""
    return [heading.label for heading in extract_headings(lines)]
