"""Label API domain: headings and their anchor labels."""

from .extract_headings import extract_headings, extract_labels
from .Heading import Heading
from .normalize_label import normalize_label
from .parse_heading import parse_heading
from .read_lines import read_lines

__all__ = [
    "Heading",
    "extract_headings",
    "extract_labels",
    "normalize_label",
    "parse_heading",
    "read_lines",
]
