"""Extract cross-file and local links from markdown lines."""

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from .CrossFileLink import CrossFileLink
from .link_patterns import LOCAL_LINK_PATTERN, cross_file_link_pattern
from .LocalLink import LocalLink


def split_link_label(raw_label: str | None) -> str | None:
    """Label of a captured link, None when absent or empty.

    Raises:
        ValueError: If the label holds another ``#``
    """
    if not raw_label:
        return None
    if "#" in raw_label:
        raise ValueError(f"unexpected link shape, more than one '#' before label: {raw_label!r}")
    return raw_label


def extract_cross_file_links(
    source: str | Path, lines: Iterable[str], suffixes: Sequence[str] = (".md",)
) -> Iterator[CrossFileLink]:
    """Yield every ``](./path#label)`` link of a file, in file order.

    Links without the ``./`` prefix are local links and are not yielded.
    """
    pattern = cross_file_link_pattern(suffixes)
    for line_num, line in enumerate(lines, start=1):
        for match in pattern.finditer(line):
            yield CrossFileLink(
                source=str(source),
                target=match.group(1),
                label=split_link_label(match.group(2)),
                line_number=line_num,
                column_number=match.start() + 1,
            )


def extract_local_links(source: str | Path, lines: Iterable[str]) -> Iterator[LocalLink]:
    """Yield every ``](#label)`` link of a file, in file order."""
    for line_num, line in enumerate(lines, start=1):
        for match in LOCAL_LINK_PATTERN.finditer(line):
            yield LocalLink(
                source=str(source),
                label=match.group(1).strip(),
                line_number=line_num,
                column_number=match.start() + 1,
            )
