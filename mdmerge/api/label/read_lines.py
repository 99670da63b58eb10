"""Read the lines of a markdown file."""

from pathlib import Path


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of a UTF-8 file without their terminators.

    Lines are split the way the merger iterates files, so line numbers and
    headings agree between the passes.
    """
    with Path(path).open(encoding="utf-8") as fh:
        return [line.rstrip("\r\n") for line in fh]
