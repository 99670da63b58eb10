"""Rewrite one line of a file for the merged document."""

import re
from collections.abc import Sequence
from pathlib import Path

from ..identity.FileIdentity import FileIdentity
from ..identity.identity_of import identity_of
from ..label.parse_heading import parse_heading
from ..link.extract_links import split_link_label
from ..link.link_patterns import LOCAL_LINK_PATTERN, cross_file_link_pattern
from ..link.resolve_link_target import resolve_link_target


def rewrite_heading(line: str, identity: FileIdentity, label: str | None = None) -> str:
    """Append an explicit ``{#<identity>-<label>}`` anchor to a heading line.

    ``label`` defaults to the label of the heading text of ``line``. Lines
    that are not headings are returned unchanged.
    """
    heading = parse_heading(line)
    if heading is None:
        return line
    return f"{heading.marker} {heading.text} {{#{identity}-{label if label is not None else heading.label}}}"


def rewrite_cross_file_links(
    line: str, source: str | Path, suffixes: Sequence[str] = (".md",), prefix: str = "n"
) -> str:
    """Point every ``](./path#label)`` link at its in-document anchor.

    Links without a label are left as they are.
    """

    def _replace(match: re.Match[str]) -> str:
        label = split_link_label(match.group(2))
        if label is None:
            return match.group(0)
        target = resolve_link_target(source, match.group(1))
        return f"](#{identity_of(target, prefix)}-{label})"

    return cross_file_link_pattern(suffixes).sub(_replace, line)


def rewrite_local_links(line: str, identity: FileIdentity) -> str:
    """Prefix every ``](#label)`` link with the identity of its own file."""
    return LOCAL_LINK_PATTERN.sub(lambda match: f"](#{identity}-{match.group(1).strip()})", line)


def rewrite_line(
    line: str,
    source: str | Path,
    identity: FileIdentity,
    suffixes: Sequence[str] = (".md",),
    local_links: bool = False,
) -> str:
    """Rewrite links, then the heading anchor, of one line of ``source``.

    The anchor label comes from the line as written, before its links are
    rewritten, so it matches the label registered for the heading.
    """
    heading = parse_heading(line)
    # Local links first: rewritten cross-file links look like local ones
    if local_links:
        line = rewrite_local_links(line, identity)
    line = rewrite_cross_file_links(line, source, suffixes, identity.prefix)
    return rewrite_heading(line, identity, heading.label if heading is not None else None)
