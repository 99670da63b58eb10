"""Check every link of a document against its label context."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..context.Context import Context
from ..identity.identity_of import identity_of
from ..identity.IdentityError import IdentityError
from ..label.read_lines import read_lines
from .CrossFileLink import CrossFileLink
from .extract_links import extract_cross_file_links, extract_local_links
from .LinkError import LinkError
from .resolve_link_target import resolve_link_target

logger = logging.getLogger(__name__)


def check_cross_file_link(context: Context, link: CrossFileLink, prefix: str = "n") -> LinkError | None:
    """Classify one cross-file link, None when it is valid.

    The checks run in order: missing label, unknown file, unknown label,
    clashing label.
    """
    target = resolve_link_target(link.source, link.target)
    if link.label is None:
        return LinkError.direct_link(target)

    try:
        identity = identity_of(target, prefix)
    except IdentityError as exc:
        logger.debug("%s:%d: %s", link.source, link.line_number, exc)
        return LinkError.dead_file_link(target, link.label)

    if not context.has_file(identity):
        return LinkError.dead_file_link(target, link.label)
    if not context.has_label(identity, link.label):
        return LinkError.dead_label_link(target, link.label)
    if context.is_clash(identity, link.label):
        return LinkError.label_clash(target, link.label)
    return None


def validate_file_links(
    context: Context,
    source: str | Path,
    suffixes: Sequence[str] = (".md",),
    prefix: str = "n",
    local_links: bool = False,
) -> list[LinkError]:
    """Errors of every link of ``source``, in file order.

    With ``local_links``, ``](#label)`` links are checked against the labels
    of ``source`` itself.
    """
    lines = read_lines(source)
    errors: list[LinkError] = []

    if local_links:
        source_identity = identity_of(source, prefix)
        for local in extract_local_links(source, lines):
            if not context.has_label(source_identity, local.label):
                errors.append(LinkError.dead_label_link(str(source), local.label))
            elif context.is_clash(source_identity, local.label):
                errors.append(LinkError.label_clash(str(source), local.label))

    for link in extract_cross_file_links(source, lines, suffixes):
        error = check_cross_file_link(context, link, prefix)
        if error is not None:
            errors.append(error)

    return errors


def validate_links(
    context: Context,
    files: Sequence[str | Path],
    suffixes: Sequence[str] = (".md",),
    prefix: str = "n",
    local_links: bool = False,
) -> dict[str, list[LinkError]]:
    """Link errors grouped by source file, in input order.

    Files without errors are omitted, so an empty result means every link is
    valid.
    """
    report: dict[str, list[LinkError]] = {}
    for source in files:
        errors = validate_file_links(context, source, suffixes, prefix, local_links)
        if errors:
            logger.debug("%s: %d broken link(s)", source, len(errors))
            report[str(source)] = errors
    return report
