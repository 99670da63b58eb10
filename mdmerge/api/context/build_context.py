"""Build the label context of a document."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..identity.FileIdentity import FileIdentity
from ..label.extract_headings import extract_labels
from ..label.read_lines import read_lines
from .Context import Context
from .ContextBuilder import ContextBuilder

logger = logging.getLogger(__name__)


def build_context(files: Sequence[str | Path], prefix: str = "n") -> tuple[Context, list[str]]:
    """Scan every file and register its labels.

    Clash detection is strictly per file. A file given twice is scanned once.

    Args:
        files: Input files, in document order
        prefix: Prefix of the identity tokens

    Returns:
        (context, warnings) where warnings name files given more than once

    Raises:
        IdentityError: If an input file cannot be resolved
        OSError: If an input file cannot be read
    """
    builder = ContextBuilder(prefix)
    warnings: list[str] = []
    scanned: dict[FileIdentity, str] = {}

    for file in files:
        identity = builder.add_file(file)
        if identity in scanned:
            warnings.append(f'File "{file}" is the same file as "{scanned[identity]}", scanned once')
            continue
        scanned[identity] = str(file)

        labels = extract_labels(read_lines(file))
        logger.debug("%s (%s): %d label(s)", file, identity, len(labels))
        for label in labels:
            builder.add_label(file, label)

    return builder.build(), warnings
