"""Write the merged document."""

import logging
from collections.abc import Sequence
from pathlib import Path

from ..config.MergeConfig import MergeConfig
from ..identity.identity_of import identity_of
from .rewrite_line import rewrite_line

logger = logging.getLogger(__name__)


def merge_files(target: str | Path, files: Sequence[str | Path], config: MergeConfig | None = None) -> int:
    """Stream ``files``, in order, into ``target``.

    The target is truncated first and written line by line; each file is
    followed by a page break. The target is closed on every exit path, so a
    failure part way leaves a partial (invalid) document behind.

    Returns:
        Number of source lines written
    """
    config = config or MergeConfig()
    line_count = 0

    with Path(target).open("w", encoding="utf-8") as out:
        for file in files:
            identity = identity_of(file, config.identity_prefix)
            logger.debug("Merging %s as %s", file, identity)
            with Path(file).open(encoding="utf-8") as src:
                for raw_line in src:
                    line = raw_line.rstrip("\r\n")
                    out.write(rewrite_line(line, file, identity, config.suffixes, config.local_links))
                    out.write("\n")
                    line_count += 1
            out.write(f"\n\n{config.page_break}\n\n")
            out.flush()

    return line_count
