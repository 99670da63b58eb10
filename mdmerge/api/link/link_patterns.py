"""Regular expressions for the links the merger understands."""

import re
from collections.abc import Sequence
from functools import lru_cache

# ](#label)
LOCAL_LINK_PATTERN = re.compile(r"\]\(#([^)]+)\)")


@lru_cache(maxsize=None)
def _cross_file_link_pattern(suffixes: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(suffix) for suffix in suffixes)
    # ](./path.md#label) or ](./path.md); an empty label counts as absent
    return re.compile(r"\]\(\./([^)#]*(?:" + alternatives + r"))(?:#([^)]*))?\)")


def cross_file_link_pattern(suffixes: Sequence[str] = (".md",)) -> re.Pattern[str]:
    """Pattern matching cross-file links to files with one of ``suffixes``.

    Group 1 is the path without its ``./`` prefix, group 2 the label or None.
    """
    if not suffixes:
        raise ValueError("At least one markdown suffix is required")
    return _cross_file_link_pattern(tuple(suffixes))
