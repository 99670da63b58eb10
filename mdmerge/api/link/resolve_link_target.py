"""Resolve a link target relative to the file it appears in."""

import os
from pathlib import Path


def resolve_link_target(source: str | Path, target: str) -> str:
    """Path of ``target`` as seen from the directory of ``source``.

    Link paths are always relative to the referencing file, never to the
    working directory.

    >>> resolve_link_target("doc/user/intro.md", "../dev/build.md")
    'doc/dev/build.md'
    """
    return os.path.normpath(os.path.join(os.path.dirname(str(source)), target))
