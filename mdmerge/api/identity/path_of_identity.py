"""Find the file carrying a given identity."""

import os
import stat
from pathlib import Path

from .FileIdentity import FileIdentity
from .IdentityError import IdentityError


def path_of_identity(identity: FileIdentity, root: str | Path = ".") -> Path:
    """Return the single path under ``root`` whose file has ``identity``.

    Symlinks are not followed, so a file reached through a link is reported
    under its real location.

    Raises:
        IdentityError: If no file, or more than one hard link, matches
    """
    matches: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root):
        for name in filenames:
            candidate = Path(dirpath) / name
            try:
                info = candidate.lstat()
            except OSError:
                continue
            if not stat.S_ISREG(info.st_mode):
                continue
            if info.st_ino == identity.inode and info.st_dev == identity.device:
                matches.append(candidate)

    if len(matches) != 1:
        found = ", ".join(str(p) for p in matches) or "nothing"
        raise IdentityError(f"unexpected result looking up {identity} under {root}: found {found}")
    return matches[0]
