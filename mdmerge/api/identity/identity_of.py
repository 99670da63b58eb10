"""Resolve a path to its file identity."""

import stat
from pathlib import Path

from .FileIdentity import FileIdentity
from .IdentityError import IdentityError


def identity_of(path: str | Path, prefix: str = "n") -> FileIdentity:
    """Return the identity of the regular file at ``path``.

    Raises:
        IdentityError: If the path does not exist or is not a regular file
    """
    try:
        info = Path(path).stat()
    except OSError as exc:
        raise IdentityError(f"cannot resolve identity of {path}: {exc.strerror or exc}") from exc
    if not stat.S_ISREG(info.st_mode):
        raise IdentityError(f"cannot resolve identity of {path}: not a regular file")
    return FileIdentity(device=info.st_dev, inode=info.st_ino, prefix=prefix)
