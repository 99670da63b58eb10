"""FileIdentity model (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileIdentity:
    """Stable token for a file, independent of the path used to reach it.

    Two paths that reach the same file (``a/../b.md`` and ``b.md``, a symlink
    and its target) share device and inode, hence the same identity. The
    string form is used as the anchor prefix in the merged document. It
    starts with ``prefix`` to keep anchors beginning with a letter and holds
    both device and inode, so files on different devices never share it.
    """

    device: int
    inode: int
    prefix: str = field(default="n", compare=False)

    def __str__(self) -> str:
        return f"{self.prefix}{self.device}x{self.inode}"
