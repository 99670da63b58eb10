"""Accumulate labels file by file, then freeze them into a Context."""

from pathlib import Path
from types import MappingProxyType

from ..identity.FileIdentity import FileIdentity
from ..identity.identity_of import identity_of
from .Context import Context
from .InsertResult import InsertResult


class ContextBuilder:
    """Mutable counterpart of Context, used while scanning files."""

    def __init__(self, prefix: str = "n"):
        self.prefix = prefix
        self._labels: dict[FileIdentity, list[str]] = {}
        self._seen: dict[FileIdentity, set[str]] = {}
        self._clashes: dict[FileIdentity, list[str]] = {}
        self._paths: dict[FileIdentity, str] = {}

    def add_file(self, file: str | Path) -> FileIdentity:
        """Register a file, even one without any label.

        Returns the identity of the file. A file already registered keeps its
        first path.
        """
        identity = identity_of(file, self.prefix)
        if identity not in self._labels:
            self._labels[identity] = []
            self._seen[identity] = set()
            self._paths[identity] = str(file)
        return identity

    def add_label(self, file: str | Path, label: str) -> InsertResult:
        """Add a label to a file.

        A label seen for the first time goes into the file's labels. A repeated
        one goes into the file's clashes, once, however often it repeats.
        """
        identity = self.add_file(file)
        if label not in self._seen[identity]:
            self._seen[identity].add(label)
            self._labels[identity].append(label)
            return InsertResult.ADDED

        clashes = self._clashes.setdefault(identity, [])
        if label not in clashes:
            clashes.append(label)
        return InsertResult.ALREADY_PRESENT

    def build(self) -> Context:
        return Context(
            labels=MappingProxyType({k: tuple(v) for k, v in self._labels.items()}),
            clashes=MappingProxyType({k: tuple(v) for k, v in self._clashes.items()}),
            paths=MappingProxyType(dict(self._paths)),
        )
