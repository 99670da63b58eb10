"""Label context: which labels each file defines."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..identity.FileIdentity import FileIdentity


@dataclass(frozen=True)
class Context:
    """Read-only view of the labels defined by a set of files.

    ``labels`` holds the first occurrence of every label of a file, in file
    order. ``clashes`` holds, for files that define a label more than once,
    those labels (each once). Every clash label is also in ``labels``.
    ``paths`` keeps the path each file was first registered under.
    """

    labels: Mapping[FileIdentity, tuple[str, ...]]
    clashes: Mapping[FileIdentity, tuple[str, ...]]
    paths: Mapping[FileIdentity, str]

    @classmethod
    def empty(cls) -> "Context":
        return cls(labels=MappingProxyType({}), clashes=MappingProxyType({}), paths=MappingProxyType({}))

    def has_file(self, identity: FileIdentity) -> bool:
        return identity in self.labels

    def has_label(self, identity: FileIdentity, label: str) -> bool:
        return label in self.labels.get(identity, ())

    def is_clash(self, identity: FileIdentity, label: str) -> bool:
        return label in self.clashes.get(identity, ())

    def path_of(self, identity: FileIdentity) -> str:
        return self.paths[identity]

    def to_dict(self) -> dict[str, list[str]]:
        """File path -> labels, in registration order."""
        return {self.paths[identity]: list(labels) for identity, labels in self.labels.items()}

    def clashes_to_dict(self) -> dict[str, list[str]]:
        """File path -> clashing labels, only for files with clashes."""
        return {self.paths[identity]: list(labels) for identity, labels in self.clashes.items() if labels}
