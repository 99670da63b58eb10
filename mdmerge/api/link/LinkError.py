"""LinkError model (UNO: single model)."""

from dataclasses import dataclass

from .LinkErrorKind import LinkErrorKind


@dataclass(frozen=True)
class LinkError:
    """A link that cannot be turned into an in-document anchor.

    ``file`` is the file the link points to, ``label`` the section it points
    at (None for a direct link).
    """

    kind: LinkErrorKind
    file: str
    label: str | None = None

    @classmethod
    def label_clash(cls, file: str, label: str) -> "LinkError":
        return cls(LinkErrorKind.LABEL_CLASH, file, label)

    @classmethod
    def dead_label_link(cls, file: str, label: str) -> "LinkError":
        return cls(LinkErrorKind.DEAD_LABEL_LINK, file, label)

    @classmethod
    def dead_file_link(cls, file: str, label: str) -> "LinkError":
        return cls(LinkErrorKind.DEAD_FILE_LINK, file, label)

    @classmethod
    def direct_link(cls, file: str) -> "LinkError":
        return cls(LinkErrorKind.DIRECT_LINK, file)

    def describe(self) -> str:
        if self.kind is LinkErrorKind.LABEL_CLASH:
            return f'link to overloaded label "{self.label}" in file "{self.file}"'
        if self.kind is LinkErrorKind.DEAD_LABEL_LINK:
            return f'link to inexistent label "{self.label}" in file "{self.file}"'
        if self.kind is LinkErrorKind.DEAD_FILE_LINK:
            return f'link to inexistent file "{self.file}" (label is "{self.label}")'
        return f"direct link to file {self.file}"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "kind": self.kind.value,
            "file": self.file,
            "label": self.label,
            "message": self.describe(),
        }
