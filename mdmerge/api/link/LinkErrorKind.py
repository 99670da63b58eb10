"""LinkErrorKind enum."""

from enum import Enum


class LinkErrorKind(str, Enum):
    LABEL_CLASH = "label_clash"
    DEAD_LABEL_LINK = "dead_label_link"
    DEAD_FILE_LINK = "dead_file_link"
    DIRECT_LINK = "direct_link"
