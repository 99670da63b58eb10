"""Link API domain: cross-file link extraction and validation."""

from .CrossFileLink import CrossFileLink
from .extract_links import extract_cross_file_links, extract_local_links
from .link_patterns import LOCAL_LINK_PATTERN, cross_file_link_pattern
from .LinkError import LinkError
from .LinkErrorKind import LinkErrorKind
from .LocalLink import LocalLink
from .resolve_link_target import resolve_link_target
from .validate_links import check_cross_file_link, validate_file_links, validate_links

__all__ = [
    "LOCAL_LINK_PATTERN",
    "CrossFileLink",
    "LinkError",
    "LinkErrorKind",
    "LocalLink",
    "check_cross_file_link",
    "cross_file_link_pattern",
    "extract_cross_file_links",
    "extract_local_links",
    "resolve_link_target",
    "validate_file_links",
    "validate_links",
]
