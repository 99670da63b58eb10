"""Context API domain: the label registry."""

from .build_context import build_context
from .Context import Context
from .ContextBuilder import ContextBuilder
from .format_clash_warnings import CLASH_WARNING_HEADER, format_clash_warnings
from .InsertResult import InsertResult

__all__ = [
    "CLASH_WARNING_HEADER",
    "Context",
    "ContextBuilder",
    "InsertResult",
    "build_context",
    "format_clash_warnings",
]
