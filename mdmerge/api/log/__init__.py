"""Log module - unified logfile."""

from .._output_schemas.log import LogStatusOutput

__all__ = [
    "LogStatusOutput",
]
