"""Config API module."""

from .._output_schemas.config import ConfigShowOutput
from .LogConfig import LogConfig
from .MdmergeConfig import MdmergeConfig
from .MergeConfig import MergeConfig

__all__ = ["ConfigShowOutput", "LogConfig", "MdmergeConfig", "MergeConfig"]
