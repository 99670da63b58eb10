"""Top-level mdmerge configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .MergeConfig import MergeConfig


class MdmergeConfig(BaseModel):
    """Top-level configuration for mdmerge."""

    model_config = ConfigDict(extra="forbid")

    merge: MergeConfig = Field(default_factory=MergeConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on MDMERGE_HOME or default to ~/.mdmerge."""
        return get_home_dir("config.json")

    @classmethod
    def get_logfile_path(cls) -> Path:
        return get_home_dir("logfile")

    @classmethod
    def load(cls) -> "MdmergeConfig":
        """Load and validate config from file.

        A missing config file yields the defaults; every section is optional.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: top level of {path} must be an object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary for serialization."""
        return {
            "merge": self.merge.model_dump(),
            "log": self.log.model_dump(),
        }
