"""Get mdmerge home directory path or path under it."""

import os
from pathlib import Path

from ...constants import MDMERGE_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get mdmerge home directory path or path under it.

    Checks the MDMERGE_HOME environment variable first, defaults to
    ~/.mdmerge if not set.

    Examples:
        >>> get_home_dir("config.json")  # doctest: +SKIP
        Path("/Users/user/.mdmerge/config.json")
    """
    home_env = os.environ.get("MDMERGE_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / MDMERGE_HOME_EXT

    return home / Path(*parts) if parts else home
