"""API module for mdmerge.

Command functions defined under this package return a StageResult and are the
single source of truth for the CLI.
"""

__all__ = []
