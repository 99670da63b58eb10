"""Shared constants for mdmerge dot-directories and artefact locations."""

MDMERGE_HOME_EXT = ".mdmerge"  # user-level state/config directory suffix

MDMERGE_HOME_DISPLAY = f"~/{MDMERGE_HOME_EXT}"  # user-readable path hint

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
