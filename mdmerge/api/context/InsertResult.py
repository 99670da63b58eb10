"""InsertResult enum for label registration."""

from enum import Enum


class InsertResult(str, Enum):
    ADDED = "added"
    ALREADY_PRESENT = "already_present"
